from __future__ import annotations

from .config import LoggingConfig
from .core import (
    _CONFIGURED_FLAG_ATTR,
    _QUEUE_LISTENER_ATTR,
    configure_logging,
    get_logger,
    shutdown_logging,
)
from .handlers import _HANDLER_TAG_ATTR, handler_role

__all__ = [
    "LoggingConfig",
    "configure_logging",
    "get_logger",
    "handler_role",
    "shutdown_logging",
]
