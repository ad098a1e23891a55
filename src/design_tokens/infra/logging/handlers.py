from __future__ import annotations

"""
Log Sinks of the Converter.

A run writes to at most two sinks: the stderr console and the optional
``--log-file`` run log. Every handler built here is tagged with its role so
that reconfiguration and shutdown only ever touch handlers this package
installed, never the ones owned by the host (pytest, embedding tools).
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

from design_tokens.infra.fs import resolve_user_path

_HANDLER_TAG_ATTR: str = "_design_tokens_handler"

ROLE_CONSOLE = "console"
ROLE_RUN_LOG = "run-log"
ROLE_QUEUE = "queue"


# ==============================================================================
# TAGGING
# ==============================================================================

def _tag_handler(handler: logging.Handler, role: str) -> None:
    setattr(handler, _HANDLER_TAG_ATTR, role)


def handler_role(handler: logging.Handler) -> Optional[str]:
    """Return the sink role of one of our handlers, or None for foreign ones."""
    role = getattr(handler, _HANDLER_TAG_ATTR, None)
    return role if isinstance(role, str) else None


def _is_our_handler(handler: logging.Handler) -> bool:
    return handler_role(handler) is not None


# ==============================================================================
# SINK FACTORIES
# ==============================================================================

def build_console_handler(level_int: int, formatter: logging.Formatter) -> logging.Handler:
    """
    Create the stderr sink. stdout is reserved for the run summary and JSON.
    """
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level_int)
    handler.setFormatter(formatter)
    _tag_handler(handler, ROLE_CONSOLE)
    return handler


def build_run_log_handler(
        log_file: str,
        level_int: int,
        formatter: logging.Formatter,
        max_bytes: int,
        backup_count: int,
) -> Optional[RotatingFileHandler]:
    """
    Create the rotating run log requested with ``--log-file``.

    The path goes through the same ``~`` expansion as the archive and output
    arguments. A log file that cannot be opened is reported on stderr and
    skipped; the conversion itself still runs.

    Args:
        log_file: Path given on the command line.
        level_int: Numeric logging level.
        formatter: Formatter for file records.
        max_bytes: Size at which the log rolls over.
        backup_count: Rolled-over files to keep.

    Returns:
        Optional[RotatingFileHandler]: The sink, or None when unavailable.
    """
    path = resolve_user_path(log_file)
    try:
        os.makedirs(os.path.dirname(path), exist_ok=True)
        handler = RotatingFileHandler(
            path,
            maxBytes=int(max_bytes),
            backupCount=int(backup_count),
            encoding="utf-8",
        )
    except OSError as e:
        sys.stderr.write(f"WARNING: Cannot open log file '{path}': {e}\n")
        return None

    handler.setLevel(level_int)
    handler.setFormatter(formatter)
    _tag_handler(handler, ROLE_RUN_LOG)
    return handler
