from __future__ import annotations

"""
Integration tests for Logging Infrastructure.

Verifies the asynchronous QueueListener architecture, idempotency
of configuration, log file rotation and the explicit shutdown path.
"""

import logging
import time
from pathlib import Path

import pytest

from design_tokens.infra.logging import (
    LoggingConfig,
    configure_logging,
    handler_role,
    shutdown_logging,
    _CONFIGURED_FLAG_ATTR,
    _HANDLER_TAG_ATTR,
    _QUEUE_LISTENER_ATTR,
)
from design_tokens.infra.logging.handlers import build_console_handler, build_run_log_handler


@pytest.fixture(autouse=True)
def reset_logging() -> None:
    """Detach our handlers before and after each test."""
    shutdown_logging()
    yield
    shutdown_logging()


def _our_handlers():
    return [h for h in logging.getLogger().handlers if getattr(h, _HANDLER_TAG_ATTR, False)]


def test_logging_idempotency() -> None:
    """TC-01: Repeated configuration does not duplicate handlers."""
    cfg = LoggingConfig(level="INFO", console=True)

    configure_logging(cfg)
    initial = len(_our_handlers())
    configure_logging(cfg)

    assert len(_our_handlers()) == initial == 1


def test_force_replaces_listener() -> None:
    """TC-02: force=True stops the previous listener and installs a new one."""
    configure_logging(LoggingConfig(level="INFO"))
    first = getattr(logging.getLogger(), _QUEUE_LISTENER_ATTR)

    configure_logging(LoggingConfig(level="DEBUG"), force=True)
    second = getattr(logging.getLogger(), _QUEUE_LISTENER_ATTR)

    assert first is not second
    assert len(_our_handlers()) == 1
    assert logging.getLogger().level == logging.DEBUG


def test_log_rotation(tmp_path: Path) -> None:
    """TC-03: The run log rotates once the size limit is exceeded."""
    log_file = tmp_path / "run.log"
    cfg = LoggingConfig(
        level="DEBUG",
        console=False,
        log_file=str(log_file),
        max_bytes=100,
        backup_count=1,
    )

    configure_logging(cfg)
    logger = logging.getLogger("test_rotate")
    for _ in range(10):
        logger.debug("Resolving token references across the corpus." * 5)

    # Give time for the QueueListener to process
    time.sleep(0.5)

    assert log_file.exists()
    assert (tmp_path / "run.log.1").exists(), "Rotation backup file was not created."


def test_shutdown_flushes_and_detaches(tmp_path: Path) -> None:
    """TC-04: Shutdown drains pending records and removes our handlers."""
    log_file = tmp_path / "nested" / "run.log"
    configure_logging(LoggingConfig(level="INFO", console=False, log_file=str(log_file)))

    logging.getLogger("design_tokens.test").info("Processing: core.inp.json")
    shutdown_logging()

    root = logging.getLogger()
    assert "Processing: core.inp.json" in log_file.read_text(encoding="utf-8")
    assert _our_handlers() == []
    assert not hasattr(root, _CONFIGURED_FLAG_ATTR)
    assert getattr(root, _QUEUE_LISTENER_ATTR, None) is None


def test_shutdown_twice_is_safe() -> None:
    """TC-05: A second shutdown (e.g. from atexit) is a no-op."""
    configure_logging(LoggingConfig(level="INFO"))
    shutdown_logging()
    shutdown_logging()

    assert _our_handlers() == []


def test_unopenable_log_file_does_not_abort(tmp_path: Path, capsys) -> None:
    """TC-06: A log file that cannot be opened only produces a warning."""
    blocker = tmp_path / "blocker"
    blocker.write_text("x", encoding="utf-8")

    configure_logging(LoggingConfig(level="INFO", console=True, log_file=str(blocker / "run.log")))

    assert "Cannot open log file" in capsys.readouterr().err
    assert len(_our_handlers()) == 1


def test_sinks_are_tagged_by_role(tmp_path: Path) -> None:
    """TC-07: Each sink carries its role; foreign handlers have none."""
    formatter = logging.Formatter("%(message)s")
    console = build_console_handler(logging.INFO, formatter)
    run_log = build_run_log_handler(str(tmp_path / "run.log"), logging.INFO, formatter, 1024, 1)
    try:
        assert handler_role(console) == "console"
        assert handler_role(run_log) == "run-log"
        assert handler_role(logging.NullHandler()) is None
    finally:
        run_log.close()


def test_run_log_path_expands_home(tmp_path: Path, monkeypatch) -> None:
    """TC-08: '~' in --log-file resolves against the home directory."""
    monkeypatch.setenv("HOME", str(tmp_path))

    handler = build_run_log_handler("~/logs/run.log", logging.INFO, logging.Formatter(), 1024, 1)
    try:
        assert handler is not None
        assert Path(handler.baseFilename) == tmp_path / "logs" / "run.log"
    finally:
        handler.close()


def test_root_carries_only_the_queue_handler() -> None:
    """TC-09: Sinks live on the listener; the root logger only gets the queue."""
    configure_logging(LoggingConfig(level="INFO", console=True))

    assert [handler_role(h) for h in _our_handlers()] == ["queue"]
