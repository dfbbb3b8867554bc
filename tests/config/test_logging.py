from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from typing import TYPE_CHECKING

import pytest

from service_registration.config import configure_logging
from service_registration.config.logging import LOG_BACKUP_COUNT, LOG_MAX_BYTES

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path


@pytest.fixture
def restore_root_logger() -> Iterator[logging.Logger]:
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    try:
        yield root
    finally:
        for handler in root.handlers:
            if handler not in handlers:
                handler.close()
        root.handlers[:] = handlers
        root.setLevel(level)


def test_logs_to_rotating_file(tmp_path: Path, restore_root_logger: logging.Logger) -> None:
    log_file = tmp_path / "service-registration.log"

    configure_logging(level="DEBUG", log_file=str(log_file), force=True)
    logging.getLogger("service_registration.test").info("hello")

    (handler,) = restore_root_logger.handlers
    assert isinstance(handler, RotatingFileHandler)
    assert handler.maxBytes == LOG_MAX_BYTES
    assert handler.backupCount == LOG_BACKUP_COUNT
    handler.flush()
    assert "INFO [service_registration.test] hello" in log_file.read_text()


def test_unwritable_log_file_falls_back_to_stderr(
    tmp_path: Path, restore_root_logger: logging.Logger
) -> None:
    configure_logging(log_file=str(tmp_path / "missing" / "app.log"), force=True)

    (handler,) = restore_root_logger.handlers
    assert type(handler) is logging.StreamHandler


def test_level_and_file_come_from_environment(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, restore_root_logger: logging.Logger
) -> None:
    monkeypatch.setenv("SERVICE_REGISTRATION_LOG_FILE", str(tmp_path / "env.log"))
    monkeypatch.setenv("SERVICE_REGISTRATION_LOG_LEVEL", "warning")

    configure_logging(force=True)

    assert restore_root_logger.level == logging.WARNING
    (handler,) = restore_root_logger.handlers
    assert isinstance(handler, RotatingFileHandler)
    assert handler.baseFilename == str(tmp_path / "env.log")
