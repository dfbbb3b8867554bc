"""Shared logging helpers for the service registration daemon."""

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler

from .env import env_path, env_str

ENV_LOG_FILE = "SERVICE_REGISTRATION_LOG_FILE"
ENV_LOG_LEVEL = "SERVICE_REGISTRATION_LOG_LEVEL"
DEFAULT_LOG_FILE = "/var/log/service-registration.log"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
LOG_MAX_BYTES = 10 * 1024 * 1024
LOG_BACKUP_COUNT = 1


def _build_handler(log_file: str | None) -> logging.Handler:
    if log_file:
        try:
            return RotatingFileHandler(
                log_file,
                maxBytes=LOG_MAX_BYTES,
                backupCount=LOG_BACKUP_COUNT,
                encoding="utf-8",
            )
        except OSError as exc:
            print(  # noqa: T201
                f"Cannot open log file {log_file} ({exc}), logging to stderr",
                file=sys.stderr,
            )
    return logging.StreamHandler(sys.stderr)


def configure_logging(
    *,
    level: int | str | None = None,
    log_file: str | None = None,
    force: bool = False,
) -> None:
    """Initialise the root logger once, writing to a size-rotated file.

    ``log_file`` and ``level`` default to the ``SERVICE_REGISTRATION_LOG_FILE``
    and ``SERVICE_REGISTRATION_LOG_LEVEL`` environment variables. An empty log
    file path, or one that cannot be opened, logs to stderr instead. Pass
    ``force=True`` to reconfigure during tests.
    """

    effective_file = (
        log_file if log_file is not None else str(env_path(ENV_LOG_FILE, DEFAULT_LOG_FILE))
    )
    effective_level = level if level is not None else env_str(ENV_LOG_LEVEL, "INFO").upper()

    logging.basicConfig(
        level=effective_level,
        format=LOG_FORMAT,
        handlers=[_build_handler(effective_file)],
        force=force,
    )
