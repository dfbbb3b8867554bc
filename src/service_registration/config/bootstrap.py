"""Blocking readers for the Ambari bootstrap files.

Both files are YAML documents with an ``ambari`` section. They are written by
provisioning after this process may already be running, so readers poll until
the file exists and the required fields are filled in. A file that exists but
cannot be parsed is a fatal configuration error.
"""

from __future__ import annotations

import time
from collections.abc import Callable
from logging import getLogger
from typing import TYPE_CHECKING

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from .errors import MalformedConfigurationError

if TYPE_CHECKING:
    from pathlib import Path

log = getLogger(__name__)

REQUEST_SLEEP_SECONDS = 5.0

Sleeper = Callable[[float], None]


def _scalar_to_str(value: object) -> object:
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, int | float):
        return str(value)
    return value


class AmbariSection(BaseModel):
    model_config = ConfigDict(extra="ignore")

    server: str | None = None
    username: str | None = None
    password: str | None = None

    @field_validator("server", "username", "password", mode="before")
    @classmethod
    def _coerce_scalars(cls, value: object) -> object:
        # YAML reads unquoted ``8080`` or ``yes`` as numbers and booleans.
        return _scalar_to_str(value)


class BootstrapDocument(BaseModel):
    model_config = ConfigDict(extra="ignore")

    ambari: AmbariSection | None = None

    @property
    def section(self) -> AmbariSection:
        return self.ambari or AmbariSection()


def parse_bootstrap_document(content: str, *, source: str = "<string>") -> BootstrapDocument | None:
    """Parse a bootstrap document; ``None`` means the content is still empty."""

    try:
        raw = yaml.safe_load(content)
    except yaml.YAMLError as exc:
        raise MalformedConfigurationError(f"Cannot parse file: {source}") from exc
    if raw is None:
        return None
    if not isinstance(raw, dict):
        raise MalformedConfigurationError(f"Cannot parse file: {source} (expected a mapping)")
    try:
        return BootstrapDocument.model_validate(raw)
    except ValidationError as exc:
        raise MalformedConfigurationError(f"Cannot parse file: {source}") from exc


def wait_for_file(
    path: Path,
    *,
    sleep: Sleeper = time.sleep,
    interval: float = REQUEST_SLEEP_SECONDS,
) -> None:
    while not path.exists():
        log.info("File not found at location: %s", path)
        sleep(interval)
    log.info("Found file at location: %s", path)


def _read_section(path: Path) -> AmbariSection | None:
    try:
        content = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return None
    except (OSError, UnicodeDecodeError) as exc:
        raise MalformedConfigurationError(f"Cannot read file: {path} ({exc})") from exc
    document = parse_bootstrap_document(content, source=str(path))
    return document.section if document is not None else None


def read_credentials(
    path: Path,
    *,
    sleep: Sleeper = time.sleep,
    interval: float = REQUEST_SLEEP_SECONDS,
) -> tuple[str, str]:
    """Block until ``path`` holds a username and password, then return them."""

    wait_for_file(path, sleep=sleep, interval=interval)
    while True:
        section = _read_section(path)
        if section is not None and section.username and section.password:
            log.info("Ambari credentials found")
            return section.username, section.password
        log.info("Ambari credentials are empty, waiting..")
        sleep(interval)


def read_server(
    path: Path,
    *,
    sleep: Sleeper = time.sleep,
    interval: float = REQUEST_SLEEP_SECONDS,
) -> str:
    """Block until ``path`` holds the Ambari server address, then return it."""

    wait_for_file(path, sleep=sleep, interval=interval)
    while True:
        section = _read_section(path)
        if section is not None and section.server:
            log.info("Ambari server found")
            return section.server
        log.info("Ambari server is empty, waiting..")
        sleep(interval)
