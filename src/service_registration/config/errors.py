"""Configuration error definitions."""

from __future__ import annotations


class ConfigurationError(RuntimeError):
    """Raised when configuration values are invalid."""


class MalformedConfigurationError(ConfigurationError):
    """Raised when a bootstrap file exists but cannot be parsed."""
