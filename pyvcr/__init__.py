"""pyvcr — configuration registry for recording and replaying HTTP interactions."""

from __future__ import annotations

from pyvcr.configuration import Configuration
from pyvcr.errors import ConfigurationError, InvalidArgumentError, KeyNotFoundError, VCRError

__version__ = "0.1.0"

__all__ = [
    "Configuration",
    "ConfigurationError",
    "InvalidArgumentError",
    "KeyNotFoundError",
    "VCRError",
    "configure",
]

_configuration: Configuration | None = None


def configure(reset: bool = False) -> Configuration:
    """Return the process-wide Configuration, creating it on first use."""
    global _configuration
    if _configuration is None or reset:
        _configuration = Configuration()
    return _configuration
