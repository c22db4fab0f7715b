"""Precondition helpers that raise typed pyvcr errors.

Each helper takes the message to raise with, so callers phrase the error
in terms of what the user configured.
"""

from __future__ import annotations

import os
from collections.abc import Container
from typing import Any

from pyvcr.errors import ConfigurationError, InvalidArgumentError, KeyNotFoundError


def directory(path: str | os.PathLike, message: str) -> None:
    """Raise ConfigurationError unless ``path`` is an existing directory."""
    if not isinstance(path, (str, os.PathLike)) or not os.path.isdir(path):
        raise ConfigurationError(message)


def min_length(value: Any, length: int, message: str) -> None:
    if not isinstance(value, str) or len(value) < length:
        raise InvalidArgumentError(message)


def is_callable(value: Any, message: str) -> None:
    if not callable(value):
        raise InvalidArgumentError(message)


def key_exists(container: Container, key: Any, message: str) -> None:
    if key not in container:
        raise KeyNotFoundError(message)
