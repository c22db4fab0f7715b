"""Implementation references — lazy pointers to hooks, storages and matchers.

The registry never imports the implementations it lists. Entries are either
plain callables or one of the references below, which resolve their target
on demand.
"""

from __future__ import annotations

import importlib
from dataclasses import dataclass
from typing import Any

from pyvcr.errors import ConfigurationError


def import_object(path: str) -> Any:
    """Import ``package.module:Name`` (or ``package.module.Name``) and return it."""
    if ":" in path:
        module_name, _, attr_path = path.partition(":")
    else:
        module_name, _, attr_path = path.rpartition(".")

    if not module_name or not attr_path:
        raise ConfigurationError(f"Invalid import path '{path}'")

    try:
        obj = importlib.import_module(module_name)
    except ImportError as e:
        raise ConfigurationError(f"Cannot import module '{module_name}': {e}") from e

    for attr in attr_path.split("."):
        try:
            obj = getattr(obj, attr)
        except AttributeError as e:
            raise ConfigurationError(f"'{module_name}' has no attribute '{attr_path}'") from e
    return obj


@dataclass(frozen=True)
class ClassRef:
    """Reference to a class (or any importable object) by import path."""

    path: str

    def resolve(self) -> Any:
        return import_object(self.path)

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        return self.resolve()(*args, **kwargs)

    def __str__(self) -> str:
        return self.path


@dataclass(frozen=True)
class MethodRef:
    """Reference to a method on an importable class, e.g. a static matcher."""

    class_path: str
    method: str

    def resolve(self) -> Any:
        owner = import_object(self.class_path)
        try:
            return getattr(owner, self.method)
        except AttributeError as e:
            raise ConfigurationError(
                f"'{self.class_path}' has no method '{self.method}'"
            ) from e

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        return self.resolve()(*args, **kwargs)

    def __str__(self) -> str:
        return f"{self.class_path}.{self.method}"
