"""Generic name → implementation registries with enable/select semantics."""

from __future__ import annotations

import copy
import logging
from collections.abc import Iterable, Iterator, Mapping
from typing import Generic, TypeVar

from pyvcr import assertion
from pyvcr.errors import InvalidArgumentError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def as_name_list(names: str | Iterable[str]) -> list[str]:
    """Normalize a single name or an iterable of names into a list."""
    if isinstance(names, str):
        return [names]
    return list(names)


class CapabilityRegistry(Generic[T]):
    """Ordered mapping of unique names to implementations.

    Insertion order is kept on every read; re-adding a name replaces its
    implementation in place.
    """

    def __init__(self, label: str, available: Mapping[str, T] | None = None):
        self.label = label
        self._available: dict[str, T] = dict(available or {})

    def copy(self) -> CapabilityRegistry[T]:
        """Return an independent registry holding the same implementations."""
        clone = copy.copy(self)
        clone._available = dict(self._available)
        return clone

    def add(self, name: str, implementation: T) -> None:
        self._available[name] = implementation

    def get(self, name: str) -> T:
        return self._available[name]

    def names(self) -> list[str]:
        return list(self._available)

    def unknown(self, names: Iterable[str]) -> list[str]:
        """Return the requested names that are not registered, in request order."""
        missing: list[str] = []
        for name in names:
            if name not in self._available and name not in missing:
                missing.append(name)
        return missing

    def __contains__(self, name: object) -> bool:
        return name in self._available

    def __iter__(self) -> Iterator[str]:
        return iter(self._available)

    def __len__(self) -> int:
        return len(self._available)


class MultiSelectRegistry(CapabilityRegistry[T]):
    """Registry where any subset of entries can be active (all by default)."""

    def __init__(self, label: str, available: Mapping[str, T] | None = None):
        super().__init__(label, available)
        self._enabled: tuple[str, ...] | None = None

    @property
    def enabled(self) -> tuple[str, ...] | None:
        """The names passed to the last enable() call, or None when all are active."""
        return self._enabled

    def enable(self, names: str | Iterable[str]) -> None:
        """Activate exactly ``names``.

        Every name is checked before anything changes: one unknown name
        rejects the whole call and the previous selection stays in place.
        """
        requested = tuple(as_name_list(names))
        invalid = self.unknown(requested)
        if invalid:
            raise InvalidArgumentError(
                f"{self.label} don't exist: {', '.join(str(name) for name in invalid)}"
            )

        self._enabled = requested
        logger.debug("Enabled %s: %s", self.label.lower(), ", ".join(requested))

    def active_names(self) -> list[str]:
        if self._enabled is None:
            return self.names()
        enabled = set(self._enabled)
        return [name for name in self._available if name in enabled]

    def active(self) -> list[T]:
        """Implementations of the active entries, in registration order."""
        return [self._available[name] for name in self.active_names()]


class SingleSelectRegistry(CapabilityRegistry[T]):
    """Registry with exactly one selected entry."""

    def __init__(self, label: str, available: Mapping[str, T], selected: str):
        super().__init__(label, available)
        assertion.key_exists(self, selected, f"{label} '{selected}' not available.")
        self._selected = selected

    @property
    def selected(self) -> str:
        return self._selected

    def select(self, name: str) -> None:
        assertion.key_exists(self, name, f"{self.label} '{name}' not available.")
        self._selected = name
        logger.debug("Selected %s: %s", self.label.lower(), name)

    def active(self) -> T:
        return self._available[self._selected]
