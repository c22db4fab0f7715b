"""Configuration — which hooks, storage and matchers a recorder uses.

Holds the options of a video recorder:
- which library hooks intercept HTTP traffic,
- where cassettes are stored and in which format,
- which request matchers decide whether two requests are the same,
- which source files the instrumentation filter scans (white/black lists).
"""

from __future__ import annotations

import copy
import logging
import os
from collections.abc import Callable, Iterable
from typing import Any

from pyvcr import assertion
from pyvcr.registry.capability_registry import (
    MultiSelectRegistry,
    SingleSelectRegistry,
    as_name_list,
)
from pyvcr.registry.models import ClassRef, MethodRef

logger = logging.getLogger(__name__)

DEFAULT_CASSETTE_PATH = "tests/fixtures"

# All are enabled by default
DEFAULT_LIBRARY_HOOKS = {
    "stream_wrapper": ClassRef("pyvcr.library_hooks.stream_wrapper_hook:StreamWrapperHook"),
    "curl": ClassRef("pyvcr.library_hooks.curl_hook:CurlHook"),
    "soap": ClassRef("pyvcr.library_hooks.soap_hook:SoapHook"),
}

# Yaml by default
DEFAULT_STORAGE = "yaml"
DEFAULT_STORAGES = {
    "json": ClassRef("pyvcr.storage.json:Json"),
    "yaml": ClassRef("pyvcr.storage.yaml:Yaml"),
}

_MATCHER_CLASS = "pyvcr.request_matcher:RequestMatcher"

# All are enabled by default
DEFAULT_REQUEST_MATCHERS = {
    name: MethodRef(_MATCHER_CLASS, f"match_{name}")
    for name in ("method", "url", "host", "headers", "body", "post_fields", "query_string")
}

DEFAULT_WHITE_LIST: list[str] = []
DEFAULT_BLACK_LIST = ["pyvcr/library_hooks/", "pyvcr/util/soap_client", "tests/pyvcr/filter"]


class Configuration:
    """Registry of the active recorder capabilities and paths.

    Mutators validate their whole input before changing anything and return
    the instance so calls can be chained::

        config.set_storage("json").enable_request_matchers(["method", "url"])
    """

    def __init__(self):
        self._cassette_path = DEFAULT_CASSETTE_PATH
        self._library_hooks = MultiSelectRegistry("Library hooks", DEFAULT_LIBRARY_HOOKS)
        self._storages = SingleSelectRegistry("Storage", DEFAULT_STORAGES, DEFAULT_STORAGE)
        self._request_matchers: MultiSelectRegistry[Callable] = MultiSelectRegistry(
            "Request matchers", DEFAULT_REQUEST_MATCHERS
        )
        self._white_list = list(DEFAULT_WHITE_LIST)
        self._black_list = list(DEFAULT_BLACK_LIST)

    def copy(self) -> Configuration:
        """Return an independent Configuration with the same settings and matchers."""
        clone = copy.copy(self)
        clone._library_hooks = self._library_hooks.copy()
        clone._storages = self._storages.copy()
        clone._request_matchers = self._request_matchers.copy()
        clone._white_list = list(self._white_list)
        clone._black_list = list(self._black_list)
        return clone

    # ── Path lists ───────────────────────────────────────────────────

    def get_black_list(self) -> list[str]:
        return list(self._black_list)

    def set_black_list(self, paths: str | Iterable[str]) -> Configuration:
        self._black_list = as_name_list(paths)
        return self

    def get_white_list(self) -> list[str]:
        """Relative class file paths the filter is restricted to (empty: no restriction)."""
        return list(self._white_list)

    def set_white_list(self, paths: str | Iterable[str]) -> Configuration:
        self._white_list = as_name_list(paths)
        return self

    # ── Cassette path ────────────────────────────────────────────────

    def get_cassette_path(self, check: bool = True) -> str:
        """Return the directory cassettes are stored in.

        The directory is checked on every call, so a directory removed after
        it was configured is reported here. Pass ``check=False`` to read the
        configured value without touching the filesystem.
        """
        if check:
            self._assert_valid_cassette_path(self._cassette_path)
        return self._cassette_path

    def set_cassette_path(self, cassette_path: str | os.PathLike) -> Configuration:
        """Set the cassette directory; path objects are stored as strings."""
        self._assert_valid_cassette_path(cassette_path)
        self._cassette_path = os.fspath(cassette_path)
        logger.debug("Cassette path set to %s", cassette_path)
        return self

    @staticmethod
    def _assert_valid_cassette_path(cassette_path: str | os.PathLike) -> None:
        assertion.directory(
            cassette_path,
            f"Cassette path '{cassette_path}' is not a directory. Please either "
            "create it or set a different cassette path using "
            "pyvcr.configure().set_cassette_path('directory').",
        )

    # ── Library hooks ────────────────────────────────────────────────

    def get_library_hooks(self) -> list[Any]:
        return self._library_hooks.active()

    def get_enabled_library_hook_names(self) -> list[str]:
        return self._library_hooks.active_names()

    def enable_library_hooks(self, hooks: str | Iterable[str]) -> Configuration:
        self._library_hooks.enable(hooks)
        return self

    # ── Storage ──────────────────────────────────────────────────────

    def get_storage(self) -> Any:
        return self._storages.active()

    def get_storage_name(self) -> str:
        return self._storages.selected

    def set_storage(self, storage_name: str) -> Configuration:
        self._storages.select(storage_name)
        return self

    # ── Request matchers ─────────────────────────────────────────────

    def get_request_matchers(self) -> list[Callable]:
        return self._request_matchers.active()

    def get_enabled_request_matcher_names(self) -> list[str]:
        return self._request_matchers.active_names()

    def add_request_matcher(self, name: str, callback: Callable) -> Configuration:
        """Register (or replace) a request matcher under ``name``.

        The matcher only becomes active once it is enabled, unless no
        explicit selection was made, in which case every matcher is active.
        """
        assertion.min_length(
            name, 1, f"A request matchers name must be at least one character long. Found '{name}'"
        )
        assertion.is_callable(callback, f"Request matcher '{name}' is not callable.")
        self._request_matchers.add(name, callback)
        logger.debug("Added request matcher %s", name)
        return self

    def enable_request_matchers(self, matchers: str | Iterable[str]) -> Configuration:
        self._request_matchers.enable(matchers)
        return self
