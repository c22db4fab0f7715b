"""Tests for the generic capability registries."""

import pytest

from pyvcr.errors import InvalidArgumentError, KeyNotFoundError
from pyvcr.registry.capability_registry import (
    CapabilityRegistry,
    MultiSelectRegistry,
    SingleSelectRegistry,
    as_name_list,
)

AVAILABLE = {"a": "impl-a", "b": "impl-b", "c": "impl-c"}


def test_as_name_list_wraps_single_name():
    assert as_name_list("a") == ["a"]
    assert as_name_list(("a", "b")) == ["a", "b"]
    assert as_name_list([]) == []


def test_registry_keeps_insertion_order():
    reg = CapabilityRegistry("Things", AVAILABLE)
    assert reg.names() == ["a", "b", "c"]
    assert list(reg) == ["a", "b", "c"]
    assert len(reg) == 3
    assert "b" in reg
    assert "z" not in reg


def test_add_overwrites_in_place():
    reg = CapabilityRegistry("Things", AVAILABLE)
    reg.add("a", "new-a")
    reg.add("d", "impl-d")
    assert reg.names() == ["a", "b", "c", "d"]
    assert reg.get("a") == "new-a"


def test_registry_does_not_share_source_mapping():
    source = dict(AVAILABLE)
    reg = CapabilityRegistry("Things", source)
    reg.add("d", "impl-d")
    assert "d" not in source


def test_unknown_lists_each_missing_name_once():
    reg = CapabilityRegistry("Things", AVAILABLE)
    assert reg.unknown(["x", "a", "y", "x"]) == ["x", "y"]
    assert reg.unknown(["a", "b"]) == []


def test_multi_select_defaults_to_all():
    reg = MultiSelectRegistry("Things", AVAILABLE)
    assert reg.enabled is None
    assert reg.active() == ["impl-a", "impl-b", "impl-c"]
    assert reg.active_names() == ["a", "b", "c"]


def test_multi_select_uses_registration_order():
    reg = MultiSelectRegistry("Things", AVAILABLE)
    reg.enable(["c", "a"])
    assert reg.active() == ["impl-a", "impl-c"]
    # The selection itself is stored as given
    assert reg.enabled == ("c", "a")


def test_multi_select_accepts_single_name():
    reg = MultiSelectRegistry("Things", AVAILABLE)
    reg.enable("b")
    assert reg.active() == ["impl-b"]


def test_multi_select_empty_selection_disables_everything():
    reg = MultiSelectRegistry("Things", AVAILABLE)
    reg.enable([])
    assert reg.active() == []


def test_multi_select_rejects_unknown_names_without_change():
    reg = MultiSelectRegistry("Things", AVAILABLE)
    reg.enable(["b"])

    with pytest.raises(InvalidArgumentError) as exc_info:
        reg.enable(["a", "x", "y"])

    assert str(exc_info.value) == "Things don't exist: x, y"
    assert reg.active() == ["impl-b"]


def test_multi_select_sees_added_entries():
    reg = MultiSelectRegistry("Things", AVAILABLE)
    reg.add("d", "impl-d")
    assert reg.active()[-1] == "impl-d"
    reg.enable(["d"])
    assert reg.active() == ["impl-d"]


def test_single_select():
    reg = SingleSelectRegistry("Storage", AVAILABLE, "b")
    assert reg.selected == "b"
    assert reg.active() == "impl-b"

    reg.select("c")
    assert reg.active() == "impl-c"


def test_single_select_rejects_unknown_name_without_change():
    reg = SingleSelectRegistry("Storage", AVAILABLE, "b")

    with pytest.raises(KeyNotFoundError) as exc_info:
        reg.select("xml")

    assert str(exc_info.value) == "Storage 'xml' not available."
    assert reg.selected == "b"


def test_single_select_requires_valid_default():
    with pytest.raises(KeyNotFoundError):
        SingleSelectRegistry("Storage", AVAILABLE, "missing")


def test_multi_select_reports_non_string_names():
    reg = MultiSelectRegistry("Things", AVAILABLE)

    with pytest.raises(InvalidArgumentError) as exc_info:
        reg.enable(["a", 1, None])

    assert str(exc_info.value) == "Things don't exist: 1, None"
    assert reg.enabled is None


def test_copy_is_independent():
    reg = MultiSelectRegistry("Things", AVAILABLE)
    reg.enable(["a"])
    clone = reg.copy()
    clone.add("d", "impl-d")
    clone.enable(["d"])

    assert reg.names() == ["a", "b", "c"]
    assert reg.active() == ["impl-a"]
    assert clone.active() == ["impl-d"]
