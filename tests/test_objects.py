"""Tests for key and entry iteration."""

import pytest

import reviter as rv


class _Target:
    def __init__(self) -> None:
        self.a = 1
        self.b = "two"
        self.c = None


@pytest.fixture
def mapping() -> dict[object, object]:
    return {"a": 1, 1: "two", "c": None}


def test_over_keys(mapping: dict[object, object]) -> None:
    """Test iterating mapping keys, both ways."""
    keys = rv.over_keys(mapping)
    assert list(keys) == ["a", 1, "c"]
    assert list(keys.reverse()) == list(keys)[::-1]


def test_over_keys_of_object() -> None:
    """Test iterating attribute names."""
    assert list(rv.over_keys(_Target())) == ["a", "b", "c"]


def test_over_keys_snapshot(mapping: dict[object, object]) -> None:
    """Test that keys are read once, so the mapping may change meanwhile."""
    keys = rv.over_keys(mapping)
    mapping["d"] = 4
    assert list(keys) == ["a", 1, "c"]


def test_over_keys_rejects_objects_without_attributes() -> None:
    """Test that objects without `__dict__` are rejected."""
    with pytest.raises(TypeError):
        rv.over_keys(42)


def test_over_entries(mapping: dict[object, object]) -> None:
    """Test iterating mapping entries, both ways."""
    entries = rv.over_entries(mapping)
    assert list(entries) == [("a", 1), (1, "two"), ("c", None)]
    assert list(entries.reverse()) == list(entries)[::-1]


def test_over_entries_of_object() -> None:
    """Test iterating attributes as entries."""
    entry = rv.first(rv.over_entries(_Target()))
    assert entry is not None
    assert entry.key == "a"
    assert entry.value == 1
    assert repr(entry) == "('a', 1)"


def test_over_entries_reads_current_values(mapping: dict[object, object]) -> None:
    """Test that values are looked up when pulled."""
    entries = rv.over_entries(mapping)
    mapping["a"] = 10
    assert rv.first(entries) == ("a", 10)
