"""Tests for the key, value, entry and prefix views."""

import pytest

from thicket.common import (
    ConcurrentModificationError,
    Entry,
    UnsupportedOperationError,
)
from thicket.trie import HashTrie
from thicket.views import EMPTY_KEY_VIEW, PrefixKeyView


def make_trie() -> HashTrie[str]:
    trie: HashTrie[str] = HashTrie()
    trie.put("sf", "A")
    trie.put("sfg", "B")
    trie.put("l2", "C")
    return trie


def test_views_are_cached() -> None:
    """keys, values and entries return the same object every time."""
    trie = make_trie()
    assert trie.keys() is trie.keys()
    assert trie.values() is trie.values()
    assert trie.entries() is trie.entries()


def test_prefix_views_are_not_cached() -> None:
    """Each prefix lookup builds a new view."""
    trie = make_trie()
    assert trie.keys_with_prefix("sf") is not trie.keys_with_prefix("sf")


def test_key_view() -> None:
    """The key view is a live set of keys."""
    trie = make_trie()
    keys = trie.keys()
    assert keys == {"sf", "sfg", "l2"}
    assert len(keys) == 3
    assert keys.size() == 3
    assert "sf" in keys
    assert "s" not in keys
    assert "a.b" not in keys
    assert None not in keys
    assert 5 not in keys

    trie.put("x", "D")
    assert "x" in keys
    assert len(keys) == 4


def test_value_view() -> None:
    """The value view is a live collection of values."""
    trie = make_trie()
    values = trie.values()
    assert sorted(values) == ["A", "B", "C"]
    assert len(values) == 3
    assert "B" in values
    assert "Z" not in values

    trie.remove("sfg")
    assert sorted(values) == ["A", "C"]
    assert len(values) == 2


def test_value_view_keeps_duplicates() -> None:
    """Equal values under different keys all appear."""
    trie: HashTrie[int] = HashTrie()
    trie.put("a", 1)
    trie.put("b", 1)
    assert list(trie.values()) == [1, 1]


def test_entry_view() -> None:
    """The entry view is a live set of entries."""
    trie = make_trie()
    entries = trie.entries()
    assert entries == {Entry("sf", "A"), Entry("sfg", "B"), Entry("l2", "C")}
    assert Entry("sf", "A") in entries
    assert ("sf", "A") in entries
    assert Entry("sf", "B") not in entries
    assert ("sf",) not in entries
    assert "sf" not in entries
    assert ("a.b", "A") not in entries
    assert ("zz", None) not in entries
    assert dict(entries) == {"sf": "A", "sfg": "B", "l2": "C"}


def test_set_operators_build_plain_sets() -> None:
    """Set algebra on views produces builtin sets."""
    trie = make_trie()
    assert trie.keys() & {"sf", "zz"} == {"sf"}
    assert trie.keys() - {"sf"} == {"sfg", "l2"}
    assert isinstance(trie.keys() | {"q"}, set)


@pytest.mark.parametrize("name", ["keys", "values", "entries"])
def test_views_reject_mutation(name: str) -> None:
    """Every mutator on a view raises."""
    trie = make_trie()
    view = getattr(trie, name)()
    with pytest.raises(UnsupportedOperationError):
        view.add("x")
    with pytest.raises(UnsupportedOperationError):
        view.remove("sf")
    with pytest.raises(UnsupportedOperationError):
        view.discard("sf")
    with pytest.raises(UnsupportedOperationError):
        view.pop()
    with pytest.raises(UnsupportedOperationError):
        view.clear()
    with pytest.raises(UnsupportedOperationError):
        view.update(["x"])
    assert trie.size() == 3


def test_view_iterators_are_fail_fast() -> None:
    """Iterators from views share the modification check."""
    trie = make_trie()
    it = iter(trie.keys())
    trie.put("new", "N")
    with pytest.raises(ConcurrentModificationError):
        next(it)


def test_keys_with_prefix() -> None:
    """Prefix views include the prefix itself when it is a key."""
    trie: HashTrie[str] = HashTrie()
    trie.put("sf", "A")
    trie.put("sfg", "B")

    assert trie.keys_with_prefix("sf") == {"sf", "sfg"}
    assert trie.keys_with_prefix("s") == {"sf", "sfg"}
    assert trie.keys_with_prefix("sfg") == {"sfg"}
    assert trie.keys_with_prefix("l") == set()


def test_keys_with_prefix_without_value() -> None:
    """Keys under a value-less prefix node keep the full prefix."""
    trie: HashTrie[int] = HashTrie()
    trie.put("abc", 1)
    trie.put("abd", 2)
    trie.put("b", 3)
    assert trie.keys_with_prefix("ab") == {"abc", "abd"}


def test_unreachable_prefix_is_empty_view() -> None:
    """A prefix with no node maps to the shared empty view."""
    trie = make_trie()
    view = trie.keys_with_prefix("zz")
    assert view is EMPTY_KEY_VIEW
    assert len(view) == 0
    assert list(view) == []
    assert "zz" not in view
    with pytest.raises(UnsupportedOperationError):
        view.add("zz")


def test_prefix_view_membership_and_size() -> None:
    """Prefix views count and test only keys under their node."""
    trie = make_trie()
    view = trie.keys_with_prefix("sf")
    assert isinstance(view, PrefixKeyView)
    assert view.prefix == "sf"
    assert len(view) == 2
    assert "sf" in view
    assert "sfg" in view
    assert "sfgh" not in view
    assert "l2" not in view
    assert "s" not in view
    assert "a.b" not in view


def test_prefix_view_is_live_within_subtree() -> None:
    """Changes below the pinned node show through the view."""
    trie = make_trie()
    view = trie.keys_with_prefix("sf")

    trie.put("sfx", "X")
    assert view == {"sf", "sfg", "sfx"}

    trie.remove("sfg")
    assert view == {"sf", "sfx"}


def test_prefix_view_rejects_mutation() -> None:
    """Mutators on a prefix view raise."""
    trie = make_trie()
    view = trie.keys_with_prefix("sf")
    with pytest.raises(UnsupportedOperationError):
        view.add("sfz")
    with pytest.raises(UnsupportedOperationError):
        view.clear()
    assert trie.size() == 3
