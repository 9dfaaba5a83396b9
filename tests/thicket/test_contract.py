"""Tests for trie equality, hashing and string rendering."""

from thicket.trie import HashTrie
from thicket.tries import unmodifiable_trie


def test_equal_regardless_of_insertion_order() -> None:
    """Tries with the same mappings are equal and hash alike."""
    t1: HashTrie[int] = HashTrie()
    t1.put("abc", 1)
    t1.put("a", 2)
    t1.put("zz", 3)

    t2: HashTrie[int] = HashTrie()
    t2.put("zz", 3)
    t2.put("a", 2)
    t2.put("abc", 1)

    assert t1 == t2
    assert not t1 != t2
    assert t1.hash_code() == t2.hash_code()
    assert hash(t1) == hash(t2)


def test_equal_after_removals() -> None:
    """Structure left by earlier keys does not affect equality."""
    t1 = HashTrie([("a", 1), ("abcdef", 2)])
    t1.remove("abcdef")
    t2 = HashTrie([("a", 1)])
    assert t1 == t2
    assert t1.hash_code() == t2.hash_code()


def test_identity() -> None:
    """A trie equals itself."""
    trie = HashTrie([("a", 1)])
    assert trie == trie


def test_not_equal() -> None:
    """Different sizes, keys or values make tries unequal."""
    base = HashTrie([("a", 1), ("b", 2)])
    assert base != HashTrie([("a", 1)])
    assert base != HashTrie([("a", 1), ("b", 3)])
    assert base != HashTrie([("a", 1), ("c", 2)])


def test_not_equal_to_other_types() -> None:
    """A trie never equals a non-trie, even a dict with the same items."""
    trie = HashTrie([("a", 1)])
    assert trie != {"a": 1}
    assert trie != "a=1"
    assert trie != None  # noqa: E711


def test_equal_to_unmodifiable_wrapper() -> None:
    """Equality works across trie implementations."""
    trie = HashTrie([("a", 1), ("b", 2)])
    other = HashTrie([("b", 2), ("a", 1)])
    wrapped = unmodifiable_trie(other)
    assert trie == wrapped
    assert wrapped == trie
    assert hash(trie) == hash(wrapped)


def test_hash_code_is_sum_of_entry_hashes() -> None:
    """The hash code sums key-xor-value hashes."""
    trie = HashTrie([("a", 1), ("b", 2)])
    expected = (hash("a") ^ hash(1)) + (hash("b") ^ hash(2))
    assert trie.hash_code() == expected
    assert HashTrie().hash_code() == 0


def test_str_empty() -> None:
    """An empty trie renders as braces."""
    assert str(HashTrie()) == "{}"


def test_str_entries() -> None:
    """Entries render as key=value joined by comma and space."""
    trie: HashTrie[str] = HashTrie()
    trie.put("a", "a1")
    trie.put("b", "b1")

    text = str(trie)
    assert text in ("{a=a1, b=b1}", "{b=b1, a=a1}")
    assert text.startswith("{")
    assert text.endswith("}")
    assert "a=a1" in text
    assert "b=b1" in text
    assert ", " in text


def test_str_self_reference() -> None:
    """A trie stored in itself renders as a placeholder."""
    trie: HashTrie[object] = HashTrie()
    trie.put("me", trie)
    assert str(trie) == "{me=(this Trie)}"


def test_repr() -> None:
    """repr names the class."""
    trie = HashTrie([("a", 1)])
    assert repr(trie) == "HashTrie({a=1})"
