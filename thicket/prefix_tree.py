"""Set of strings with prefix lookup, backed by a trie.

Each member is stored as a key mapped to a constant sentinel, which lets the
tree answer "which members start with this prefix" without exposing the trie
interface to callers.
"""

from __future__ import annotations

from collections.abc import Set
from typing import Any, Iterable, Iterator, Optional, override

from thicket.base import AbstractTrie
from thicket.common import Sized
from thicket.constants import ENTRY_SEPARATOR, PREFIX_TREE_SENTINEL
from thicket.trie import HashTrie

__all__ = ["PrefixTree"]


class PrefixTree(Sized):
    """A set of non-empty alphanumeric strings.

    Example:
        >>> tree = PrefixTree(["car", "cart", "dog"])
        >>> sorted(tree.values_with_prefix("car"))
        ['car', 'cart']
        >>> "dog" in tree
        True
    """

    def __init__(self, values: Optional[Iterable[str]] = None) -> None:
        self._trie: AbstractTrie[bool] = HashTrie()
        if values is not None:
            for value in values:
                self.add(value)

    @classmethod
    def backed_by(cls, trie: AbstractTrie[bool]) -> PrefixTree:
        """Build a tree over an existing trie without copying it."""
        tree = cls.__new__(cls)
        tree._trie = trie
        return tree

    @property
    def trie(self) -> AbstractTrie[bool]:
        return self._trie

    # Query operations

    @override
    def size(self) -> int:
        """Number of members. Time Complexity: O(1)"""
        return self._trie.size()

    @override
    def is_empty(self) -> bool:
        return self._trie.is_empty()

    def contains(self, value: str) -> bool:
        """Check membership.

        Time Complexity: O(S) where S is the length of the value

        Raises:
            NullKeyError: If value is None.
            InvalidKeyError: If value is empty or not alphanumeric.
        """
        return self._trie.contains_key(value)

    def __contains__(self, value: str) -> bool:
        return self.contains(value)

    # Modification operations

    def add(self, value: str) -> None:
        """Add a member; adding an existing member changes nothing visible."""
        self._trie.put(value, PREFIX_TREE_SENTINEL)

    def remove(self, value: str) -> None:
        """Remove a member if present."""
        self._trie.remove(value)

    def clear(self) -> None:
        self._trie.clear()

    # Views

    def values(self) -> Set[str]:
        """Live, read-only set view of the members."""
        return self._trie.keys()

    def values_with_prefix(self, prefix: str) -> Set[str]:
        """Live, read-only set view of the members starting with a prefix.

        Time Complexity: O(P) where P is the length of the prefix
        """
        return self._trie.keys_with_prefix(prefix)

    def __iter__(self) -> Iterator[str]:
        return iter(self.values())

    # Copying, comparison and rendering

    def copy(self) -> PrefixTree:
        """Copy into a fresh, modifiable tree by re-adding every member.

        Time Complexity: O(N) where N is the number of members
        """
        tree = PrefixTree()
        for value in self.values():
            tree.add(value)
        return tree

    def __copy__(self) -> PrefixTree:
        return self.copy()

    def __eq__(self, other: Any) -> bool:
        if other is self:
            return True
        return isinstance(other, PrefixTree) and self._trie == other._trie

    def __ne__(self, other: Any) -> bool:
        return not self.__eq__(other)

    def __hash__(self) -> int:
        return self._trie.hash_code()

    def __str__(self) -> str:
        return "{" + ENTRY_SEPARATOR.join(self.values()) + "}"

    def __repr__(self) -> str:
        return f"PrefixTree({self})"
