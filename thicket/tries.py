"""Wrappers that give read-only access to existing tries and prefix trees."""

from __future__ import annotations

from collections.abc import Collection, Set
from typing import Any, NoReturn, Optional, override

from thicket.base import AbstractTrie
from thicket.common import Entry, NullArgumentError, UnsupportedOperationError
from thicket.prefix_tree import PrefixTree

__all__ = ["UnmodifiableTrie", "unmodifiable_prefix_tree", "unmodifiable_trie"]


class UnmodifiableTrie[V](AbstractTrie[V]):
    """Read-through view of another trie that rejects every mutation.

    Queries go straight to the wrapped trie, so later changes made directly
    on it are visible here. The views handed out are the wrapped trie's own
    views, which are already read-only.
    """

    def __init__(self, trie: AbstractTrie[V]) -> None:
        if trie is None:
            raise NullArgumentError("trie")
        self._trie = trie

    @override
    def size(self) -> int:
        return self._trie.size()

    @override
    def is_empty(self) -> bool:
        return self._trie.is_empty()

    @override
    def contains_key(self, key: str) -> bool:
        return self._trie.contains_key(key)

    @override
    def get(self, key: str) -> Optional[V]:
        return self._trie.get(key)

    @override
    def put(self, key: str, value: V) -> NoReturn:
        raise UnsupportedOperationError("put")

    @override
    def remove(self, key: str) -> NoReturn:
        raise UnsupportedOperationError("remove")

    @override
    def clear(self) -> NoReturn:
        raise UnsupportedOperationError("clear")

    @override
    def keys(self) -> Set[str]:
        return self._trie.keys()

    @override
    def keys_with_prefix(self, prefix: str) -> Set[str]:
        return self._trie.keys_with_prefix(prefix)

    @override
    def values(self) -> Collection[V]:
        return self._trie.values()

    @override
    def entries(self) -> Set[Entry[V]]:
        return self._trie.entries()

    @override
    def __eq__(self, other: Any) -> bool:
        return other is self or self._trie.__eq__(other)

    @override
    def hash_code(self) -> int:
        return self._trie.hash_code()

    @override
    def __hash__(self) -> int:
        return self._trie.hash_code()

    @override
    def __str__(self) -> str:
        return str(self._trie)


def unmodifiable_trie[V](trie: AbstractTrie[V]) -> UnmodifiableTrie[V]:
    """Wrap a trie in a read-only view.

    Raises:
        NullArgumentError: If trie is None.
    """
    return UnmodifiableTrie(trie)


def unmodifiable_prefix_tree(tree: PrefixTree) -> PrefixTree:
    """Wrap a prefix tree so that ``add``, ``remove`` and ``clear`` fail.

    Raises:
        NullArgumentError: If tree is None.
    """
    if tree is None:
        raise NullArgumentError("tree")
    return PrefixTree.backed_by(UnmodifiableTrie(tree.trie))
