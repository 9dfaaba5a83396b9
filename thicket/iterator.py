"""Resumable depth-first iteration over the entries of a hash trie.

Traversal keeps its own stack of child cursors and a character buffer instead
of recursing, so keys of any length are walked without growing the call stack
and iteration can stop and resume between calls to ``next``.
"""

from __future__ import annotations

import logging
from abc import ABCMeta, abstractmethod
from typing import TYPE_CHECKING, Iterator, List, Optional, Tuple, override

from thicket.common import (
    ConcurrentModificationError,
    Entry,
    UnsupportedOperationError,
)
from thicket.node import Node

if TYPE_CHECKING:
    from thicket.trie import HashTrie

__all__ = ["DfsIterator", "EntryIterator", "KeyIterator", "ValueIterator"]

logger = logging.getLogger(__name__)


class DfsIterator[V, T](Iterator[T], metaclass=ABCMeta):
    """Pre-order walk producing one value-bearing node per step.

    The next entry is always computed one step ahead so that ``has_next`` can
    answer without touching the trie. The modification count of the trie is
    sampled at construction and compared on every ``next``; peeking with
    ``has_next`` never checks it.

    An exhausted iterator stays exhausted; obtain a new one from the view.
    """

    def __init__(
        self, trie: HashTrie[V], node: Optional[Node[V]] = None, prefix: str = ""
    ) -> None:
        self._trie = trie
        self._expected_mod_count = trie.mod_count
        seed = trie.root if node is None else node
        self._cursors: List[Iterator[Tuple[str, Node[V]]]]
        if seed.has_value() and prefix:
            # Hang the seed under a throwaway parent so it is produced first.
            parent: Node[V] = Node()
            parent.add_child(prefix[-1], seed)
            self._buffer = list(prefix[:-1])
            self._cursors = [parent.children()]
        else:
            self._buffer = list(prefix)
            self._cursors = [seed.children()]
        self._next_entry = self._advance()

    def _advance(self) -> Optional[Entry[V]]:
        cursors = self._cursors
        buffer = self._buffer
        while cursors:
            pair = next(cursors[-1], None)
            if pair is not None:
                char, child = pair
                buffer.append(char)
                cursors.append(child.children())
                if child.has_value():
                    return Entry("".join(buffer), child.value)
            elif len(cursors) > 1:
                cursors.pop()
                buffer.pop()
            else:
                cursors.clear()
        return None

    def has_next(self) -> bool:
        return self._next_entry is not None

    def next_entry(self) -> Entry[V]:
        if self._expected_mod_count != self._trie.mod_count:
            logger.debug(
                "Trie modified during iteration (expected mod count %d, found %d)",
                self._expected_mod_count,
                self._trie.mod_count,
            )
            raise ConcurrentModificationError(
                "Trie was modified after the iterator was created."
            )
        entry = self._next_entry
        if entry is None:
            raise StopIteration
        self._next_entry = self._advance()
        return entry

    @abstractmethod
    def _project(self, entry: Entry[V]) -> T: ...

    @override
    def __next__(self) -> T:
        return self._project(self.next_entry())

    @override
    def __iter__(self) -> Iterator[T]:
        return self

    def remove(self) -> None:
        raise UnsupportedOperationError("remove")


class KeyIterator[V](DfsIterator[V, str]):
    @override
    def _project(self, entry: Entry[V]) -> str:
        return entry.key


class ValueIterator[V](DfsIterator[V, V]):
    @override
    def _project(self, entry: Entry[V]) -> V:
        return entry.value


class EntryIterator[V](DfsIterator[V, Entry[V]]):
    @override
    def _project(self, entry: Entry[V]) -> Entry[V]:
        return entry
