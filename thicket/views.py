"""Live, read-only collection views over a hash trie.

Views hold only a reference back to their trie (and, for prefix views, to a
pinned node), so they always reflect the current contents. Any attempt to
mutate through a view raises ``UnsupportedOperationError``.
"""

from __future__ import annotations

from collections.abc import Collection, Set
from typing import (
    TYPE_CHECKING,
    Any,
    Iterable,
    Iterator,
    NoReturn,
    Optional,
    override,
)

from thicket.common import Entry, UnsupportedOperationError
from thicket.iterator import EntryIterator, KeyIterator, ValueIterator
from thicket.node import Node
from thicket.validation import is_valid_key

if TYPE_CHECKING:
    from thicket.trie import HashTrie

__all__ = [
    "EMPTY_KEY_VIEW",
    "EntryView",
    "KeyView",
    "PrefixKeyView",
    "ReadOnlyView",
    "ValueView",
]


class ReadOnlyView:
    """Mutators of the builtin set interface, all of them rejected."""

    def add(self, _item: Any) -> NoReturn:
        raise UnsupportedOperationError("add")

    def discard(self, _item: Any) -> NoReturn:
        raise UnsupportedOperationError("discard")

    def remove(self, _item: Any) -> NoReturn:
        raise UnsupportedOperationError("remove")

    def pop(self) -> NoReturn:
        raise UnsupportedOperationError("pop")

    def clear(self) -> NoReturn:
        raise UnsupportedOperationError("clear")

    def update(self, *_others: Iterable[Any]) -> NoReturn:
        raise UnsupportedOperationError("update")

    @classmethod
    def _from_iterable(cls, it: Iterable[Any]) -> set[Any]:
        # Set operators build plain sets rather than new views.
        return set(it)


class KeyView[V](ReadOnlyView, Set[str]):
    def __init__(self, trie: HashTrie[V]) -> None:
        self._trie = trie

    def size(self) -> int:
        return self._trie.size()

    @override
    def __len__(self) -> int:
        return self._trie.size()

    @override
    def __iter__(self) -> KeyIterator[V]:
        return KeyIterator(self._trie)

    @override
    def __contains__(self, key: object) -> bool:
        return is_valid_key(key) and self._trie.contains_key(key)


class ValueView[V](ReadOnlyView, Collection[V]):
    def __init__(self, trie: HashTrie[V]) -> None:
        self._trie = trie

    def size(self) -> int:
        return self._trie.size()

    @override
    def __len__(self) -> int:
        return self._trie.size()

    @override
    def __iter__(self) -> ValueIterator[V]:
        return ValueIterator(self._trie)

    @override
    def __contains__(self, value: object) -> bool:
        return any(v == value for v in self)


class EntryView[V](ReadOnlyView, Set[Entry[V]]):
    def __init__(self, trie: HashTrie[V]) -> None:
        self._trie = trie

    def size(self) -> int:
        return self._trie.size()

    @override
    def __len__(self) -> int:
        return self._trie.size()

    @override
    def __iter__(self) -> EntryIterator[V]:
        return EntryIterator(self._trie)

    @override
    def __contains__(self, item: object) -> bool:
        if isinstance(item, Entry):
            key, value = item.key, item.value
        elif isinstance(item, tuple) and len(item) == 2:
            key, value = item
        else:
            return False
        if not is_valid_key(key):
            return False
        found = self._trie.get(key)
        return found is not None and found == value


class PrefixKeyView[V](ReadOnlyView, Set[str]):
    """Keys under one pinned node, each spelled out with the literal prefix.

    The view stays correct for insertions and removals below the pinned node.
    If a removal elsewhere prunes the pinned node itself, the view is stale
    and its contents are undefined. Size is counted by walking the subtree.
    """

    def __init__(self, trie: HashTrie[V], node: Node[V], prefix: str) -> None:
        self._trie = trie
        self._node = node
        self._prefix = prefix

    @property
    def prefix(self) -> str:
        return self._prefix

    def size(self) -> int:
        return sum(1 for _ in self)

    @override
    def __len__(self) -> int:
        return self.size()

    @override
    def __iter__(self) -> KeyIterator[V]:
        return KeyIterator(self._trie, self._node, self._prefix)

    @override
    def __contains__(self, key: object) -> bool:
        if not is_valid_key(key) or not key.startswith(self._prefix):
            return False
        node: Optional[Node[V]] = self._node
        for char in key[len(self._prefix) :]:
            node = node.child_for(char)
            if node is None:
                return False
        return node.has_value()


class _EmptyKeyView(ReadOnlyView, Set[str]):
    def size(self) -> int:
        return 0

    @override
    def __len__(self) -> int:
        return 0

    @override
    def __iter__(self) -> Iterator[str]:
        return iter(())

    @override
    def __contains__(self, key: object) -> bool:
        return False


EMPTY_KEY_VIEW: Set[str] = _EmptyKeyView()
"""Shared view returned when no key starts with the requested prefix."""
