"""Hash trie: a character-keyed mutable map with one node per key character.

Basic operations (``get``, ``put``, ``remove``) take time proportional to the
length of the key. Iteration over the views takes time proportional to the
size of the trie.

The trie is not synchronized. If several threads use one instance and at
least one of them modifies it, access must be synchronized externally.

Iterators over the views are fail-fast on a best-effort basis: once the trie
is modified by ``put``, ``remove`` or ``clear``, the next call to ``next`` on
an older iterator raises ``ConcurrentModificationError``. This is a debugging
aid only.
"""

from __future__ import annotations

import copy
import logging
import pickle
from collections.abc import Set
from typing import Any, Dict, Iterable, List, Optional, Tuple, override

from thicket.base import AbstractTrie
from thicket.common import CorruptDataError, NotSerializableError
from thicket.constants import STREAM_PROTOCOL
from thicket.node import Node
from thicket.validation import check_key, check_value
from thicket.views import (
    EMPTY_KEY_VIEW,
    EntryView,
    KeyView,
    PrefixKeyView,
    ValueView,
)

__all__ = ["HashTrie"]

logger = logging.getLogger(__name__)


class HashTrie[V](AbstractTrie[V]):
    """Trie whose nodes keep their children in a dict keyed by character.

    Example:
        >>> trie = HashTrie([("sf", 1), ("sfg", 2)])
        >>> trie.get("sf")
        1
        >>> sorted(trie.keys_with_prefix("sf"))
        ['sf', 'sfg']
    """

    def __init__(self, pairs: Optional[Iterable[Tuple[str, V]]] = None) -> None:
        self._reinitialize()
        if pairs is not None:
            for key, value in pairs:
                self.put(key, value)

    def _reinitialize(self) -> None:
        self._root: Node[V] = Node()
        self._size = 0
        self._mod_count = 0
        self._keys_view: Optional[KeyView[V]] = None
        self._values_view: Optional[ValueView[V]] = None
        self._entries_view: Optional[EntryView[V]] = None

    @property
    def root(self) -> Node[V]:
        return self._root

    @property
    def mod_count(self) -> int:
        """Number of ``put``, ``remove`` and ``clear`` calls made so far.

        Every call counts, including overwrites and removals of absent keys.
        """
        return self._mod_count

    @override
    def size(self) -> int:
        """Get the number of mappings.

        Time Complexity: O(1)
        """
        return self._size

    @override
    def get(self, key: str) -> Optional[V]:
        """Get the value mapped to a key, or None.

        Time Complexity: O(S) where S is the length of the key
        """
        check_key(key)
        node = self._find_node(key)
        return None if node is None else node.value

    def _find_node(self, key: str) -> Optional[Node[V]]:
        node: Optional[Node[V]] = self._root
        for char in key:
            node = node.child_for(char)
            if node is None:
                return None
        return node

    @override
    def put(self, key: str, value: V) -> Optional[V]:
        """Map a key to a value, creating nodes along the key as needed.

        Time Complexity: O(S) where S is the length of the key

        Returns:
            The previous value, or None if the key was not mapped.
        """
        check_key(key)
        check_value(value)

        self._mod_count += 1

        node = self._root
        for char in key:
            child = node.child_for(char)
            if child is None:
                child = Node()
                node.add_child(char, child)
            node = child

        previous = node.value
        if previous is None:
            self._size += 1
        node.value = value
        return previous

    @override
    def remove(self, key: str) -> Optional[V]:
        """Remove the mapping for a key, then prune nodes left without purpose.

        Time Complexity: O(S) where S is the length of the key

        Returns:
            The removed value, or None if the key was not mapped.
        """
        check_key(key)

        self._mod_count += 1

        # path[i] is the node reached after consuming i characters
        path: List[Node[V]] = [self._root]
        node: Optional[Node[V]] = self._root
        for char in key:
            node = node.child_for(char)
            if node is None:
                return None
            path.append(node)

        if not node.has_value():
            return None

        value = node.value
        node.value = None
        self._size -= 1

        depth = len(key)
        while depth > 0:
            current = path[depth]
            if current.has_value() or current.has_children():
                break
            path[depth - 1].remove_child(key[depth - 1])
            depth -= 1
        logger.debug("Removed %r, pruned %d node(s)", key, len(key) - depth)
        return value

    @override
    def clear(self) -> None:
        """Remove every mapping by installing a fresh root.

        Time Complexity: O(1)
        """
        self._mod_count += 1
        self._size = 0
        self._root = Node()
        logger.debug("Cleared trie")

    # Views

    @override
    def keys(self) -> KeyView[V]:
        """Live set view of all keys, built once and cached."""
        view = self._keys_view
        if view is None:
            view = self._keys_view = KeyView(self)
        return view

    @override
    def values(self) -> ValueView[V]:
        """Live collection view of all values, built once and cached."""
        view = self._values_view
        if view is None:
            view = self._values_view = ValueView(self)
        return view

    @override
    def entries(self) -> EntryView[V]:
        """Live set view of all entries, built once and cached."""
        view = self._entries_view
        if view is None:
            view = self._entries_view = EntryView(self)
        return view

    @override
    def keys_with_prefix(self, prefix: str) -> Set[str]:
        """Set view of the keys that start with a prefix (the prefix included).

        A new view is built on every call and is pinned to the node reached
        by the prefix. If no key starts with the prefix, an always-empty view
        is returned instead.

        Time Complexity: O(P) where P is the length of the prefix
        """
        check_key(prefix)
        node = self._find_node(prefix)
        if node is None:
            return EMPTY_KEY_VIEW
        return PrefixKeyView(self, node, prefix)

    # Copying and pickling

    def copy(self) -> HashTrie[V]:
        """Shallow copy: a new node tree holding the same value objects.

        Time Complexity: O(N) where N is the number of mappings
        """
        result: HashTrie[V] = HashTrie()
        for entry in self.entries():
            result.put(entry.key, entry.value)
        return result

    def __copy__(self) -> HashTrie[V]:
        return self.copy()

    def __deepcopy__(self, memo: Dict[int, Any]) -> HashTrie[V]:
        result: HashTrie[V] = HashTrie()
        memo[id(self)] = result
        for entry in self.entries():
            result.put(entry.key, copy.deepcopy(entry.value, memo))
        return result

    def __getstate__(self) -> List[Any]:
        """Flatten to ``[count, key1, value1, key2, value2, ...]``.

        Raises:
            NotSerializableError: If a stored value cannot be pickled.
        """
        state: List[Any] = [self._size]
        for entry in self.entries():
            # The trie itself is memoized by the enclosing pickler.
            if entry.value is not self:
                try:
                    pickle.dumps(entry.value, protocol=STREAM_PROTOCOL)
                except (pickle.PicklingError, TypeError, AttributeError) as err:
                    raise NotSerializableError(
                        f"Value for key {entry.key!r} cannot be serialized: {err}"
                    ) from err
            state.append(entry.key)
            state.append(entry.value)
        return state

    def __setstate__(self, state: List[Any]) -> None:
        self._reinitialize()
        if not state or not isinstance(state[0], int) or isinstance(state[0], bool):
            raise CorruptDataError("Missing or illegal mapping count.")
        count = state[0]
        if count < 0:
            raise CorruptDataError(f"Illegal size: {count}")
        if len(state) != 1 + 2 * count:
            raise CorruptDataError(
                f"Expected {count} mapping(s), found {(len(state) - 1) / 2}."
            )
        for i in range(count):
            self.put(state[1 + 2 * i], state[2 + 2 * i])
