"""Per-character branching unit of a hash trie."""

from __future__ import annotations

from typing import Dict, Iterator, Optional, Tuple

__all__ = ["Node"]


class Node[V]:
    """A trie node holding an optional value and its children by character.

    A node is owned by exactly one parent (or by the trie, for the root).
    Children are kept in a dict, so their order is insertion order.
    """

    __slots__ = ("value", "_children")

    def __init__(self) -> None:
        self.value: Optional[V] = None
        self._children: Dict[str, Node[V]] = {}

    def has_value(self) -> bool:
        return self.value is not None

    def has_children(self) -> bool:
        return bool(self._children)

    def child_for(self, char: str) -> Optional[Node[V]]:
        return self._children.get(char)

    def add_child(self, char: str, child: Node[V]) -> None:
        self._children[char] = child

    def remove_child(self, char: str) -> None:
        del self._children[char]

    def children(self) -> Iterator[Tuple[str, Node[V]]]:
        """Iterate over (character, child) pairs.

        The underlying dict iterator fails if the children change while it is
        live, which callers rule out by checking the trie modification count.
        """
        return iter(self._children.items())

    def __repr__(self) -> str:
        return f"Node(value={self.value!r}, children={list(self._children)!r})"
