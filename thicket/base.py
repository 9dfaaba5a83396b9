"""Abstract trie interface and the equality contract shared by all tries.

Equality, hashing and string rendering are defined purely in terms of the
entry view, so any trie implementation (or wrapper) that exposes ``entries``
and ``get`` compares equal to any other holding the same mappings.

Tries that contain themselves, directly or indirectly, are not supported by
``__eq__`` or ``hash_code``; they recurse without bound.
"""

from __future__ import annotations

from abc import abstractmethod
from collections.abc import Collection, Set
from typing import Any, Iterator, Optional

from thicket.common import Entry, Sized
from thicket.constants import ENTRY_SEPARATOR, SELF_REFERENCE_TOKEN

__all__ = ["AbstractTrie"]


class AbstractTrie[V](Sized):
    """A mapping from non-empty alphanumeric strings to non-None values."""

    # Query operations

    @abstractmethod
    def get(self, key: str) -> Optional[V]:
        """Get the value mapped to a key.

        Args:
            key: The key to look up.

        Returns:
            The mapped value, or None if the key has no mapping.

        Raises:
            NullKeyError: If key is None.
            InvalidKeyError: If key is empty or not alphanumeric.
        """
        ...

    def contains_key(self, key: str) -> bool:
        """Check whether a key has a mapping; validates like ``get``."""
        return self.get(key) is not None

    # Modification operations

    @abstractmethod
    def put(self, key: str, value: V) -> Optional[V]:
        """Map a key to a value, replacing any previous value.

        Returns:
            The previous value, or None if there was no mapping.

        Raises:
            NullKeyError: If key is None.
            InvalidKeyError: If key is empty or not alphanumeric.
            NullValueError: If value is None.
        """
        ...

    @abstractmethod
    def remove(self, key: str) -> Optional[V]:
        """Remove the mapping for a key if present.

        Returns:
            The removed value, or None if there was no mapping.
        """
        ...

    @abstractmethod
    def clear(self) -> None: ...

    # Views

    @abstractmethod
    def keys(self) -> Set[str]: ...

    @abstractmethod
    def keys_with_prefix(self, prefix: str) -> Set[str]: ...

    @abstractmethod
    def values(self) -> Collection[V]: ...

    @abstractmethod
    def entries(self) -> Set[Entry[V]]: ...

    def __contains__(self, key: str) -> bool:
        return self.contains_key(key)

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    # Comparison and rendering

    def __eq__(self, other: Any) -> bool:
        if other is self:
            return True
        if not isinstance(other, AbstractTrie):
            return False
        if other.size() != self.size():
            return False
        for entry in self.entries():
            if entry.value != other.get(entry.key):
                return False
        return True

    def __ne__(self, other: Any) -> bool:
        return not self.__eq__(other)

    def hash_code(self) -> int:
        """Sum of the entry hashes, independent of iteration order."""
        return sum(hash(entry) for entry in self.entries())

    def __hash__(self) -> int:
        return self.hash_code()

    def __str__(self) -> str:
        parts = []
        for entry in self.entries():
            value = SELF_REFERENCE_TOKEN if entry.value is self else entry.value
            parts.append(f"{entry.key}={value}")
        return "{" + ENTRY_SEPARATOR.join(parts) + "}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self})"
