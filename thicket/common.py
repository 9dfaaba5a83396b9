"""Common error types and small building blocks for the thicket trie library.

This module provides the exception hierarchy raised by every trie operation,
the sizing mixin shared by tries and their views, and the key/value entry
type produced by entry iteration.
"""

from __future__ import annotations

import pickle
from abc import ABCMeta, abstractmethod
from dataclasses import dataclass
from typing import Any, Iterator

__all__ = [
    "ConcurrentModificationError",
    "CorruptDataError",
    "Entry",
    "InvalidKeyError",
    "NotSerializableError",
    "NullArgumentError",
    "NullKeyError",
    "NullValueError",
    "Sized",
    "TrieError",
    "UnsupportedOperationError",
]


class TrieError(Exception):
    """Base class of every error raised by this library."""

    pass


class NullKeyError(TrieError, TypeError):
    """Raised when a key argument is missing (None)."""

    def __init__(self) -> None:
        super().__init__("Key could not be None.")


class InvalidKeyError(TrieError, ValueError):
    """Raised for an empty key or a key with a non letter-or-digit character."""

    pass


class NullValueError(TrieError, TypeError):
    """Raised when a value argument is missing (None)."""

    def __init__(self) -> None:
        super().__init__("Value could not be None.")


class NullArgumentError(TrieError, TypeError):
    """Raised when a required collaborator (such as a wrapped trie) is missing."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Argument {name!r} could not be None.")


class UnsupportedOperationError(TrieError, TypeError):
    """Raised for mutation through a read-only view, wrapper, or iterator."""

    def __init__(self, operation: str) -> None:
        super().__init__(f"Operation {operation!r} is not supported.")


class ConcurrentModificationError(TrieError, RuntimeError):
    """Raised when an iterator notices its trie was modified after creation.

    Detection is best-effort only and should be used to find bugs, never
    relied upon for correctness.
    """

    pass


class CorruptDataError(TrieError, ValueError):
    """Raised when a serialized trie cannot be reconstructed."""

    pass


class NotSerializableError(TrieError, pickle.PicklingError):
    """Raised when a stored value cannot be written to the stream format."""

    pass


class Sized(metaclass=ABCMeta):
    @abstractmethod
    def size(self) -> int: ...

    def is_empty(self) -> bool:
        return self.size() == 0

    def __bool__(self) -> bool:
        return not self.is_empty()

    def __len__(self) -> int:
        return self.size()


@dataclass(frozen=True)
class Entry[V]:
    """A key-value pair produced by entry iteration.

    Hashes like a map entry (key hash xor value hash) so that the hash of a
    trie is independent of iteration order. Unpacks as ``key, value``.
    """

    key: str
    value: V

    def __hash__(self) -> int:
        return hash(self.key) ^ hash(self.value)

    def __iter__(self) -> Iterator[Any]:
        yield self.key
        yield self.value

    def __str__(self) -> str:
        return f"{self.key}={self.value}"
