from thicket.base import AbstractTrie
from thicket.common import (
    ConcurrentModificationError,
    CorruptDataError,
    Entry,
    InvalidKeyError,
    NotSerializableError,
    NullArgumentError,
    NullKeyError,
    NullValueError,
    TrieError,
    UnsupportedOperationError,
)
from thicket.prefix_tree import PrefixTree
from thicket.trie import HashTrie
from thicket.tries import UnmodifiableTrie, unmodifiable_prefix_tree, unmodifiable_trie

__all__ = [
    "AbstractTrie",
    "ConcurrentModificationError",
    "CorruptDataError",
    "Entry",
    "HashTrie",
    "InvalidKeyError",
    "NotSerializableError",
    "NullArgumentError",
    "NullKeyError",
    "NullValueError",
    "PrefixTree",
    "TrieError",
    "UnmodifiableTrie",
    "UnsupportedOperationError",
    "unmodifiable_prefix_tree",
    "unmodifiable_trie",
]
