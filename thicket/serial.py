"""Flat stream format for tries.

A trie is written as a sequence of pickled records: the mapping count, then
each key followed by its value, in entry-view order. The node tree itself is
never written; reading rebuilds it by calling ``put`` for every pair.

Only read streams from trusted sources, as with any pickle data.
"""

from __future__ import annotations

import io
import logging
import pickle
from typing import Any, BinaryIO

from thicket.base import AbstractTrie
from thicket.common import CorruptDataError, NotSerializableError
from thicket.constants import STREAM_PROTOCOL
from thicket.trie import HashTrie

__all__ = ["dumps", "loads", "read_trie", "write_trie"]

logger = logging.getLogger(__name__)


def write_trie(trie: AbstractTrie[Any], stream: BinaryIO) -> None:
    """Write every mapping of a trie to a binary stream.

    Args:
        trie: The trie to write.
        stream: A writable binary stream.

    Raises:
        NotSerializableError: If a stored value cannot be pickled. Records
            written before the failure are left in the stream.
    """
    pickler = pickle.Pickler(stream, protocol=STREAM_PROTOCOL)
    count = trie.size()
    pickler.dump(count)
    for entry in trie.entries():
        pickler.dump(entry.key)
        try:
            pickler.dump(entry.value)
        except (pickle.PicklingError, TypeError, AttributeError) as err:
            raise NotSerializableError(
                f"Value for key {entry.key!r} cannot be serialized: {err}"
            ) from err
    logger.debug("Wrote %d mapping(s)", count)


def read_trie(stream: BinaryIO) -> HashTrie[Any]:
    """Read a trie previously written with ``write_trie``.

    Args:
        stream: A readable binary stream positioned at the start of a trie.

    Returns:
        A new trie holding the mappings read from the stream.

    Raises:
        CorruptDataError: If the count is missing, not an integer or negative,
            or if the stream ends before every mapping is read.
    """
    unpickler = pickle.Unpickler(stream)
    count = _load(unpickler, "mapping count")
    if not isinstance(count, int) or isinstance(count, bool):
        raise CorruptDataError(f"Illegal size: {count!r}")
    if count < 0:
        raise CorruptDataError(f"Illegal size: {count}")

    trie: HashTrie[Any] = HashTrie()
    for i in range(count):
        key = _load(unpickler, f"key {i + 1} of {count}")
        value = _load(unpickler, f"value {i + 1} of {count}")
        trie.put(key, value)
    logger.debug("Read %d mapping(s)", count)
    return trie


def _load(unpickler: pickle.Unpickler, what: str) -> Any:
    try:
        return unpickler.load()
    except (EOFError, pickle.UnpicklingError) as err:
        raise CorruptDataError(f"Unable to read {what}: {err}") from err


def dumps(trie: AbstractTrie[Any]) -> bytes:
    """Serialize a trie to bytes; see ``write_trie``."""
    buffer = io.BytesIO()
    write_trie(trie, buffer)
    return buffer.getvalue()


def loads(data: bytes) -> HashTrie[Any]:
    """Deserialize a trie from bytes; see ``read_trie``."""
    return read_trie(io.BytesIO(data))
