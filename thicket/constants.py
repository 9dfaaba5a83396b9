"""Library-wide constants for thicket.

This module holds the fixed tokens and defaults shared by the trie engine,
its string rendering, the prefix-tree facade, and the stream format.
"""

import pickle

SELF_REFERENCE_TOKEN = "(this Trie)"
"""Rendered in place of a value that is the containing trie itself."""

PREFIX_TREE_SENTINEL = True
"""Value stored for every member of a prefix tree."""

STREAM_PROTOCOL = pickle.HIGHEST_PROTOCOL
"""Pickle protocol used for each record of the trie stream format."""

ENTRY_SEPARATOR = ", "
"""Separator between rendered entries in string forms."""
