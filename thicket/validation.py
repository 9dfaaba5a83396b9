"""Key and value checks applied before any trie operation touches state."""

from __future__ import annotations

from typing import Any, TypeGuard

from thicket.common import InvalidKeyError, NullKeyError, NullValueError

__all__ = ["check_key", "check_value", "is_valid_key"]


def is_valid_key(key: Any) -> TypeGuard[str]:
    """Check whether a key is a non-empty string of letters and digits.

    Args:
        key: Candidate key of any type.

    Returns:
        True if ``check_key`` would accept the key, False otherwise.
    """
    if not isinstance(key, str) or not key:
        return False
    return all(c.isalpha() or c.isdecimal() for c in key)


def check_key(key: Any) -> None:
    """Validate a key argument.

    Args:
        key: The key to validate.

    Raises:
        NullKeyError: If key is None.
        InvalidKeyError: If key is not a string, is empty, or contains a
            character that is not a letter or digit.
    """
    if key is None:
        raise NullKeyError()
    if not isinstance(key, str):
        raise InvalidKeyError(f"Key should be a string, got {type(key).__name__}.")
    if not key:
        raise InvalidKeyError("Key could not be empty string.")
    for c in key:
        if not (c.isalpha() or c.isdecimal()):
            raise InvalidKeyError("Key should contain just letters or digits.")


def check_value(value: Any) -> None:
    """Validate a value argument.

    Raises:
        NullValueError: If value is None.
    """
    if value is None:
        raise NullValueError()
