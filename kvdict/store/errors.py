"""Exceptions raised by the dictionary."""

from typing import Any


class DuplicateKeyError(KeyError):
    """
    Raised by insert() when the key is already stored.

    Attributes:
        key: The offending key
    """

    def __init__(self, key: Any):
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"Key already exists: {self.key!r}"
