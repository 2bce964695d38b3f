"""
Dictionary Module

This module implements the core key-value container.

Pairs are kept in two parallel lists: the value at position i belongs
to the key at position i. Every operation first locates the key by a
linear scan and only then reads or writes both lists at that position,
so a failed operation never leaves the lists at different lengths.
"""

import logging
from typing import Any, Dict, List, Optional

from ..config.settings import settings
from .adt import K, V, DictionaryADT
from .errors import DuplicateKeyError

logger = logging.getLogger(__name__)


class Dictionary(DictionaryADT[K, V]):
    """
    Associative container of unique keys backed by two parallel lists.

    Keys are compared with ==, not identity, so callers must use a key
    type whose equality is total and consistent. Insertion order is kept,
    and removal shifts later pairs down instead of swapping with the last.

    All operations are O(n) in the number of stored pairs.

    Usage:
        d = Dictionary()
        d.insert("x", 1)
        d.lookup("x")        # 1
        d.update("x", 2)     # True
        d.remove("x")        # 2
        d.lookup("x")        # None

    Attributes:
        capacity_hint: Advisory expected size; never limits the store
    """

    def __init__(self, capacity_hint: Optional[int] = None):
        """
        Initialize an empty dictionary.

        Args:
            capacity_hint: Expected number of pairs (default from
                settings.DEFAULT_CAPACITY)

        Raises:
            ValueError: If capacity_hint is negative or not an integer
        """
        self.capacity_hint = self._check_hint(capacity_hint)
        self._keys: List[K] = []
        self._values: List[V] = []

    @staticmethod
    def _is_valid_hint(capacity_hint: Any) -> bool:
        return (isinstance(capacity_hint, int)
                and not isinstance(capacity_hint, bool)
                and capacity_hint >= 0)

    @staticmethod
    def _check_hint(capacity_hint: Optional[int]) -> int:
        if capacity_hint is None:
            return settings.DEFAULT_CAPACITY
        if not isinstance(capacity_hint, int) or isinstance(capacity_hint, bool):
            raise ValueError(f"capacity_hint must be an integer, got {capacity_hint!r}")
        if capacity_hint < 0:
            raise ValueError("capacity_hint must not be negative")
        return capacity_hint

    def _index_of(self, key: K) -> int:
        """Return the position of the first key equal to key, or -1."""
        for index, stored in enumerate(self._keys):
            if stored == key:
                return index
        return -1

    def reset(self, capacity_hint: Optional[int] = None) -> None:
        """
        Discard every stored pair.

        The hint is advisory only: lists grow on demand, and an invalid
        hint falls back to settings.DEFAULT_CAPACITY instead of raising.

        Args:
            capacity_hint: New advisory size (default from settings)
        """
        if self._is_valid_hint(capacity_hint):
            self.capacity_hint = capacity_hint
        else:
            if capacity_hint is not None:
                logger.debug("Ignoring invalid capacity hint %r", capacity_hint)
            self.capacity_hint = settings.DEFAULT_CAPACITY
        discarded = len(self._keys)
        self._keys.clear()
        self._values.clear()
        logger.debug("Reset dictionary, discarded %d pairs", discarded)

    def insert(self, key: K, value: V) -> bool:
        """
        Add a new key-value pair.

        Args:
            key: The key to add
            value: The value to associate with the key

        Returns:
            True on success

        Raises:
            DuplicateKeyError: If an equal key is already stored; the
                dictionary is left unchanged
        """
        if self._index_of(key) != -1:
            logger.debug("Rejected duplicate key %r", key)
            raise DuplicateKeyError(key)

        self._keys.append(key)
        self._values.append(value)
        logger.debug("Inserted key %r", key)
        return True

    def remove(self, key: K, default: Any = None) -> Any:
        """
        Remove a key and return its value.

        Later pairs keep their relative order.

        Args:
            key: The key to remove
            default: Returned when the key is absent

        Returns:
            The removed value, or default if the key wasn't found
        """
        index = self._index_of(key)
        if index == -1:
            return default

        del self._keys[index]
        value = self._values.pop(index)
        logger.debug("Removed key %r", key)
        return value

    def update(self, key: K, value: V) -> bool:
        """
        Replace the value of an existing key.

        Args:
            key: The key whose value changes
            value: The new value

        Returns:
            True if updated, False if the key wasn't found
        """
        index = self._index_of(key)
        if index == -1:
            return False

        self._values[index] = value
        logger.debug("Updated key %r", key)
        return True

    def lookup(self, key: K, default: Any = None) -> Any:
        """
        Find the value stored under a key.

        Args:
            key: The key to look up
            default: Returned when the key is absent

        Returns:
            The stored value, or default if the key wasn't found
        """
        index = self._index_of(key)
        return self._values[index] if index != -1 else default

    def contains(self, key: K) -> bool:
        """
        Check if a key is stored.

        Use this to tell a stored None apart from a missing key.
        """
        return self._index_of(key) != -1

    def size(self) -> int:
        """Get the number of stored pairs."""
        return len(self._keys)

    def is_empty(self) -> bool:
        """Check if no pairs are stored."""
        return not self._keys

    def get_stats(self) -> Dict[str, Any]:
        """
        Get statistics about the dictionary.

        Returns:
            Dictionary containing:
            - size: Number of stored pairs
            - capacity_hint: Advisory capacity
            - utilization: size as a fraction of capacity_hint (may exceed 1)
        """
        size = len(self._keys)
        return {
            "size": size,
            "capacity_hint": self.capacity_hint,
            "utilization": size / self.capacity_hint if self.capacity_hint > 0 else 0,
        }

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={self.size()}, capacity_hint={self.capacity_hint})"
