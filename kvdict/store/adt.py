"""
Dictionary Abstract Data Type

Declares the operations every dictionary implementation must provide.
"""

from abc import ABC, abstractmethod
from typing import Any, Generic, Optional, TypeVar

K = TypeVar("K")
V = TypeVar("V")


class DictionaryADT(ABC, Generic[K, V]):
    """Interface for a container of unique keys mapped to values."""

    @abstractmethod
    def reset(self, capacity_hint: Optional[int] = None) -> None:
        """Discard every stored pair."""

    @abstractmethod
    def insert(self, key: K, value: V) -> bool:
        """
        Add a new pair.

        Raises:
            DuplicateKeyError: If the key is already stored
        """

    @abstractmethod
    def remove(self, key: K, default: Any = None) -> Any:
        """Remove a pair and return its value, or default if absent."""

    @abstractmethod
    def update(self, key: K, value: V) -> bool:
        """Replace the value of an existing key; False if absent."""

    @abstractmethod
    def lookup(self, key: K, default: Any = None) -> Any:
        """Return the value stored under key, or default if absent."""
