"""
KV-Dictionary: Parallel-List Key-Value Container

A small associative container that maps unique keys to values using
two lists kept in lock-step. Built as a teaching data structure.
"""

from .config.settings import settings
from .store import Dictionary, DictionaryADT, DuplicateKeyError
from .utils.logging import setup_logging

__version__ = "1.0.0"

__all__ = [
    "Dictionary",
    "DictionaryADT",
    "DuplicateKeyError",
    "settings",
    "setup_logging",
]
