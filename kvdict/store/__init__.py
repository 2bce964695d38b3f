"""Store module for KV-Dictionary."""

from .adt import DictionaryADT
from .dictionary import Dictionary
from .errors import DuplicateKeyError

__all__ = ["Dictionary", "DictionaryADT", "DuplicateKeyError"]
