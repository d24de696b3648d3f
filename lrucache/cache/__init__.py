"""Cache module for LRU-Cache."""

from .arena import EntryArena
from .errors import InvalidArgument
from .lru import LRUCache

__all__ = ["EntryArena", "InvalidArgument", "LRUCache"]
