"""
LRU-Cache: Fixed-Capacity In-Memory Cache

A key-value cache with Least Recently Used eviction. Lookup, insertion,
update and eviction all run in O(1) time.
"""

from .cache import InvalidArgument, LRUCache

__version__ = "1.0.0"

__all__ = ["InvalidArgument", "LRUCache"]
