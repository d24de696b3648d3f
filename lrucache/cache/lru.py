"""
LRU Cache Module

This module implements a fixed-capacity key-value cache with Least Recently
Used (LRU) eviction.

Two views of the same entries are kept consistent on every mutation:
- The index: a dict mapping each key to a slot id
- The order: an EntryArena linking slots from MRU (head) to LRU (tail)

LRU Concept:
- On access (get/put), move the entry to the head
- On overflow, evict the tail
- contains() and peek() never change the order

get, put, contains, erase and the size queries are all O(1).
"""

import logging
from typing import Any, Dict, Hashable, List, Optional, Tuple

from .arena import EntryArena
from .errors import InvalidArgument

logger = logging.getLogger(__name__)


class LRUCache:
    """
    Fixed-capacity cache with strict LRU eviction.

    The cache is single-owner: it does no locking, and callers sharing one
    instance between threads must guard every call with one lock.

    Usage:
        cache = LRUCache(3)
        cache.put(1, "one")
        value = cache.get(1)  # Returns "one", marks 1 as recently used

    When the cache holds capacity entries, inserting a new key evicts the
    least recently used entry first.

    Values are returned as the stored object itself, never copied. Use
    take() to remove an entry and receive its value in one step.
    """

    def __init__(self, capacity: int):
        """
        Initialize the cache.

        Args:
            capacity: Maximum number of entries (must be a positive integer)

        Raises:
            InvalidArgument: If capacity is zero, negative or not an integer
        """
        if isinstance(capacity, bool) or not isinstance(capacity, int):
            raise InvalidArgument(f"capacity must be an integer, got {capacity!r}")
        if capacity <= 0:
            raise InvalidArgument(f"capacity must be positive, got {capacity}")

        self._capacity = capacity
        self._index: Dict[Hashable, int] = {}
        self._order = EntryArena(max_slots=capacity)

        self._hits = 0
        self._misses = 0
        self._evictions = 0

        logger.debug(f"Created LRUCache with capacity {capacity}")

    def get(self, key: Hashable, default: Any = None) -> Any:
        """
        Get a value and mark its entry as most recently used.

        Args:
            key: The key to retrieve
            default: Returned when the key is absent

        Returns:
            The stored value if found, default otherwise

        Time Complexity: O(1)
        """
        slot = self._index.get(key)
        if slot is None:
            self._misses += 1
            return default

        self._hits += 1
        self._order.move_to_front(slot)
        return self._order.value(slot)

    def put(self, key: Hashable, value: Any) -> None:
        """
        Insert or update an entry, evicting the LRU entry if necessary.

        Args:
            key: The key to store
            value: The value to store

        Time Complexity: O(1)

        Behavior:
        - If key exists, replace its value and move it to the head (no eviction)
        - If key is new and the cache is full, evict the tail first
        - Insert the new entry at the head
        """
        slot = self._index.get(key)
        if slot is not None:
            self._order.set_value(slot, value)
            self._order.move_to_front(slot)
            return

        if len(self._index) >= self._capacity:
            self._evict()

        slot = self._order.allocate(key, value)
        self._order.push_front(slot)
        self._index[key] = slot

    def contains(self, key: Hashable) -> bool:
        """
        Check if key exists (without updating LRU order).

        Time Complexity: O(1)
        """
        return key in self._index

    def erase(self, key: Hashable) -> bool:
        """
        Remove an entry from the cache.

        Args:
            key: The key to remove

        Returns:
            True if an entry was removed, False if the key was absent

        Time Complexity: O(1)
        """
        slot = self._index.pop(key, None)
        if slot is None:
            return False
        self._order.release(slot)
        return True

    def take(self, key: Hashable, default: Any = None) -> Any:
        """
        Remove an entry and return its value.

        Args:
            key: The key to remove
            default: Returned when the key is absent

        Returns:
            The removed value, or default if the key was absent

        Time Complexity: O(1)
        """
        slot = self._index.pop(key, None)
        if slot is None:
            return default
        _, value = self._order.release(slot)
        return value

    def peek(self, key: Hashable, default: Any = None) -> Any:
        """
        Get a value without updating LRU order.

        Note: Unlike get(), this does NOT move the key to the MRU position
        and does not count towards hits or misses.
        """
        slot = self._index.get(key)
        if slot is None:
            return default
        return self._order.value(slot)

    def pop_lru(self) -> Optional[Tuple[Hashable, Any]]:
        """
        Manually evict the least recently used entry.

        Returns:
            Tuple of (key, value) that was evicted, or None if cache is empty

        Time Complexity: O(1)
        """
        if not self._index:
            return None
        return self._evict()

    def lru_key(self) -> Optional[Hashable]:
        """Get the key of the least recently used entry, or None if empty."""
        tail = self._order.tail
        return None if tail is None else self._order.key(tail)

    def mru_key(self) -> Optional[Hashable]:
        """Get the key of the most recently used entry, or None if empty."""
        head = self._order.head
        return None if head is None else self._order.key(head)

    def clear(self) -> None:
        """Remove all entries; capacity is preserved and stats are reset."""
        dropped = len(self._index)
        self._index.clear()
        self._order.clear()
        self._hits = 0
        self._misses = 0
        self._evictions = 0
        logger.debug(f"Cleared {dropped} entries")

    def size(self) -> int:
        """Get current number of entries."""
        return len(self._index)

    def capacity(self) -> int:
        return self._capacity

    def empty(self) -> bool:
        return not self._index

    def is_full(self) -> bool:
        """Check if the next new key would cause an eviction."""
        return len(self._index) >= self._capacity

    def keys(self) -> List[Hashable]:
        """
        Get all keys in recency order.

        Returns:
            List of keys from MRU (newest) to LRU (oldest)
        """
        return [self._order.key(slot) for slot in self._order.iter_slots()]

    def items(self) -> List[Tuple[Hashable, Any]]:
        """Get (key, value) pairs from MRU to LRU without touching the order."""
        return [
            (self._order.key(slot), self._order.value(slot))
            for slot in self._order.iter_slots()
        ]

    def get_stats(self) -> Dict[str, Any]:
        """Get cache statistics."""
        lookups = self._hits + self._misses
        return {
            "size": len(self._index),
            "capacity": self._capacity,
            "utilization": len(self._index) / self._capacity,
            "hits": self._hits,
            "misses": self._misses,
            "evictions": self._evictions,
            "hit_rate": self._hits / lookups if lookups else 0.0,
            "lru_key": self.lru_key(),
            "mru_key": self.mru_key(),
        }

    def _evict(self) -> Tuple[Hashable, Any]:
        tail = self._order.tail
        key, value = self._order.release(tail)
        del self._index[key]
        self._evictions += 1
        logger.debug(f"Evicted key {key!r}")
        return key, value

    def __len__(self) -> int:
        return len(self._index)

    def __contains__(self, key: object) -> bool:
        return key in self._index

    def __repr__(self) -> str:
        return f"LRUCache(capacity={self._capacity}, size={len(self._index)})"
