"""
Pytest Configuration and Fixtures

This module provides shared fixtures and configuration for all tests.
"""

import pytest

from lrucache.cache.arena import EntryArena
from lrucache.cache.lru import LRUCache


def assert_consistent(cache: LRUCache) -> None:
    """
    Walk both views of a cache and check they agree.

    Checks that the index and the recency list hold the same keys, that every
    index entry points at the slot holding its key, that the list is walkable
    the same way in both directions, and that size never exceeds capacity.
    """
    index = cache._index
    order = cache._order

    forward = list(order.iter_slots())
    backward = list(order.iter_slots(reverse=True))

    assert forward == backward[::-1]
    assert len(forward) == len(set(forward)) == len(order)
    assert len(index) == len(order) == cache.size()
    assert cache.size() <= cache.capacity()

    listed_keys = [order.key(slot) for slot in forward]
    assert set(listed_keys) == set(index)
    for key, slot in index.items():
        assert order.key(slot) == key

    if forward:
        assert order.head == forward[0]
        assert order.tail == forward[-1]
    else:
        assert order.head is None
        assert order.tail is None


# ============================================================================
# LRUCache Fixtures
# ============================================================================

@pytest.fixture
def cache() -> LRUCache:
    """Create an LRU cache for testing (3 entries max)."""
    return LRUCache(3)


@pytest.fixture
def small_cache() -> LRUCache:
    """Create an LRU cache with 5 entries max for eviction testing."""
    return LRUCache(5)


@pytest.fixture
def large_cache() -> LRUCache:
    """Create an LRU cache with larger capacity (10000 entries)."""
    return LRUCache(10000)


@pytest.fixture
def single_cache() -> LRUCache:
    """Create an LRU cache holding a single entry."""
    return LRUCache(1)


@pytest.fixture
def check_invariants():
    """
    Fixture exposing assert_consistent().

    Usage:
        def test_something(cache, check_invariants):
            cache.put(1, "one")
            check_invariants(cache)
    """
    return assert_consistent


# ============================================================================
# Arena Fixtures
# ============================================================================

@pytest.fixture
def arena() -> EntryArena:
    """Create an empty arena with room for 4 entries."""
    return EntryArena(max_slots=4)


# ============================================================================
# Pytest Configuration
# ============================================================================

def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
