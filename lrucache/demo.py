#!/usr/bin/env python3
"""
LRU-Cache Demo Entry Point

Walks through the canonical LRU scenario on a small cache: fill it, touch
the oldest key, overflow it, then report which keys survived.

Usage:
    python -m lrucache.demo                 # Default settings (capacity 3)
    python -m lrucache.demo --capacity 5    # Custom capacity
    python -m lrucache.demo --debug         # Enable debug logging

Environment Variables:
    LRU_CACHE_CAPACITY   - Default cache capacity
    LRU_CACHE_DEBUG      - Enable debug mode (true/false)
    LRU_CACHE_LOG_LEVEL  - Log level when not in debug mode
"""

import argparse
import logging
import sys
from typing import List, Optional

from .cache.errors import InvalidArgument
from .cache.lru import LRUCache
from .config.settings import settings

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="LRU-Cache: Fixed-Capacity LRU Cache Demo",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    parser.add_argument(
        "--capacity",
        type=int,
        default=settings.DEFAULT_CAPACITY,
        help="Maximum number of entries in the cache",
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        default=settings.DEBUG,
        help="Enable debug logging",
    )

    return parser.parse_args(argv)


def setup_logging(debug: bool = False) -> None:
    """Configure logging based on debug flag."""
    level = logging.DEBUG if debug else getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stdout),
        ]
    )


def run_demo(cache: LRUCache) -> None:
    """Run the fill/touch/overflow scenario against a cache."""
    cache.put(1, "one")
    cache.put(2, "two")
    cache.put(3, "three")
    print(f"Size: {cache.size()}")

    value = cache.get(1)
    if value is not None:
        print(f"Key 1: {value}")

    cache.put(4, "four")
    print(f"Contains 2? {'yes' if cache.contains(2) else 'no'}")
    print(f"Contains 4? {'yes' if cache.contains(4) else 'no'}")

    stats = cache.get_stats()
    print(f"Keys (MRU -> LRU): {cache.keys()}")
    print(f"Hits: {stats['hits']}  Misses: {stats['misses']}  Evictions: {stats['evictions']}")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the demo."""
    args = parse_args(argv)

    setup_logging(debug=args.debug)

    logger.info("Starting LRU-Cache demo")
    logger.info(f"  Capacity: {args.capacity}")

    try:
        cache = LRUCache(args.capacity)
    except InvalidArgument as e:
        logger.error(f"Invalid configuration: {e}")
        return 2

    run_demo(cache)
    return 0


if __name__ == "__main__":
    sys.exit(main())
