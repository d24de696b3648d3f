"""
LRU-Cache Configuration Settings

This module contains the configuration constants used by the demo entry
point and the benchmark script. LRUCache itself never reads them; its
capacity is always passed explicitly.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Runtime configuration settings."""

    # Demo settings
    DEFAULT_CAPACITY: int = int(os.environ.get("LRU_CACHE_CAPACITY", "3"))

    # Benchmark settings
    BENCHMARK_OPERATIONS: int = int(os.environ.get("LRU_CACHE_BENCH_OPS", "10000"))

    # Logging settings
    DEBUG: bool = os.environ.get("LRU_CACHE_DEBUG", "false").lower() == "true"
    LOG_LEVEL: str = os.environ.get("LRU_CACHE_LOG_LEVEL", "INFO")


# Global settings instance
settings = Settings()
