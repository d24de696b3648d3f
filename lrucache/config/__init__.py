"""Configuration module for LRU-Cache."""

from .settings import Settings, settings

__all__ = ["Settings", "settings"]
