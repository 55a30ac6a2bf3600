"""Utility functions and helpers"""

from .async_helpers import sync_wrapper

__all__ = [
    "sync_wrapper"
]
