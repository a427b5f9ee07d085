"""
Alpha Monitor caching package.
"""

from .token_cache import CacheEntry, TokenCache

__all__ = ["CacheEntry", "TokenCache"]
