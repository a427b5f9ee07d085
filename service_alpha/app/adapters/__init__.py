"""
Adapters package for the Alpha Monitor service.

Contains the HTTP client for the upstream token list API. Upstream
problems are reported as result values rather than raised, so callers
decide how to degrade.
"""

from .binance_alpha_client import (
    BinanceAlphaClient,
    UpstreamFailure,
    UpstreamResult,
    UpstreamSuccess,
)

__all__ = [
    "BinanceAlphaClient",
    "UpstreamFailure",
    "UpstreamResult",
    "UpstreamSuccess",
]
