"""
Token listing domain: records, network normalization and fallback data.
"""

from .models import TokenListResponse, TokenRecord
from .networks import NETWORK_ALIASES, UNKNOWN_NETWORK, normalize_network
from .fallback import FALLBACK_ERROR, FALLBACK_RESPONSE, FALLBACK_TOKENS

__all__ = [
    "TokenListResponse",
    "TokenRecord",
    "NETWORK_ALIASES",
    "UNKNOWN_NETWORK",
    "normalize_network",
    "FALLBACK_ERROR",
    "FALLBACK_RESPONSE",
    "FALLBACK_TOKENS",
]
