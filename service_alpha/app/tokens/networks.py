"""
Network name normalization for token records.
"""

from typing import Any, Mapping, Optional

UNKNOWN_NETWORK = "Unknown"

# Keys are upper-cased, trimmed identifiers as seen upstream
NETWORK_ALIASES = {
    "SOL": "Solana",
    "SOLANA": "Solana",
    "BSC": "BSC",
    "BNB": "BSC",
    "BNB SMART CHAIN": "BSC",
    "BINANCE SMART CHAIN": "BSC",
    "ETH": "Ethereum",
    "ETHEREUM": "Ethereum",
    "POLYGON": "Polygon",
    "MATIC": "Polygon",
    "AVAX": "Avalanche",
    "AVALANCHE": "Avalanche",
    "ARB": "Arbitrum",
    "ARBITRUM": "Arbitrum",
}

# Upstream has used each of these keys for the chain over time
_NETWORK_KEYS = ("chainName", "network", "chain")


def normalize_network(network: Optional[Any]) -> str:
    """Map a raw network identifier to its canonical display name.

    Matching is case-insensitive and ignores surrounding whitespace.
    Unrecognized identifiers are returned unchanged; missing or blank ones
    become ``"Unknown"``.
    """
    if network is None:
        return UNKNOWN_NETWORK

    value = str(network)
    key = value.strip().upper()
    if not key:
        return UNKNOWN_NETWORK
    return NETWORK_ALIASES.get(key, value)


def raw_network(token: Mapping[str, Any]) -> Optional[Any]:
    """Return the first populated network field of an upstream token."""
    for key in _NETWORK_KEYS:
        value = token.get(key)
        if value:
            return value
    return None
