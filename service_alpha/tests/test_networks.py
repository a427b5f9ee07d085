"""
Unit tests for network name normalization.
"""

import pytest

from service_alpha.app.tokens.networks import normalize_network, raw_network, UNKNOWN_NETWORK


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("SOL", "Solana"),
        ("solana", "Solana"),
        ("  Sol  ", "Solana"),
        ("BSC", "BSC"),
        ("bnb", "BSC"),
        ("BNB Smart Chain", "BSC"),
        (" binance smart chain\t", "BSC"),
        ("eth", "Ethereum"),
        ("Ethereum", "Ethereum"),
        ("POLYGON", "Polygon"),
        ("matic ", "Polygon"),
        ("Avax", "Avalanche"),
        ("AVALANCHE", "Avalanche"),
        ("arb", "Arbitrum"),
        ("\nArbitrum", "Arbitrum"),
    ],
)
def test_known_networks_are_canonicalized(raw, expected):
    assert normalize_network(raw) == expected


@pytest.mark.parametrize("raw", ["Base", "  Sui ", "TRON", "optimism"])
def test_unrecognized_network_passes_through_unchanged(raw):
    assert normalize_network(raw) == raw


@pytest.mark.parametrize("raw", [None, "", "   "])
def test_missing_network_is_unknown(raw):
    assert normalize_network(raw) == UNKNOWN_NETWORK


def test_non_string_network_is_stringified():
    assert normalize_network(56) == "56"


class TestRawNetwork:
    """Selection of the upstream field carrying the chain."""

    def test_prefers_chain_name(self):
        token = {"chainName": "BSC", "network": "ETH", "chain": "SOL"}
        assert raw_network(token) == "BSC"

    def test_falls_back_to_network_then_chain(self):
        assert raw_network({"chainName": "", "network": "ETH", "chain": "SOL"}) == "ETH"
        assert raw_network({"chain": "SOL"}) == "SOL"

    def test_returns_none_when_absent(self):
        assert raw_network({"name": "Token"}) is None
