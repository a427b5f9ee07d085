"""
Unit tests for token listing records and responses.
"""

from service_alpha.app.tokens.models import TokenListResponse, TokenRecord


class TestTokenRecord:
    """Test cases for TokenRecord serialization."""

    def test_null_upstream_fields_are_kept(self):
        record = TokenRecord.from_upstream({"name": "X", "symbol": None, "logo": None, "chainName": "BSC"})

        assert record.to_dict() == {
            "name": "X",
            "symbol": None,
            "logo": None,
            "chainName": "BSC",
            "network": "BSC",
        }
        assert record.symbol is None

    def test_upstream_key_order_is_preserved(self):
        record = TokenRecord.from_upstream(
            {"symbol": "LISA", "network": "bnb", "price": "0.1", "name": "AgentLISA", "logo": ""}
        )

        payload = record.to_dict()

        assert list(payload) == ["symbol", "network", "price", "name", "logo"]
        assert payload["network"] == "BSC"

    def test_network_is_appended_when_absent(self):
        record = TokenRecord.from_upstream({"name": "X", "chain": "eth"})

        assert list(record.to_dict()) == ["name", "chain", "network"]
        assert record.network == "Ethereum"

    def test_build_exposes_modelled_fields(self):
        record = TokenRecord.build(name="Token", symbol="TKN", contract_address="0xabc", network="BSC")

        assert record.name == "Token"
        assert record.contract_address == "0xabc"
        assert record.logo == ""
        assert list(record.to_dict()) == ["name", "symbol", "contractAddress", "network", "logo"]


class TestTokenListResponse:
    """Test cases for TokenListResponse serialization."""

    def test_top_level_fields_keep_upstream_order(self):
        response = TokenListResponse.from_upstream({
            "code": "000000",
            "message": None,
            "data": [{"name": "X", "chainName": "sol"}],
            "success": True,
        })

        payload = response.to_dict()

        assert list(payload) == ["code", "message", "data", "success"]
        assert payload["message"] is None
        assert payload["data"] == [{"name": "X", "chainName": "sol", "network": "Solana"}]

    def test_fallback_fields_follow_listing(self):
        response = TokenListResponse(success=True, data=(), fallback=True, error="down")

        assert list(response.to_dict()) == ["success", "data", "fallback", "error"]
