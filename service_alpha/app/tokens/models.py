"""
Token listing records and responses.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Tuple

from .networks import normalize_network, raw_network


@dataclass(frozen=True)
class TokenRecord:
    """A single token in the listing, with its network already normalized.

    ``fields`` holds the token exactly as received, in upstream key order;
    only ``network`` is replaced on output.
    """

    network: str
    fields: Mapping[str, Any] = field(default_factory=dict)

    @property
    def name(self) -> Optional[str]:
        return self.fields.get("name")

    @property
    def symbol(self) -> Optional[str]:
        return self.fields.get("symbol")

    @property
    def contract_address(self) -> Optional[str]:
        return self.fields.get("contractAddress")

    @property
    def logo(self) -> Optional[str]:
        return self.fields.get("logo")

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the record to the JSON shape served to clients.

        An existing ``network`` key keeps its position; otherwise it is
        appended.
        """
        payload: Dict[str, Any] = dict(self.fields)
        payload["network"] = self.network
        return payload

    @classmethod
    def build(
        cls,
        *,
        name: str,
        symbol: str,
        contract_address: str,
        network: str,
        logo: str = "",
    ) -> "TokenRecord":
        """Build a record from its modelled fields."""
        return cls(
            network=network,
            fields={
                "name": name,
                "symbol": symbol,
                "contractAddress": contract_address,
                "network": network,
                "logo": logo,
            },
        )

    @classmethod
    def from_upstream(cls, payload: Mapping[str, Any]) -> "TokenRecord":
        """Build a record from an upstream token object, normalizing its network."""
        return cls(
            network=normalize_network(raw_network(payload)),
            fields=dict(payload),
        )


@dataclass(frozen=True)
class TokenListResponse:
    """Payload returned by the token listing endpoint."""

    success: bool
    data: Tuple[TokenRecord, ...]
    fallback: Optional[bool] = None
    error: Optional[str] = None
    extra: Mapping[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the response to a JSON-friendly dictionary.

        Keys already present in ``extra`` keep their position.
        """
        payload: Dict[str, Any] = dict(self.extra)
        payload["success"] = self.success
        payload["data"] = [record.to_dict() for record in self.data]
        if self.fallback is not None:
            payload["fallback"] = self.fallback
        if self.error is not None:
            payload["error"] = self.error
        return payload

    @classmethod
    def from_upstream(cls, payload: Mapping[str, Any]) -> "TokenListResponse":
        """Build a response from a successful upstream body.

        Top-level fields are carried over untouched and in order; only the
        records under ``data`` are rebuilt.
        """
        return cls(
            success=bool(payload.get("success")),
            data=tuple(TokenRecord.from_upstream(item) for item in payload["data"]),
            fallback=payload.get("fallback"),
            error=payload.get("error"),
            extra=dict(payload),
        )
