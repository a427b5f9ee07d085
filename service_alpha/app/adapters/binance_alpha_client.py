"""
HTTP client for the Binance Alpha token list API.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

import httpx

from shared.config import BINANCE_ALPHA_API
from shared.errors import ExternalServiceError
from shared.logging import get_logger


UPSTREAM_SERVICE = "binance_alpha"

DEFAULT_HEADERS = {
    "User-Agent": "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36",
    "Accept": "application/json",
    "Accept-Language": "zh-CN,zh;q=0.9,en;q=0.8",
    "Referer": "https://www.binance.com/",
    "Origin": "https://www.binance.com",
}


@dataclass(frozen=True)
class UpstreamSuccess:
    """Upstream answered with a usable listing body."""

    payload: Dict[str, Any]


@dataclass(frozen=True)
class UpstreamFailure:
    """Upstream could not be reached or answered with something unusable.

    ``reason`` is a short machine label: ``transport``, ``timeout``,
    ``http_status``, ``invalid_json`` or ``unsuccessful``.
    """

    reason: str
    error: str


UpstreamResult = Union[UpstreamSuccess, UpstreamFailure]


def _reject_constant(name: str) -> Any:
    """Refuse NaN and Infinity, which are not valid JSON and cannot be re-encoded."""
    raise ValueError(f"Invalid JSON constant: {name}")


class BinanceAlphaClient:
    """Fetches the Alpha token list with a single, non-retried request."""

    def __init__(
        self,
        url: str = BINANCE_ALPHA_API,
        *,
        timeout: float = 10.0,
        headers: Optional[Dict[str, str]] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.url = url
        self.timeout = timeout
        self.headers = dict(headers or DEFAULT_HEADERS)
        self.logger = get_logger("alpha.binance_client")
        self._client = httpx.AsyncClient(
            headers=self.headers,
            timeout=timeout,
            transport=transport,
        )

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()

    async def fetch_token_list(self) -> UpstreamResult:
        """Request the token list and classify the outcome.

        Never raises for upstream problems; they come back as
        :class:`UpstreamFailure`.
        """
        try:
            payload = await self._request()
        except ExternalServiceError as exc:
            reason = exc.details.get("reason", "transport")
            self.logger.warning(
                "Alpha token list request failed",
                url=self.url,
                reason=reason,
                error=exc.message,
            )
            return UpstreamFailure(reason=reason, error=exc.message)

        return UpstreamSuccess(payload=payload)

    async def _request(self) -> Dict[str, Any]:
        """Execute the GET and validate the body, raising ExternalServiceError on any problem."""
        try:
            response = await self._client.get(self.url)
        except httpx.TimeoutException as exc:
            raise ExternalServiceError(
                service=UPSTREAM_SERVICE,
                message=f"Request timed out after {self.timeout}s",
                details={"reason": "timeout", "error": str(exc)},
            ) from exc
        except httpx.HTTPError as exc:
            raise ExternalServiceError(
                service=UPSTREAM_SERVICE,
                message=str(exc) or exc.__class__.__name__,
                details={"reason": "transport"},
            ) from exc

        if response.status_code != 200:
            raise ExternalServiceError(
                service=UPSTREAM_SERVICE,
                message=f"Unexpected status {response.status_code}",
                details={"reason": "http_status", "status_code": response.status_code},
            )

        try:
            payload = json.loads(response.content, parse_constant=_reject_constant)
        except ValueError as exc:
            raise ExternalServiceError(
                service=UPSTREAM_SERVICE,
                message="Response body is not valid JSON",
                details={"reason": "invalid_json"},
            ) from exc

        if not isinstance(payload, dict) or not payload.get("success"):
            raise ExternalServiceError(
                service=UPSTREAM_SERVICE,
                message="Invalid response from Binance API",
                details={"reason": "unsuccessful"},
            )

        data = payload.get("data")
        if not isinstance(data, list) or not all(isinstance(item, dict) for item in data):
            raise ExternalServiceError(
                service=UPSTREAM_SERVICE,
                message="Response data is not a list of tokens",
                details={"reason": "unsuccessful"},
            )

        self.logger.debug("Alpha token list retrieved", url=self.url, count=len(data))
        return payload
