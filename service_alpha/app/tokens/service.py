"""
Token listing service: cache lookup, upstream fetch and fallback.
"""

from __future__ import annotations

import time
from typing import Optional

from shared.logging import get_logger
from shared.metrics import MetricsCollector

from service_alpha.app.adapters.binance_alpha_client import (
    BinanceAlphaClient,
    UpstreamResult,
    UpstreamSuccess,
)
from service_alpha.app.caching.token_cache import TokenCache

from .fallback import FALLBACK_RESPONSE
from .models import TokenListResponse


class TokenListService:
    """Serves the Alpha token listing from cache, upstream or fallback data.

    Callers always get a successful payload. Upstream problems of any kind
    are answered with the static fallback listing, which is never cached.
    """

    def __init__(
        self,
        client: BinanceAlphaClient,
        cache: TokenCache,
        *,
        metrics: Optional[MetricsCollector] = None,
    ) -> None:
        self.client = client
        self.cache = cache
        self.metrics = metrics
        self.logger = get_logger("alpha.tokens")

    async def get_token_list(self) -> TokenListResponse:
        cached = self.cache.get()
        if cached is not None:
            self.logger.info("Returning cached Alpha tokens", age_seconds=self.cache.age())
            self._record_cache_lookup(hit=True)
            return cached

        self._record_cache_lookup(hit=False)
        self.logger.info("Fetching fresh Alpha tokens from upstream", url=self.client.url)

        started = time.perf_counter()
        result = await self.client.fetch_token_list()
        duration = time.perf_counter() - started

        return self._resolve(result, duration)

    def _resolve(self, result: UpstreamResult, duration: float) -> TokenListResponse:
        """Map an upstream outcome onto the served payload."""
        if isinstance(result, UpstreamSuccess):
            response = TokenListResponse.from_upstream(result.payload)
            self.cache.set(response)
            self._record_upstream("success", duration)
            self._set_tokens_served(len(response.data), "upstream")
            self.logger.info("Successfully fetched Alpha tokens", count=len(response.data))
            return response

        self._record_upstream(result.reason, duration)
        self._set_tokens_served(len(FALLBACK_RESPONSE.data), "fallback")
        if self.metrics:
            self.metrics.record_fallback()
        self.logger.error(
            "Error fetching Alpha tokens, serving fallback data",
            reason=result.reason,
            error=result.error,
        )
        return FALLBACK_RESPONSE

    def _record_cache_lookup(self, hit: bool) -> None:
        if self.metrics:
            self.metrics.record_cache_lookup(hit)

    def _record_upstream(self, outcome: str, duration: float) -> None:
        if self.metrics:
            self.metrics.record_upstream_call(outcome, duration)

    def _set_tokens_served(self, count: int, source: str) -> None:
        if self.metrics:
            self.metrics.set_gauge("tokens_served", count, source=source)
