"""
Alpha Monitor token listing service.
"""

import os

from fastapi.responses import FileResponse

from shared.base_service import BaseService, SERVICE_VERSION
from service_alpha.app.adapters.binance_alpha_client import BinanceAlphaClient
from service_alpha.app.caching.token_cache import TokenCache
from service_alpha.app.tokens.service import TokenListService

DEFAULT_STATIC_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "public")


class AlphaMonitorService(BaseService):
    """Token listing proxy service implementation."""

    def __init__(self, client: BinanceAlphaClient = None, cache: TokenCache = None, **config_overrides):
        super().__init__("alpha", **config_overrides)
        self.client = client or BinanceAlphaClient(
            self.config.upstream_url,
            timeout=self.config.upstream_timeout_seconds,
        )
        self.cache = cache or TokenCache(self.config.cache_ttl_seconds)
        self.token_service = TokenListService(self.client, self.cache, metrics=self.metrics)
        self.static_dir = self.config.static_dir or DEFAULT_STATIC_DIR

        @self.app.on_event("startup")
        async def _startup():
            self.logger.info(
                "Alpha Monitor service started",
                port=self.config.port,
                health=f"http://localhost:{self.config.port}/health",
                api=f"http://localhost:{self.config.port}/api/alpha-tokens",
            )

        @self.app.on_event("shutdown")
        async def _shutdown():
            await self.client.close()
            self.logger.info("HTTP client closed")

        self._setup_alpha_routes()

        # Expose service instance via app state for introspection/testing
        self.app.state.alpha_service = self

    def _setup_alpha_routes(self):
        """Set up token listing routes."""

        @self.app.get("/")
        async def root():
            """Serve the monitor page, or describe the service when it is absent."""
            index_path = os.path.join(self.static_dir, "index.html")
            if os.path.isfile(index_path):
                return FileResponse(index_path)
            return {
                "service": self.service_name,
                "message": "Alpha Monitor - Token Listing Proxy",
                "version": SERVICE_VERSION,
            }

        @self.app.get("/api/alpha-tokens")
        async def alpha_tokens():
            """Return the Alpha token listing. Always 200, see ``fallback``."""
            response = await self.token_service.get_token_list()
            return response.to_dict()


def create_app(**kwargs):
    """Create FastAPI application."""
    service = AlphaMonitorService(**kwargs)
    return service.app


def main():
    service = AlphaMonitorService()
    service.run()


if __name__ == "__main__":
    main()
