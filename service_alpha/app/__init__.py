"""
Alpha Monitor token listing service.

Fronts the Binance Alpha token list API with a short-lived in-process cache
and a static fallback listing, so clients always receive a usable payload.

Structure:
- app.main: FastAPI app, routes, and lifecycle wiring.
- app.adapters: HTTP client for the upstream token list API.
- app.caching: TTL cache for the latest listing.
- app.tokens: Records, network normalization, fallback data and the
  listing service that ties them together.
"""
