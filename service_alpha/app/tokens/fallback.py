"""
Static token listing served when the upstream API is unavailable.
"""

from .models import TokenListResponse, TokenRecord

FALLBACK_ERROR = "Using fallback data due to API error"

FALLBACK_TOKENS = (
    TokenRecord.build(
        name="AgentLISA",
        symbol="LISA",
        contract_address="0x0AA9D742A1e3C4Ad2947eBbf268aFA15D7c9bFBd",
        network="BSC",
        logo="",
    ),
    TokenRecord.build(
        name="AI16Z",
        symbol="AI16Z",
        contract_address="HeLp6NuQkmYB4pYWo2zYs22mESHXPQYzXbB8n4V98jwC",
        network="SOLANA",
        logo="",
    ),
    TokenRecord.build(
        name="Zerebro",
        symbol="ZEREBRO",
        contract_address="HrrkVQ3RB8i...",
        network="SOLANA",
        logo="",
    ),
    TokenRecord.build(
        name="Fartcoin",
        symbol="FARTCOIN",
        contract_address="9BB6NFEcjBCtnNLFko2FqVQBq8HHM13kCyYcdQbgpump",
        network="SOLANA",
        logo="",
    ),
    TokenRecord.build(
        name="Moodeng",
        symbol="MOODENG",
        contract_address="ED5nyyWEzpPPiWimP8vYm7sD7TD3LAt3Q3gRTWHzPJBY",
        network="SOLANA",
        logo="",
    ),
)

FALLBACK_RESPONSE = TokenListResponse(
    success=True,
    data=FALLBACK_TOKENS,
    fallback=True,
    error=FALLBACK_ERROR,
)
