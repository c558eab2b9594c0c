"""Shared dependencies for API routes."""

from collections.abc import AsyncIterator

from config import settings
from services.matching.embeddings import EmbeddingClient, build_embedding_client


async def get_embedding_client() -> AsyncIterator[EmbeddingClient]:
    """One embedding client per request, built from explicit settings."""
    client = build_embedding_client(settings.embedding_config())
    try:
        yield client
    finally:
        await client.aclose()
