"""Embedding provider boundary.

Every client answers ``embed(text) -> list[float] | None``. ``None`` means the
provider could not produce a usable vector (transport failure, timeout, bad
status, malformed or non-numeric payload). Callers degrade to lexical scoring
on ``None``; they never see provider exceptions. Only those failure classes
are absorbed here, anything else is a bug and propagates.

Clients are configured with an explicit ``EmbeddingConfig`` at construction
and never read process settings themselves. No retries at this layer.
"""

import asyncio
import logging
import math
from abc import ABC, abstractmethod
from typing import Any

import httpx

from models.schemas.matching import EmbeddingConfig

logger = logging.getLogger(__name__)

# Loaded sentence-transformers models, shared across requests
_sentence_models: dict[str, Any] = {}
_failed_models: set[str] = set()


def _get_sentence_model(name: str):
    """Lazy-load a sentence-transformers model once per process.

    Returns None when the library or the model is unavailable; a failed
    name is not retried until clear_model_cache() is called.
    """
    if name in _sentence_models:
        return _sentence_models[name]
    if name in _failed_models:
        return None
    try:
        from sentence_transformers import SentenceTransformer

        model = SentenceTransformer(name)
        logger.info("Embedding model %s loaded successfully", name)
    except (ImportError, OSError, ValueError) as e:
        logger.warning("Failed to load embedding model %s: %s", name, e)
        _failed_models.add(name)
        return None
    _sentence_models[name] = model
    return model


def clear_model_cache() -> None:
    _sentence_models.clear()
    _failed_models.clear()


def coerce_vector(payload: Any) -> list[float] | None:
    """Validate a provider payload as a non-empty list of finite numbers."""
    if not isinstance(payload, (list, tuple)) or not payload:
        return None
    vector: list[float] = []
    for value in payload:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return None
        value = float(value)
        if not math.isfinite(value):
            return None
        vector.append(value)
    return vector


class EmbeddingClient(ABC):
    """Capability to turn text into a dense semantic vector.

    Subclasses must implement embed(); aclose() releases any held resources.
    """

    provider_name: str = ""

    @abstractmethod
    async def embed(self, text: str) -> list[float] | None:
        """Return the embedding for ``text`` or None if unavailable."""

    async def aclose(self) -> None:
        return None

    async def __aenter__(self) -> "EmbeddingClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()


class NullEmbeddingClient(EmbeddingClient):
    """Provider that is never available; forces lexical-only scoring."""

    provider_name = "none"

    async def embed(self, text: str) -> list[float] | None:
        return None


class OllamaEmbeddingClient(EmbeddingClient):
    """Ollama ``/api/embeddings`` over HTTP."""

    provider_name = "ollama"

    def __init__(
        self,
        config: EmbeddingConfig,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._config = config
        self._client = http_client
        self._owns_client = http_client is None

    @property
    def endpoint(self) -> str:
        return f"{self._config.base_url.rstrip('/')}/api/embeddings"

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self._config.timeout_seconds)
        return self._client

    async def embed(self, text: str) -> list[float] | None:
        payload = {"model": self._config.model, "prompt": text}
        try:
            response = await asyncio.wait_for(
                self._get_client().post(self.endpoint, json=payload),
                timeout=self._config.timeout_seconds,
            )
        except (httpx.HTTPError, asyncio.TimeoutError) as e:
            logger.warning("Embedding request to %s failed: %r", self.endpoint, e)
            return None

        if not response.is_success:
            logger.warning(
                "Embedding provider returned HTTP %s for model %s",
                response.status_code, self._config.model,
            )
            return None

        try:
            body = response.json()
        except ValueError as e:
            logger.warning("Failed to parse embedding response as JSON: %s", e)
            return None

        vector = coerce_vector(body.get("embedding") if isinstance(body, dict) else None)
        if vector is None:
            logger.warning("Embedding response had no usable 'embedding' vector")
        return vector

    async def aclose(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None


class SentenceTransformerEmbeddingClient(EmbeddingClient):
    """Local sentence-transformers model, loaded lazily on first use.

    The model itself is cached per process, so per-request clients are cheap.
    """

    provider_name = "sentence-transformers"

    def __init__(self, config: EmbeddingConfig) -> None:
        self._config = config

    def _get_model(self):
        return _get_sentence_model(self._config.model)

    async def embed(self, text: str) -> list[float] | None:
        model = await asyncio.to_thread(self._get_model)
        if model is None:
            return None
        try:
            embedding = await asyncio.wait_for(
                asyncio.to_thread(model.encode, text, convert_to_numpy=True),
                timeout=self._config.timeout_seconds,
            )
        except (RuntimeError, ValueError, asyncio.TimeoutError) as e:
            logger.warning("Local embedding failed: %r", e)
            return None
        return coerce_vector(embedding.tolist())


def build_embedding_client(config: EmbeddingConfig) -> EmbeddingClient:
    """Factory: create the embedding client named by ``config.provider``."""
    provider = config.provider.strip().lower()
    if provider == "ollama":
        return OllamaEmbeddingClient(config)
    elif provider in ("sentence-transformers", "local"):
        return SentenceTransformerEmbeddingClient(config)
    elif provider in ("none", ""):
        return NullEmbeddingClient()
    else:
        raise ValueError(f"Unknown embedding provider: {config.provider}")
