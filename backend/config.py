import os

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings

from models.schemas.matching import EmbeddingConfig


def _parse_cors_origins() -> list[str] | None:
    """Parse CORS_ORIGINS env var as comma-separated string or JSON list."""
    raw = os.environ.get("CORS_ORIGINS")
    if not raw:
        return None
    if raw.startswith("["):
        import json
        return json.loads(raw)
    return [o.strip() for o in raw.split(",") if o.strip()]


class Settings(BaseSettings):
    cors_origins: list[str] = [
        "http://localhost:5173",
        "http://localhost:3000",
    ]
    debug: bool = False
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 8000

    # Embedding provider ("ollama" | "sentence-transformers" | "none")
    embedding_provider: str = "ollama"
    embedding_base_url: str = Field(
        default="http://127.0.0.1:11434",
        validation_alias=AliasChoices("embedding_base_url", "ollama_base_url"),
    )
    embedding_model: str = Field(
        default="nomic-embed-text",
        validation_alias=AliasChoices("embedding_model", "ollama_embedding_model"),
    )
    embedding_timeout_seconds: float = 10.0

    max_jobs_per_request: int = 200
    rate_limit: str = "20/minute"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}

    def embedding_config(self) -> EmbeddingConfig:
        return EmbeddingConfig(
            provider=self.embedding_provider.strip().lower(),
            base_url=self.embedding_base_url.strip().rstrip("/"),
            model=self.embedding_model.strip(),
            timeout_seconds=self.embedding_timeout_seconds,
        )


_cors_override = _parse_cors_origins()
settings = Settings(**{"cors_origins": _cors_override} if _cors_override else {})
