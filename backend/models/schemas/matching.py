"""Scoring outputs: per-job score, fit breakdown, batch scoring mode."""

from enum import Enum

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class ScoringMode(str, Enum):
    """How a whole ranking batch was scored. Decided once per batch."""
    LEXICAL = "lexical"
    HYBRID = "hybrid-embeddings+lexical"


class ScoreResult(BaseModel):
    """Similarity signals for one candidate/job pair."""
    lexical_similarity: float = Field(default=0.0, ge=0.0, le=1.0)
    embedding_similarity: float | None = Field(default=None, ge=0.0, le=1.0)
    combined_similarity: float = Field(default=0.0, ge=0.0, le=1.0)
    percent: int = Field(default=0, ge=0, le=100)


class FitBreakdown(BaseModel):
    """Skill overlap, skill gaps and seniority gap between candidate and job."""
    matched_skills: list[str] = []  # max 8, extraction order
    missing_skills: list[str] = []  # max 8
    seniority_mismatch: str | None = None

    model_config = {"alias_generator": to_camel, "populate_by_name": True}


class EmbeddingConfig(BaseModel):
    """Explicit provider settings handed to the embedding client factory."""
    provider: str = "ollama"  # "ollama" | "sentence-transformers" | "none"
    base_url: str = "http://127.0.0.1:11434"
    model: str = "nomic-embed-text"
    timeout_seconds: float = 10.0

    model_config = {"frozen": True, "protected_namespaces": ()}
