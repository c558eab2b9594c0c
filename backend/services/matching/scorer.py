"""Hybrid scorer: lexical TF cosine blended with embedding cosine when available."""

import logging
from collections.abc import Sequence

from models.schemas.matching import ScoreResult
from services.matching.embeddings import EmbeddingClient
from services.matching.similarity import cosine_from_embeddings, cosine_from_text, to_percent

logger = logging.getLogger(__name__)

# Embedding carries paraphrase; lexical is a floor against embedding noise.
W_EMBEDDING = 0.8
W_LEXICAL = 0.2


class HybridScorer:
    """Scores one job text against a rendered candidate profile.

    With no candidate embedding the embedding client is never called.
    If the job embedding cannot be obtained, that job alone falls back to
    its lexical similarity.
    """

    def __init__(self, embedding_client: EmbeddingClient) -> None:
        self._embedding_client = embedding_client

    async def score(
        self,
        candidate_text: str,
        candidate_embedding: Sequence[float] | None,
        job_text: str,
    ) -> ScoreResult:
        lexical = cosine_from_text(candidate_text, job_text)
        combined = lexical
        embedding_sim = None

        if candidate_embedding:
            job_embedding = await self._embedding_client.embed(job_text)
            if job_embedding is not None:
                embedding_sim = cosine_from_embeddings(candidate_embedding, job_embedding)
                combined = W_EMBEDDING * embedding_sim + W_LEXICAL * lexical
            else:
                logger.debug("No job embedding, scoring this job lexically")

        combined = max(0.0, min(1.0, combined))
        return ScoreResult(
            lexical_similarity=lexical,
            embedding_similarity=embedding_sim,
            combined_similarity=combined,
            percent=to_percent(combined),
        )
