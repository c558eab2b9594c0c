"""Term-frequency and dense-vector cosine similarity for resume-job matching."""

import math
from collections.abc import Sequence

import numpy as np
from sklearn.feature_extraction.text import CountVectorizer
from sklearn.metrics.pairwise import cosine_similarity as sklearn_cosine

from services.matching.text import tokenize


def _clamp(value: float) -> float:
    return max(0.0, min(1.0, float(value)))


def cosine_from_text(text_a: str | None, text_b: str | None) -> float:
    """Cosine similarity between the raw term-count vectors of two texts.

    Plain TF bag-of-words over ``tokenize`` output: no IDF, no stop words,
    no stemming. Returns 0.0 when either side has no tokens.
    """
    # analyzer=tokenize bypasses sklearn's own lower-casing and token pattern
    vectorizer = CountVectorizer(analyzer=tokenize)
    try:
        counts = vectorizer.fit_transform([text_a or "", text_b or ""])
    except ValueError:
        # empty vocabulary: both texts normalize to nothing
        return 0.0
    score = sklearn_cosine(counts[0:1], counts[1:2])[0][0]
    return _clamp(score)


def cosine_from_embeddings(
    vec_a: Sequence[float] | None,
    vec_b: Sequence[float] | None,
) -> float:
    """Cosine similarity between two dense vectors of equal, non-zero length.

    Returns 0.0 for empty, mismatched, non-numeric or zero-norm input
    instead of raising.
    """
    if vec_a is None or vec_b is None:
        return 0.0
    try:
        a = np.asarray(vec_a, dtype=float)
        b = np.asarray(vec_b, dtype=float)
    except (TypeError, ValueError):
        return 0.0
    if a.ndim != 1 or b.ndim != 1 or a.size == 0 or a.size != b.size:
        return 0.0
    if not (np.all(np.isfinite(a)) and np.all(np.isfinite(b))):
        return 0.0

    norm_a = np.linalg.norm(a)
    norm_b = np.linalg.norm(b)
    if norm_a == 0 or norm_b == 0:
        return 0.0

    return _clamp(np.dot(a, b) / (norm_a * norm_b))


def to_percent(value: float) -> int:
    """Scale a [0,1] similarity to an integer 0-100, halves rounded up, clamped."""
    return max(0, min(100, math.floor(value * 100 + 0.5)))
