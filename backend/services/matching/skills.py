"""Vocabulary-based skill detection.

Matching is a case-insensitive substring test against normalized text, so it
is deliberately permissive ("react" also fires on "react.js", "java" on
"javascript"). That gives a high-recall skill surface for explanations, not
a precise taxonomy.
"""

from collections.abc import Iterable

from services.matching.text import normalize
from services.matching.vocabulary import BASELINE_SKILLS


def build_vocabulary(
    candidate_skills: Iterable[str] | None,
    baseline: Iterable[str] = BASELINE_SKILLS,
) -> list[str]:
    """Candidate skills first, then the baseline, de-duplicated in order."""
    declared = [s.strip().lower() for s in (candidate_skills or []) if s and s.strip()]
    return list(dict.fromkeys([*declared, *baseline]))


def extract_skills(
    text: str | None,
    candidate_skills: Iterable[str] | None = None,
    baseline: Iterable[str] = BASELINE_SKILLS,
) -> list[str]:
    """Return every vocabulary skill found in ``text``, in vocabulary order."""
    normalized = normalize(text)
    if not normalized:
        return []
    return [
        skill
        for skill in build_vocabulary(candidate_skills, baseline)
        if skill in normalized
    ]
