"""Ranking orchestrator: score, explain and order a batch of jobs for one candidate.

Flow:
    candidate ──> build_candidate_profile_text ──> embed once ──> ScoringMode
                                                                   │
    jobs[i] ──> build_job_text ──┬─ HybridScorer.score   (concurrent per job)
                                 └─ fit_breakdown
                                          ↓
                 RankedJob[i] (index-aligned with input) ──> stable sort by matchScore
"""

import asyncio
import logging
from collections.abc import Sequence

from pydantic.alias_generators import to_camel

from models.responses import MatchSignals, RankedJob, RankingResult
from models.schemas.candidate import CandidateProfile
from models.schemas.job import JobPosting
from models.schemas.matching import FitBreakdown, ScoringMode
from services.matching.embeddings import EmbeddingClient
from services.matching.fit import fit_breakdown
from services.matching.profile_text import build_candidate_profile_text, build_job_text
from services.matching.scorer import HybridScorer
from services.matching.similarity import to_percent

logger = logging.getLogger(__name__)

WHY_OVERLAP_SKILLS = 4
WHY_MISSING_SKILLS = 3

# Computed ranking fields; stale copies carried in as job extras are dropped
_RANKING_FIELDS = set(RankedJob.model_fields) - set(JobPosting.model_fields)
_RESERVED_KEYS = _RANKING_FIELDS | {to_camel(name) for name in _RANKING_FIELDS}


def why_matched(breakdown: FitBreakdown) -> list[str]:
    """Three fixed-priority explanation lines: overlap, seniority, gaps."""
    if breakdown.matched_skills:
        overlap = "Skill overlap: " + ", ".join(breakdown.matched_skills[:WHY_OVERLAP_SKILLS])
    else:
        overlap = "Role and description align with your profile context."

    if breakdown.seniority_mismatch:
        seniority = f"Seniority gap detected: {breakdown.seniority_mismatch}."
    else:
        seniority = "Experience level appears aligned."

    if breakdown.missing_skills:
        gaps = "Missing skills to address: " + ", ".join(
            breakdown.missing_skills[:WHY_MISSING_SKILLS]
        )
    else:
        gaps = "No major skill gaps found in extracted requirements."

    return [overlap, seniority, gaps]


async def _rank_one(
    scorer: HybridScorer,
    candidate: CandidateProfile,
    candidate_text: str,
    candidate_embedding: list[float] | None,
    job: JobPosting,
) -> RankedJob:
    job_text = build_job_text(job)
    result = await scorer.score(candidate_text, candidate_embedding, job_text)
    breakdown = fit_breakdown(candidate, job_text)

    embedding_percent = None
    if result.embedding_similarity is not None:
        embedding_percent = to_percent(result.embedding_similarity)

    job_fields = {
        key: value for key, value in job.model_dump().items() if key not in _RESERVED_KEYS
    }
    return RankedJob(
        **job_fields,
        match_score=result.percent,
        match_signals=MatchSignals(
            lexical=to_percent(result.lexical_similarity),
            embedding=embedding_percent,
        ),
        why_matched=why_matched(breakdown),
        fit_breakdown=breakdown,
    )


async def rank(
    candidate: CandidateProfile,
    jobs: Sequence[JobPosting],
    embedding_client: EmbeddingClient,
) -> RankingResult:
    """Score every job, attach explanations and sort best-first.

    The scoring mode is decided once from the candidate embedding: if it
    cannot be obtained the whole batch is lexical-only. Ties keep input order.
    """
    jobs = list(jobs)
    if not jobs:
        return RankingResult(scoring_mode=ScoringMode.LEXICAL)

    candidate_text = build_candidate_profile_text(candidate)
    candidate_embedding = await embedding_client.embed(candidate_text)
    scoring_mode = ScoringMode.HYBRID if candidate_embedding else ScoringMode.LEXICAL
    if scoring_mode is ScoringMode.LEXICAL:
        logger.warning("Candidate embedding unavailable, ranking batch lexically")

    scorer = HybridScorer(embedding_client)
    # gather returns results in task order, so results[i] belongs to jobs[i]
    results = await asyncio.gather(*(
        _rank_one(scorer, candidate, candidate_text, candidate_embedding, job)
        for job in jobs
    ))

    ranked = sorted(results, key=lambda item: item.match_score, reverse=True)
    logger.info(
        "Ranked %d jobs (mode=%s, top score=%d)",
        len(ranked), scoring_mode.value, ranked[0].match_score,
    )

    return RankingResult(
        scoring_mode=scoring_mode,
        total_input_jobs=len(jobs),
        total_ranked_jobs=len(ranked),
        ranked_jobs=ranked,
    )
