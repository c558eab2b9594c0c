"""Fit breakdown: matched skills, missing skills and seniority gap for one job."""

import re

from models.schemas.candidate import CandidateProfile
from models.schemas.matching import FitBreakdown
from services.matching.skills import extract_skills
from services.matching.text import normalize

MAX_BREAKDOWN_SKILLS = 8

# Tried in order; first hit wins. A range yields its lower bound.
_YEARS_PATTERNS: tuple[re.Pattern, ...] = (
    re.compile(r"(\d+)\s*-\s*(\d+)\s*(?:\+?\s*)?(?:years?|yrs?)"),
    re.compile(r"(\d+)\s*(?:\+|plus)?\s*(?:years?|yrs?)"),
)


def extract_years_requirement(text: str | None) -> int | None:
    """Minimum years of experience a job asks for, or None if not stated.

    "3-5 years" -> 3, "5+ years" -> 5, "2 plus yrs" -> 2.
    """
    normalized = normalize(text)
    for pattern in _YEARS_PATTERNS:
        match = pattern.search(normalized)
        if match:
            return int(match.group(1))
    return None


def fit_breakdown(candidate: CandidateProfile, job_text: str | None) -> FitBreakdown:
    """Partition job skills into matched/missing and check seniority.

    Pure function of its inputs; calling it twice gives the same result.
    """
    declared = {s.strip().lower() for s in candidate.skills}
    job_skills = extract_skills(job_text, candidate.skills)

    matched = [skill for skill in job_skills if skill in declared]
    missing = [skill for skill in job_skills if skill not in declared]

    needed_years = extract_years_requirement(job_text)
    candidate_years = candidate.years_of_experience
    seniority_mismatch = None
    if needed_years is not None and candidate_years < needed_years:
        seniority_mismatch = f"{needed_years}+ years requested, profile has {candidate_years}"

    return FitBreakdown(
        matched_skills=matched[:MAX_BREAKDOWN_SKILLS],
        missing_skills=missing[:MAX_BREAKDOWN_SKILLS],
        seniority_mismatch=seniority_mismatch,
    )
