"""Evidence selection for tailored drafts.

The evidence pack (work/project bullets, skills, education) is the only
source material a draft may use. The fallback draft is assembled from it
deterministically: no generation, requirements the candidate lacks are
listed instead of invented.
"""

import logging
from collections.abc import Sequence

from pydantic import BaseModel

from models.responses import TailoredDraft
from models.schemas.candidate import CandidateProfile
from models.schemas.job import TailorTarget
from services.matching.fit import fit_breakdown
from services.matching.similarity import cosine_from_text
from services.matching.skills import extract_skills

logger = logging.getLogger(__name__)

DRAFT_EXPERIENCE_LINES = 4
DRAFT_PROJECT_LINES = 2
DRAFT_MAX_SKILLS = 12
DRAFT_MAX_MISSING_SKILLS = 5

GROUNDING_NOTE = (
    "Generated from resume evidence only. "
    "Missing requirements are listed instead of invented."
)


class EvidencePack(BaseModel):
    current_title: str = ""
    years_of_experience: int = 0
    skills: list[str] = []
    work_bullets: list[str] = []
    project_bullets: list[str] = []
    education: list[str] = []
    preferred_locations: list[str] = []


def build_evidence_pack(candidate: CandidateProfile) -> EvidencePack:
    work_bullets = [
        f"{item.role or 'Role'} at {item.company or 'Company'} "
        f"({item.duration or 'Duration'}): {item.description or ''}"
        for item in candidate.work_history
    ]
    project_bullets = [
        f"{item.display_name}: {item.description or ''}"
        for item in candidate.projects
    ]
    education = [
        f"{item.degree or 'Degree'} - {item.institution or 'Institution'} "
        f"({item.graduation_year or 'Year'})"
        for item in candidate.education
    ]
    return EvidencePack(
        current_title=candidate.current_title or "",
        years_of_experience=candidate.years_of_experience,
        skills=list(candidate.skills),
        work_bullets=work_bullets,
        project_bullets=project_bullets,
        education=education,
        preferred_locations=list(candidate.preferred_locations),
    )


def select_relevant(job_text: str, lines: Sequence[str], take: int) -> list[str]:
    """Top ``take`` lines by TF cosine against ``job_text``.

    Stable on ties, so equally relevant lines keep their original order.
    Returns every line when fewer than ``take`` are available.
    """
    if take <= 0:
        return []
    scored = [(cosine_from_text(job_text, line), line) for line in lines]
    scored.sort(key=lambda item: item[0], reverse=True)
    return [line for _, line in scored[:take]]


def build_fallback_draft(candidate: CandidateProfile, job: TailorTarget) -> TailoredDraft:
    """Template draft grounded in the candidate's own evidence."""
    evidence = build_evidence_pack(candidate)
    job_text = f"{job.title or ''} {job.description or ''} {job.requirements or ''}"

    selected_experience = select_relevant(job_text, evidence.work_bullets, DRAFT_EXPERIENCE_LINES)
    selected_projects = select_relevant(job_text, evidence.project_bullets, DRAFT_PROJECT_LINES)

    breakdown = fit_breakdown(candidate, job_text)
    # Re-extract uncapped: breakdown lists stop at 8, the draft has its own caps
    spelling: dict[str, str] = {}
    for skill in evidence.skills:
        spelling.setdefault(skill.strip().lower(), skill.strip())
    job_skills = extract_skills(job_text, evidence.skills)
    matched = [spelling[skill] for skill in job_skills if skill in spelling]
    missing = [skill for skill in job_skills if skill not in spelling]

    # job-relevant owned skills first, then the rest in declared order
    skills = list(dict.fromkeys([*matched, *spelling.values()]))[:DRAFT_MAX_SKILLS]
    missing_requirements = missing[:DRAFT_MAX_MISSING_SKILLS]
    if breakdown.seniority_mismatch:
        missing_requirements.append(breakdown.seniority_mismatch)

    summary = (
        f"{evidence.current_title or 'Software professional'} with "
        f"{evidence.years_of_experience} years of experience targeting "
        f"{job.title or 'this role'} at {job.company or 'the company'}."
    )
    logger.debug(
        "Fallback draft: %d experience lines, %d project lines, %d missing",
        len(selected_experience), len(selected_projects), len(missing_requirements),
    )

    return TailoredDraft(
        summary=summary,
        skills=skills,
        selected_experience=selected_experience,
        selected_projects=selected_projects,
        missing_requirements=missing_requirements,
        grounding_note=GROUNDING_NOTE,
    )
