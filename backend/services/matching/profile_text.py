"""Render candidate profiles and job postings into the texts that get scored.

Every label is emitted even when its value is empty so the lexical vectors
of different candidates share the same scaffold tokens.
"""

from models.schemas.candidate import CandidateProfile
from models.schemas.job import JobPosting

MAX_PROFILE_SKILLS = 20
MAX_PROFILE_WORK = 4
MAX_PROFILE_PROJECTS = 4


def build_candidate_profile_text(candidate: CandidateProfile) -> str:
    skills = ", ".join(candidate.skills[:MAX_PROFILE_SKILLS])
    work = "\n".join(
        f"{item.role or ''} at {item.company or ''}: {item.description or ''}"
        for item in candidate.work_history[:MAX_PROFILE_WORK]
    )
    projects = "\n".join(
        f"{item.display_name}: {item.description or ''}"
        for item in candidate.projects[:MAX_PROFILE_PROJECTS]
    )
    locations = ", ".join(candidate.preferred_locations)

    return "\n".join([
        f"Role: {candidate.current_title or ''}",
        f"Years of experience: {candidate.years_of_experience}",
        f"Skills: {skills}",
        f"Preferred locations: {locations}",
        "Work highlights:",
        work,
        "Projects:",
        projects,
    ]).strip()


def build_job_text(job: JobPosting) -> str:
    return "\n".join([
        f"Role: {job.role or ''}",
        f"Company: {job.company or ''}",
        f"Location: {job.location or ''}",
        f"Description: {job.description or ''}",
        f"Requirements: {job.requirements or ''}",
        f"Employment type: {job.employment_type or ''}",
    ]).strip()
