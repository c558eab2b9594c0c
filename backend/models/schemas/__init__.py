"""Pydantic contracts shared by the matching engine and the API layer."""

from models.schemas.candidate import CandidateProfile, EducationEntry, ProjectEntry, WorkEntry
from models.schemas.job import JobPosting, TailorTarget
from models.schemas.matching import EmbeddingConfig, FitBreakdown, ScoreResult, ScoringMode

__all__ = [
    "CandidateProfile",
    "EducationEntry",
    "ProjectEntry",
    "WorkEntry",
    "JobPosting",
    "TailorTarget",
    "EmbeddingConfig",
    "FitBreakdown",
    "ScoreResult",
    "ScoringMode",
]
