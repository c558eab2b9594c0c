"""Candidate profile: the structured resume the matching engine scores against."""

import math

from pydantic import BaseModel, field_validator
from pydantic.alias_generators import to_camel

_CAMEL = {"alias_generator": to_camel, "populate_by_name": True, "frozen": True}


class WorkEntry(BaseModel):
    """A single work history entry."""
    company: str | None = None
    role: str | None = None
    description: str | None = None
    duration: str | None = None

    model_config = _CAMEL


class ProjectEntry(BaseModel):
    """A single project entry. Either name or title may carry the label."""
    name: str | None = None
    title: str | None = None
    description: str | None = None

    model_config = _CAMEL

    @property
    def display_name(self) -> str:
        return self.name or self.title or "Project"


class EducationEntry(BaseModel):
    degree: str | None = None
    institution: str | None = None
    graduation_year: int | str | None = None

    model_config = _CAMEL


class CandidateProfile(BaseModel):
    """Structured candidate profile (output of the upstream resume parser).

    Immutable: the engine reads it and never writes back. Malformed
    years of experience (non-numeric, negative, NaN) are coerced to 0.
    """
    current_title: str | None = None
    years_of_experience: int = 0
    skills: list[str] = []  # order = declared priority
    preferred_locations: list[str] = []
    work_history: list[WorkEntry] = []  # most recent first
    projects: list[ProjectEntry] = []
    education: list[EducationEntry] = []

    model_config = _CAMEL

    @field_validator("years_of_experience", mode="before")
    @classmethod
    def _coerce_years(cls, value):
        if value is None or isinstance(value, bool):
            return 0
        try:
            years = float(value)
        except (TypeError, ValueError):
            return 0
        if math.isnan(years) or math.isinf(years) or years < 0:
            return 0
        return int(years)

    @field_validator(
        "skills", "preferred_locations", "work_history", "projects", "education",
        mode="before",
    )
    @classmethod
    def _none_to_empty(cls, value):
        return [] if value is None else value

    @field_validator("skills", "preferred_locations", mode="after")
    @classmethod
    def _drop_blank(cls, value: list[str]) -> list[str]:
        return [v for v in value if v and v.strip()]
