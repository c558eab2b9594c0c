"""Job posting as delivered by the upstream job-search collaborator."""

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class JobPosting(BaseModel):
    """A single job posting.

    Treated as an opaque text source: only the text fields feed scoring.
    Fields the engine does not know about are kept (extra="allow") so the
    ranked output can echo the caller's job record back unchanged.
    """
    id: str | None = None
    role: str | None = None
    company: str | None = None
    location: str | None = None
    country: str | None = None
    description: str | None = None
    requirements: str | None = None
    employment_type: str | None = None
    work_from_home: bool | None = None
    posted_days_ago: int | None = None
    apply_url: str | None = None

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "extra": "allow",
    }


class TailorTarget(BaseModel):
    """The single job a tailored draft is built for."""
    title: str | None = None
    company: str | None = None
    description: str | None = None
    requirements: str | None = None
    location: str | None = None

    model_config = {"extra": "ignore"}
