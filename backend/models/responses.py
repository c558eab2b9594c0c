from pydantic import BaseModel
from pydantic.alias_generators import to_camel

from models.schemas.job import JobPosting
from models.schemas.matching import FitBreakdown, ScoringMode

_CAMEL = {"alias_generator": to_camel, "populate_by_name": True}


class MatchSignals(BaseModel):
    lexical: int = 0  # 0-100
    embedding: int | None = None  # 0-100, None when no embedding was obtained


class RankedJob(JobPosting):
    """Original job fields plus score, signals and explanation."""
    match_score: int = 0
    match_signals: MatchSignals = MatchSignals()
    why_matched: list[str] = []  # at most 3
    fit_breakdown: FitBreakdown = FitBreakdown()


class RankingResult(BaseModel):
    scoring_mode: ScoringMode = ScoringMode.LEXICAL
    total_input_jobs: int = 0
    total_ranked_jobs: int = 0
    ranked_jobs: list[RankedJob] = []

    model_config = _CAMEL


class TailoredDraft(BaseModel):
    """Grounded fallback draft built only from the candidate's own evidence."""
    summary: str = ""
    skills: list[str] = []  # max 12
    selected_experience: list[str] = []  # max 4
    selected_projects: list[str] = []  # max 2
    missing_requirements: list[str] = []
    grounding_note: str = ""

    model_config = _CAMEL


class TailorResponse(BaseModel):
    mode: str = "fallback"
    tailored_draft: TailoredDraft = TailoredDraft()

    model_config = _CAMEL


class HealthResponse(BaseModel):
    status: str = "ok"
    embedding_provider: str = ""
    embedding_model: str = ""
