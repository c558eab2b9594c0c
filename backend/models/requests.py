from pydantic import BaseModel, Field

from models.schemas.candidate import CandidateProfile
from models.schemas.job import JobPosting, TailorTarget


class RankJobsRequest(BaseModel):
    candidate: CandidateProfile | None = Field(None, description="Structured candidate profile")
    jobs: list[JobPosting] | None = Field(None, description="Job postings to score and rank")


class TailorResumeRequest(BaseModel):
    candidate: CandidateProfile | None = Field(None, description="Structured candidate profile")
    job: TailorTarget | None = Field(None, description="Target job for the tailored draft")
