import logging

from fastapi import APIRouter, Depends, HTTPException, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from api.dependencies import get_embedding_client
from config import settings
from models.requests import RankJobsRequest, TailorResumeRequest
from models.responses import HealthResponse, RankingResult, TailorResponse
from services.matching import evidence, ranker
from services.matching.embeddings import EmbeddingClient

logger = logging.getLogger(__name__)

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


@router.get("/health", response_model=HealthResponse)
async def health():
    return HealthResponse(
        status="ok",
        embedding_provider=settings.embedding_provider,
        embedding_model=settings.embedding_model,
    )


@router.post("/rank-jobs", response_model=RankingResult)
@limiter.limit(settings.rate_limit)
async def rank_jobs(
    request: Request,
    body: RankJobsRequest,
    embedding_client: EmbeddingClient = Depends(get_embedding_client),
):
    if body.candidate is None:
        raise HTTPException(status_code=400, detail="candidate is required")
    if not body.jobs:
        raise HTTPException(status_code=400, detail="jobs must contain at least one item")
    if len(body.jobs) > settings.max_jobs_per_request:
        raise HTTPException(
            status_code=400,
            detail=f"Too many jobs. Max per request: {settings.max_jobs_per_request}",
        )

    try:
        return await ranker.rank(body.candidate, body.jobs, embedding_client)
    except Exception:
        logger.exception("rank-jobs failed")
        raise HTTPException(status_code=500, detail="Unexpected error while ranking jobs")


@router.post("/tailor-resume", response_model=TailorResponse)
@limiter.limit(settings.rate_limit)
async def tailor_resume(request: Request, body: TailorResumeRequest):
    if body.candidate is None or body.job is None:
        raise HTTPException(status_code=400, detail="candidate and job are required")

    try:
        draft = evidence.build_fallback_draft(body.candidate, body.job)
    except Exception:
        logger.exception("tailor-resume failed")
        raise HTTPException(status_code=500, detail="Unexpected error while tailoring resume")

    return TailorResponse(mode="fallback", tailored_draft=draft)
