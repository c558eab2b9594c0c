"""Tests for the ranking orchestrator."""

import asyncio

import pytest

from models.responses import RankedJob, RankingResult
from models.schemas.candidate import CandidateProfile
from models.schemas.job import JobPosting
from models.schemas.matching import FitBreakdown, ScoringMode
from services.matching.embeddings import EmbeddingClient, NullEmbeddingClient
from services.matching.ranker import rank, why_matched


class KeywordEmbeddingClient(EmbeddingClient):
    """Returns a fixed vector when a keyword appears in the text, else None."""

    def __init__(self, vectors: dict[str, list[float]], delays: dict[str, float] | None = None):
        self.vectors = vectors
        self.delays = delays or {}
        self.calls = 0

    async def embed(self, text: str):
        self.calls += 1
        for keyword, vector in self.vectors.items():
            if keyword in text:
                await asyncio.sleep(self.delays.get(keyword, 0))
                return vector
        return None


CANDIDATE_VECTOR = {"Years of experience": [1.0, 0.0]}


class TestRankLexical:
    @pytest.mark.asyncio
    async def test_absent_provider_ranks_whole_batch_lexically(self, candidate, jobs):
        result = await rank(candidate, jobs, NullEmbeddingClient())

        assert isinstance(result, RankingResult)
        assert result.scoring_mode is ScoringMode.LEXICAL
        assert result.total_input_jobs == result.total_ranked_jobs == len(jobs)
        assert all(job.match_signals.embedding is None for job in result.ranked_jobs)
        assert all(job.match_score == job.match_signals.lexical for job in result.ranked_jobs)

    @pytest.mark.asyncio
    async def test_sorted_descending(self, candidate, jobs):
        result = await rank(candidate, jobs, NullEmbeddingClient())
        scores = [job.match_score for job in result.ranked_jobs]
        assert scores == sorted(scores, reverse=True)
        assert result.ranked_jobs[0].id == "py"
        assert result.ranked_jobs[-1].id == "mkt"

    @pytest.mark.asyncio
    async def test_orders_by_lexical_similarity(self, monkeypatch):
        lexical = {"job-one": 0.9, "job-two": 0.1, "job-three": 0.5}

        def fake_cosine(candidate_text, job_text):
            return next(v for k, v in lexical.items() if k in job_text)

        monkeypatch.setattr("services.matching.scorer.cosine_from_text", fake_cosine)
        batch = [JobPosting(id=name, role=name) for name in lexical]

        result = await rank(CandidateProfile(), batch, NullEmbeddingClient())
        assert [(j.id, j.match_score) for j in result.ranked_jobs] == [
            ("job-one", 90),
            ("job-three", 50),
            ("job-two", 10),
        ]

    @pytest.mark.asyncio
    async def test_identical_jobs_keep_input_order(self):
        batch = [JobPosting(id=str(i), role="", description="") for i in range(6)]
        result = await rank(CandidateProfile(), batch, NullEmbeddingClient())
        # empty jobs render to the same label-only text
        scores = {job.match_score for job in result.ranked_jobs}
        assert len(scores) == 1
        assert [job.id for job in result.ranked_jobs] == [str(i) for i in range(6)]

    @pytest.mark.asyncio
    async def test_ties_keep_input_order(self, monkeypatch):
        monkeypatch.setattr("services.matching.scorer.cosine_from_text", lambda a, b: 0.0)
        batch = [JobPosting(id=f"j{i}") for i in range(5)]
        result = await rank(CandidateProfile(), batch, NullEmbeddingClient())
        assert [job.id for job in result.ranked_jobs] == ["j0", "j1", "j2", "j3", "j4"]
        assert all(job.match_score == 0 for job in result.ranked_jobs)

    @pytest.mark.asyncio
    async def test_empty_jobs(self, candidate):
        client = KeywordEmbeddingClient(CANDIDATE_VECTOR)
        result = await rank(candidate, [], client)
        assert result.ranked_jobs == []
        assert result.total_input_jobs == result.total_ranked_jobs == 0
        assert client.calls == 0

    @pytest.mark.asyncio
    async def test_extra_job_fields_are_echoed(self, candidate):
        job = JobPosting.model_validate(
            {"id": "x", "role": "Python dev", "salary": "100k", "applyUrl": "https://jobs.test/x"}
        )
        result = await rank(candidate, [job], NullEmbeddingClient())
        dumped = result.ranked_jobs[0].model_dump(by_alias=True)
        assert dumped["salary"] == "100k"
        assert dumped["applyUrl"] == "https://jobs.test/x"
        assert "matchScore" in dumped and "fitBreakdown" in dumped

    @pytest.mark.asyncio
    async def test_reranking_a_ranked_job_recomputes_scores(self, candidate):
        job = JobPosting.model_validate({
            "id": "x",
            "role": "Accountant",
            "description": "Bookkeeping",
            "matchScore": 97,
            "matchSignals": {"lexical": 97, "embedding": 99},
            "whyMatched": ["stale"],
            "fitBreakdown": {"matchedSkills": ["cobol"], "missingSkills": []},
            "match_score": 96,
        })
        result = await rank(candidate, [job], NullEmbeddingClient())
        ranked = result.ranked_jobs[0]
        dumped = ranked.model_dump(by_alias=True)

        assert ranked.match_score < 97
        assert ranked.match_signals.embedding is None
        assert ranked.why_matched != ["stale"]
        assert "cobol" not in ranked.fit_breakdown.matched_skills
        assert dumped["matchScore"] == ranked.match_score
        assert dumped["whyMatched"] == ranked.why_matched

    @pytest.mark.asyncio
    async def test_breakdown_and_explanations_attached(self, candidate, jobs):
        result = await rank(candidate, jobs, NullEmbeddingClient())
        top: RankedJob = result.ranked_jobs[0]
        assert "python" in top.fit_breakdown.matched_skills
        assert "kubernetes" in top.fit_breakdown.missing_skills
        assert len(top.why_matched) == 3
        assert top.why_matched[0].startswith("Skill overlap: ")

        marketing = next(j for j in result.ranked_jobs if j.id == "mkt")
        assert marketing.fit_breakdown.seniority_mismatch == "5+ years requested, profile has 4"


class TestRankHybrid:
    @pytest.mark.asyncio
    async def test_hybrid_mode_when_candidate_embeds(self, candidate, jobs):
        client = KeywordEmbeddingClient({
            **CANDIDATE_VECTOR,
            "Initech": [1.0, 0.0],
            "Umbrella": [0.0, 1.0],
            "Hooli": [1.0, 1.0],
        })
        result = await rank(candidate, jobs, client)

        assert result.scoring_mode is ScoringMode.HYBRID
        assert client.calls == 1 + len(jobs)
        signals = {job.id: job.match_signals.embedding for job in result.ranked_jobs}
        assert signals == {"py": 100, "mkt": 0, "fe": 71}
        assert [job.id for job in result.ranked_jobs] == ["py", "fe", "mkt"]

    @pytest.mark.asyncio
    async def test_single_job_embedding_failure_degrades_only_that_job(self, candidate, jobs):
        client = KeywordEmbeddingClient({**CANDIDATE_VECTOR, "Initech": [1.0, 0.0]})
        result = await rank(candidate, jobs, client)

        assert result.scoring_mode is ScoringMode.HYBRID
        assert result.total_ranked_jobs == len(jobs)
        by_id = {job.id: job for job in result.ranked_jobs}
        assert by_id["py"].match_signals.embedding == 100
        assert by_id["mkt"].match_signals.embedding is None
        assert by_id["mkt"].match_score == by_id["mkt"].match_signals.lexical

    @pytest.mark.asyncio
    async def test_candidate_embedding_failure_skips_job_calls(self, candidate, jobs):
        client = KeywordEmbeddingClient({"Initech": [1.0, 0.0]})
        result = await rank(candidate, jobs, client)

        assert result.scoring_mode is ScoringMode.LEXICAL
        assert client.calls == 1
        assert all(job.match_signals.embedding is None for job in result.ranked_jobs)

    @pytest.mark.asyncio
    async def test_completion_order_does_not_change_assignment(self, candidate, jobs):
        vectors = {
            **CANDIDATE_VECTOR,
            "Initech": [1.0, 0.0],
            "Umbrella": [0.0, 1.0],
            "Hooli": [1.0, 1.0],
        }
        slow_first = KeywordEmbeddingClient(vectors, delays={"Initech": 0.05, "Umbrella": 0.01})
        fast_first = KeywordEmbeddingClient(vectors, delays={"Hooli": 0.05})

        first = await rank(candidate, jobs, slow_first)
        second = await rank(candidate, jobs, fast_first)
        assert first == second


class TestWhyMatched:
    def test_all_positive_signals(self):
        lines = why_matched(FitBreakdown(
            matched_skills=["python", "docker", "aws", "redis", "react"],
            missing_skills=["go", "rust", "scala", "elixir"],
            seniority_mismatch="5+ years requested, profile has 2",
        ))
        assert lines == [
            "Skill overlap: python, docker, aws, redis",
            "Seniority gap detected: 5+ years requested, profile has 2.",
            "Missing skills to address: go, rust, scala",
        ]

    def test_generic_statements(self):
        assert why_matched(FitBreakdown()) == [
            "Role and description align with your profile context.",
            "Experience level appears aligned.",
            "No major skill gaps found in extracted requirements.",
        ]
