"""Shared test configuration, pytest markers and sample profiles."""

import pytest

from models.schemas.candidate import CandidateProfile
from models.schemas.job import JobPosting


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: talks to a real embedding provider (slow, needs network)"
    )


@pytest.fixture
def candidate() -> CandidateProfile:
    return CandidateProfile(
        current_title="Backend Engineer",
        years_of_experience=4,
        skills=["Python", "FastAPI", "PostgreSQL", "Docker", "React"],
        preferred_locations=["Berlin", "Remote"],
        work_history=[
            {
                "company": "Acme",
                "role": "Backend Engineer",
                "description": "Built Python FastAPI services backed by PostgreSQL and Redis",
                "duration": "2021-2024",
            },
            {
                "company": "Globex",
                "role": "Frontend Developer",
                "description": "Shipped React dashboards with TypeScript and Jest tests",
                "duration": "2019-2021",
            },
        ],
        projects=[
            {"name": "jobfeed", "description": "Python scraper with Docker deployment"},
            {"title": "portfolio", "description": "Static site built with HTML and CSS"},
        ],
        education=[
            {"degree": "BSc Computer Science", "institution": "TU Berlin", "graduationYear": 2019},
        ],
    )


@pytest.fixture
def jobs() -> list[JobPosting]:
    return [
        JobPosting(
            id="py",
            role="Python Backend Engineer",
            company="Initech",
            location="Berlin",
            description="Build Python APIs with FastAPI and PostgreSQL on AWS",
            requirements="3+ years of Python experience, Docker, Kubernetes",
            employment_type="Full-time",
        ),
        JobPosting(
            id="mkt",
            role="Marketing Manager",
            company="Umbrella",
            location="Paris",
            description="Own brand strategy and social media campaigns",
            requirements="5-7 years in marketing",
            employment_type="Full-time",
        ),
        JobPosting(
            id="fe",
            role="Frontend Developer",
            company="Hooli",
            location="Remote",
            description="React and TypeScript single page apps",
            requirements="2 years React, Jest or Cypress",
            employment_type="Contract",
        ),
    ]
