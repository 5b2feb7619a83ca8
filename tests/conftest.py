"""Shared fixtures: sample resumes, fake completion clients, profiles and job corpora."""

import json

import pytest

from resume_match_ai.errors import AIServiceError
from resume_match_ai.schemas import (
    CandidateProfile,
    ExperienceRange,
    ExternalJob,
    JobPosting,
    ProfileLocation,
)

SAMPLE_RESUME = """Jane Doe
jane.doe@example.com | +91 98765 43210

SUMMARY
Frontend developer with 5 years of experience building web applications.

SKILLS
JavaScript, React, Node.js, HTML, CSS, Git

EXPERIENCE
Senior Frontend Developer, Acme Corp (2019 - 2024)
- Built React dashboards used by 10k users

EDUCATION
B.E. Computer Science, RV College of Engineering, 2015 - 2019

PROJECTS
Portfolio site built with React
"""

# Same resume without an explicit "N years of experience" phrase
SAMPLE_RESUME_NO_YEARS = SAMPLE_RESUME.replace("with 5 years of experience building", "building")

AI_PROFILE = {
    "name": "Jane Doe",
    "email": "Jane.Doe@Example.com",
    "phone": "+91 98765 43210",
    "location": {"city": "Bengaluru", "state": "Karnataka", "country": "India"},
    "summary": "Frontend developer",
    "skills": ["JavaScript", "React", " Node.js ", ""],
    "experience": [
        {"job_title": "Senior Frontend Developer", "company": "Acme Corp", "current": True},
        {"job_title": None, "company": None, "description": "orphan entry"},
    ],
    "education": [{"degree": "B.E. Computer Science", "institution": "RV College of Engineering", "end_year": 2019}],
    "total_experience_years": 6,
    "current_role": "Frontend Developer",
    "current_company": "Acme Corp",
    "linkedin": "linkedin.com/in/janedoe",
}


class FakeCompletionClient:
    """Returns a canned completion and records every prompt it receives."""

    def __init__(self, response: str, model: str = "fake-model"):
        self.model = model
        self.response = response
        self.prompts = []

    async def complete(self, prompt: str) -> str:
        self.prompts.append(prompt)
        return self.response


class FailingClient:
    """Simulates an unreachable completion endpoint."""

    model = "unreachable-model"

    def __init__(self, exc: Exception = None):
        self.exc = exc or AIServiceError("connection refused")
        self.calls = 0

    async def complete(self, prompt: str) -> str:
        self.calls += 1
        raise self.exc


@pytest.fixture
def sample_resume():
    return SAMPLE_RESUME


@pytest.fixture
def sample_resume_no_years():
    return SAMPLE_RESUME_NO_YEARS


@pytest.fixture
def ai_client():
    return FakeCompletionClient("```json\n" + json.dumps(AI_PROFILE) + "\n```")


@pytest.fixture
def failing_client():
    return FailingClient()


@pytest.fixture
def candidate():
    return CandidateProfile(
        name="Jane Doe",
        skills=["JavaScript", "React", "Node.js"],
        total_experience_years=4,
        location=ProfileLocation(city="Bangalore", state="Karnataka"),
    )


@pytest.fixture
def job_corpus():
    return [
        JobPosting(
            id="frontend",
            title="Frontend Developer",
            location="Bangalore, Karnataka",
            required_skills=["JavaScript", "React"],
            experience=ExperienceRange(min=2, max=6),
        ),
        JobPosting(
            id="python",
            title="Backend Developer",
            location="Bangalore, Karnataka",
            required_skills=["Python", "Django", "AWS", "Go"],
        ),
        JobPosting(
            id="java",
            title="Java Engineer",
            location="Pune, Maharashtra",
            required_skills=["Java", "Spring", "Kubernetes", "Terraform"],
        ),
        JobPosting(
            id="mobile",
            title="Mobile Developer",
            location="Austin, Texas",
            required_skills=["React Native", "Swift", "Kotlin", "Firebase"],
            experience=ExperienceRange(min=8, max=12),
        ),
        JobPosting(
            id="closed",
            title="Frontend Developer",
            location="Bangalore, Karnataka",
            required_skills=["JavaScript", "React"],
            status="closed",
        ),
    ]


@pytest.fixture
def external_jobs():
    return [
        ExternalJob(
            source="test",
            url="https://jobs.example.com/2",
            title="Data Scientist",
            company="Globex",
            location="Austin, Texas",
            description="Python and machine learning for a technology company",
            experience_level="senior",
        ),
        ExternalJob(
            source="test",
            url="https://jobs.example.com/1",
            title="Frontend Developer",
            company="Acme",
            location="Bengaluru, Karnataka",
            description="Build UIs with React and JavaScript",
            skills=["JavaScript", "React", "TypeScript"],
            experience_level="mid",
        ),
    ]
