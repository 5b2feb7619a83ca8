"""Tests for the skills-gap report."""

import pytest

from resume_match_ai.matching.skills_gap import analyze_skills_gap
from resume_match_ai.schemas import CandidateProfile, JobPosting


@pytest.fixture
def gap_jobs():
    return [
        JobPosting(id="1", title="Frontend Developer", required_skills=["JavaScript", "React", "TypeScript"]),
        JobPosting(id="2", title="Backend Developer", required_skills=["Node.js", "AWS", "Docker"]),
        JobPosting(id="3", title="Frontend Engineer", required_skills=["react", "Typescript", "CSS"]),
        JobPosting(id="4", title="Frontend Developer", required_skills=["Angular"], status="closed"),
    ]


@pytest.fixture
def profile():
    return CandidateProfile(skills=["JavaScript", "React"])


class TestSkillsGap:
    def test_missing_skills_ranked_by_demand(self, profile, gap_jobs):
        report = analyze_skills_gap(profile, gap_jobs)
        assert report.total_jobs_analyzed == 3
        assert report.total_skills_required == 7
        assert [e.skill for e in report.missing_skills] == ["TypeScript", "Node.js", "AWS", "Docker", "CSS"]
        top = report.missing_skills[0]
        assert (top.demand_count, top.percentage) == (2, 67)
        assert report.skills_you_have == 2
        assert report.skills_to_learn == 5
        assert report.completion_percentage == 29
        assert report.target_role == "All roles"

    def test_target_role_filters_titles(self, profile, gap_jobs):
        report = analyze_skills_gap(profile, gap_jobs, target_role="frontend")
        assert report.total_jobs_analyzed == 2
        assert [(e.skill, e.percentage) for e in report.missing_skills] == [("TypeScript", 100), ("CSS", 50)]
        assert report.completion_percentage == 50
        assert report.target_role == "frontend"

    def test_sample_size(self, profile, gap_jobs):
        report = analyze_skills_gap(profile, gap_jobs, sample_size=1)
        assert report.total_jobs_analyzed == 1
        assert [e.skill for e in report.missing_skills] == ["TypeScript"]

    def test_nothing_required(self, profile):
        report = analyze_skills_gap(profile, [JobPosting(id="x", title="Anything")])
        assert report.missing_skills == []
        assert report.completion_percentage == 0

    def test_all_covered(self, gap_jobs):
        skills = ["JavaScript", "React", "TypeScript", "Node.js", "AWS", "Docker", "CSS"]
        report = analyze_skills_gap(CandidateProfile(skills=skills), gap_jobs)
        assert report.missing_skills == []
        assert report.completion_percentage == 100
