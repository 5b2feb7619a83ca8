"""Matching: skill/experience/location scoring, ranking and skills-gap analysis."""

from .ranker import rank_recommendations
from .scoring_engine import (
    calculate_skill_match,
    check_experience_match,
    check_location_match,
    list_ranking_score,
    rating_for_score,
    recommendation_for_score,
    score_job,
    single_job_score,
)
from .skills_gap import analyze_skills_gap

__all__ = [
    "analyze_skills_gap",
    "calculate_skill_match",
    "check_experience_match",
    "check_location_match",
    "list_ranking_score",
    "rank_recommendations",
    "rating_for_score",
    "recommendation_for_score",
    "score_job",
    "single_job_score",
]
