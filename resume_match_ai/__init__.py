"""Resume parsing and explainable job matching."""

from .cv_pipeline import extract_candidate_profile, extract_text
from .matching import analyze_skills_gap, rank_recommendations, score_job
from .recommendation import get_recommendations

__version__ = "0.1.0"

__all__ = [
    "analyze_skills_gap",
    "extract_candidate_profile",
    "extract_text",
    "get_recommendations",
    "rank_recommendations",
    "score_job",
]
