"""Recommendation ranking: pre-filter, list-ranking scores, sort, score floor, limit."""

from typing import List

from resume_match_ai.config import (
    DEFAULT_RECOMMENDATION_LIMIT,
    MIN_RECOMMENDATION_SCORE,
    PREFILTER_OVERFETCH,
)
from resume_match_ai.matching.scoring_engine import score_job
from resume_match_ai.schemas.cv_profile import CandidateProfile
from resume_match_ai.schemas.job_posting import JobPosting
from resume_match_ai.schemas.match_result import MatchResult, RankedRecommendations, ScoringMode
from resume_match_ai.services.filter_service import prefilter_by_skills
from resume_match_ai.utils.logger import get_logger

logger = get_logger(__name__)

NO_SKILLS_MESSAGE = "Please upload a resume to get personalized recommendations"


def _match_basis(profile: CandidateProfile) -> dict:
    return {
        "skills": len(profile.skills),
        "experience": profile.total_experience_years,
        "location": profile.location.city or "Not specified",
        "education": len(profile.education),
    }


def rank_recommendations(
    profile: CandidateProfile,
    jobs: List[JobPosting],
    limit: int = DEFAULT_RECOMMENDATION_LIMIT,
) -> RankedRecommendations:
    """
    Rank jobs for a profile. Over-fetches 3x the limit through the coarse skill pre-filter,
    scores in list-ranking mode, sorts descending, drops scores under 40, truncates to limit.
    A profile without skills is not scored at all.
    """
    if not profile.skills:
        logger.info("Ranking skipped: profile has no skills")
        return RankedRecommendations(message=NO_SKILLS_MESSAGE, match_basis={})

    limit = max(0, int(limit))
    candidates = prefilter_by_skills(jobs, profile.skills, limit=limit * PREFILTER_OVERFETCH)
    scored: List[MatchResult] = [score_job(profile, job, ScoringMode.LIST_RANKING) for job in candidates]
    scored.sort(key=lambda m: -m.overall_score)
    above_floor = [m for m in scored if m.overall_score >= MIN_RECOMMENDATION_SCORE]
    result = above_floor[:limit]
    logger.info(
        "Ranking finished: corpus=%s prefiltered=%s above_floor=%s returned=%s",
        len(jobs),
        len(candidates),
        len(above_floor),
        len(result),
    )
    return RankedRecommendations(
        recommendations=result,
        total_found=len(above_floor),
        match_basis=_match_basis(profile),
    )
