"""
Recommendation pipeline: validate resume text, extract a profile, derive preferences,
query a job source, score every job and wrap the outcome in a response envelope.

Never raises. Any failure yields an envelope with success=False and metadata.source="error".
"""

import asyncio
import time
from typing import List, Optional

from resume_match_ai.config import (
    LEVEL_EXPERIENCE_RANGES,
    MAX_EXPERIENCE_YEARS,
    RECOMMENDATION_JOB_LIMIT,
    SKILL_VOCABULARY,
)
from resume_match_ai.cv_pipeline.ai_client import CompletionClient
from resume_match_ai.cv_pipeline.cv_extractor import extract_candidate_profile_async
from resume_match_ai.errors import InputError
from resume_match_ai.matching.scoring_engine import score_job
from resume_match_ai.recommendation.preferences import derive_preferences, generate_search_keywords, validate_resume_text
from resume_match_ai.schemas.cv_profile import CandidateProfile, ProfileLocation
from resume_match_ai.schemas.external_job import ExternalJob
from resume_match_ai.schemas.job_posting import ExperienceRange, JobPosting
from resume_match_ai.schemas.match_result import MatchResult, ScoringMode
from resume_match_ai.schemas.recommendation import (
    JobPreferences,
    RecommendationAnalysis,
    RecommendationEnvelope,
    RecommendationList,
    RecommendationMetadata,
    ScoredJob,
)
from resume_match_ai.services.job_source import InMemoryJobSource, JobSource, map_seniority_level
from resume_match_ai.utils.helpers import contains_term, round_half_up
from resume_match_ai.utils.logger import get_logger

logger = get_logger(__name__)


def _mentioned_skills(text: str, preferences: JobPreferences) -> List[str]:
    found = [display for term, display in SKILL_VOCABULARY.items() if contains_term(text, term)]
    seen = {s.lower() for s in found}
    for skill in preferences.skills:
        if skill.lower() not in seen and contains_term(text, skill):
            found.append(skill)
            seen.add(skill.lower())
    return found


def adapt_external_job(job: ExternalJob, preferences: JobPreferences, index: int = 0) -> JobPosting:
    """
    Give an external job the shape the scoring engine expects. Skills listed by the source
    win; otherwise known skills mentioned in the title or description stand in for them.
    """
    required = list(job.skills) or _mentioned_skills(f"{job.title} {job.description}", preferences)
    bounds = LEVEL_EXPERIENCE_RANGES.get(map_seniority_level(job.experience_level) or "")
    experience = ExperienceRange(min=bounds[0], max=bounds[1]) if bounds else None
    return JobPosting(
        id=job.url or f"{job.source}-{index}",
        title=job.title,
        company=job.company,
        location=job.location,
        description=job.description,
        required_skills=required,
        experience=experience,
    )


def match_reasons(job: ExternalJob, preferences: JobPreferences, match: MatchResult) -> List[str]:
    reasons = []
    if preferences.role and preferences.role.lower() in job.title.lower():
        reasons.append(f"Matches desired role: {preferences.role}")
    if match.skill_match.matched_skills:
        reasons.append(f"Matches skills: {', '.join(match.skill_match.matched_skills)}")
    if map_seniority_level(job.experience_level) == preferences.experience_level:
        reasons.append(f"Matches experience level: {preferences.experience_level}")
    if match.location_match.matches or match.location_match.same_state:
        reasons.append(match.location_match.reason)
    return reasons


def _scoring_profile(profile: CandidateProfile, preferences: JobPreferences) -> CandidateProfile:
    """Profile as scored: experience years and (when the resume has none) location come from preferences."""
    location = profile.location
    if not (location.city or location.state):
        location = ProfileLocation(state=preferences.location)
    return profile.model_copy(
        update={
            "total_experience_years": min(preferences.experience_years, MAX_EXPERIENCE_YEARS),
            "location": location,
        }
    )


def average_relevance(jobs: List[ScoredJob]) -> int:
    if not jobs:
        return 0
    return round_half_up(sum(j.relevance_score for j in jobs) / len(jobs))


def _failure(message: str, started: float) -> RecommendationEnvelope:
    return RecommendationEnvelope(
        success=False,
        error=message,
        processing_time_seconds=round(time.perf_counter() - started, 3),
        metadata=RecommendationMetadata(source="error", error=message),
    )


async def get_recommendations_async(
    resume_text: str,
    desired_role: str = "",
    job_source: Optional[JobSource] = None,
    client: Optional[CompletionClient] = None,
    limit: int = RECOMMENDATION_JOB_LIMIT,
) -> RecommendationEnvelope:
    started = time.perf_counter()
    source = job_source or InMemoryJobSource()
    try:
        validate_resume_text(resume_text)
        profile = await extract_candidate_profile_async(resume_text, client)
        preferences = derive_preferences(profile, resume_text, desired_role)
        keywords = generate_search_keywords(preferences)
        external_jobs = await source.search(preferences, keywords, limit)

        scoring_profile = _scoring_profile(profile, preferences)
        scored: List[ScoredJob] = []
        for i, job in enumerate(external_jobs):
            match = score_job(scoring_profile, adapt_external_job(job, preferences, i), ScoringMode.LIST_RANKING)
            scored.append(
                ScoredJob(
                    job=job,
                    relevance_score=match.overall_score,
                    match_reasons=match_reasons(job, preferences, match),
                    match=match,
                )
            )
        scored.sort(key=lambda s: -s.relevance_score)
    except InputError as e:
        logger.warning("Rejected resume text: %s", e)
        return _failure(str(e), started)
    except Exception as e:
        logger.exception("Recommendation pipeline failed: %s", e)
        return _failure(str(e) or e.__class__.__name__, started)

    elapsed = round(time.perf_counter() - started, 3)
    logger.info("Recommendations ready: %s jobs from %s in %.2fs", len(scored), source.name, elapsed)
    return RecommendationEnvelope(
        success=True,
        processing_time_seconds=elapsed,
        analysis=RecommendationAnalysis(
            extracted_role=preferences.role,
            experience_level=preferences.experience_level,
            experience_years=preferences.experience_years,
            skills=preferences.skills,
            industry=preferences.industry,
            location=preferences.location,
            parsing_model=profile.parsing.model,
            parsing_confidence=profile.parsing.confidence,
        ),
        search_keywords=keywords,
        recommendations=RecommendationList(
            count=len(scored),
            jobs=scored,
            average_relevance_score=average_relevance(scored),
        ),
        metadata=RecommendationMetadata(source=source.name, location=preferences.location),
    )


def get_recommendations(
    resume_text: str,
    desired_role: str = "",
    job_source: Optional[JobSource] = None,
    client: Optional[CompletionClient] = None,
    limit: int = RECOMMENDATION_JOB_LIMIT,
) -> RecommendationEnvelope:
    """Sync entry point for get_recommendations_async, on a private event loop."""
    loop = asyncio.new_event_loop()
    started = time.perf_counter()
    try:
        return loop.run_until_complete(
            get_recommendations_async(resume_text, desired_role, job_source, client, limit)
        )
    except Exception as e:
        logger.exception("Recommendation request failed: %s", e)
        return _failure(str(e) or e.__class__.__name__, started)
    finally:
        loop.close()
