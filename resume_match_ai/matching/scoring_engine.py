"""
Deterministic scoring of a candidate profile against a job posting.

Two weighting modes exist on purpose and are kept as separate functions:
- list ranking (skills 50% / experience 30 / location 20) for recommendation lists
- single-job analysis (skills 70% / experience 30) for one job, no location term

Scoring never raises: missing fields fall back to neutral values.
"""

from typing import Iterable, List, Optional, Tuple

from resume_match_ai.config import (
    EXPERIENCE_DEFAULT_MAX,
    EXPERIENCE_DEFAULT_MIN,
    LIST_RANKING_WEIGHTS,
    RATING_FLOOR,
    RATING_THRESHOLDS,
    REGIONAL_AFFINITY_KEYWORDS,
    SINGLE_JOB_WEIGHTS,
)
from resume_match_ai.schemas.cv_profile import CandidateProfile, ProfileLocation
from resume_match_ai.schemas.job_posting import ExperienceRange, JobPosting
from resume_match_ai.schemas.match_result import (
    ExperienceMatch,
    LocationMatch,
    MatchResult,
    ScoreBreakdown,
    ScoringMode,
    SkillMatch,
)
from resume_match_ai.utils.helpers import normalize_skill, round_half_up
from resume_match_ai.utils.logger import get_logger

logger = get_logger(__name__)

RECOMMENDATION_TEXT = {
    "Excellent": "Excellent match! You should definitely apply for this position.",
    "Good": "Good match! You have a strong chance. Consider applying.",
    "Fair": "Fair match. You meet some requirements but may want to develop additional skills.",
    "Poor": "This role may be challenging. Consider building more relevant skills first.",
}


def _fmt_years(value: float) -> str:
    return f"{value:g}"


def skills_overlap(candidate_skill: str, required_skill: str) -> bool:
    """Permissive match: either normalized skill contains the other."""
    return candidate_skill in required_skill or required_skill in candidate_skill


def is_skill_covered(required_skill: str, candidate_skills: Iterable[str]) -> bool:
    return any(skills_overlap(c, required_skill) for c in candidate_skills)


def calculate_skill_match(candidate_skills: Optional[List[str]], required_skills: Optional[List[str]]) -> SkillMatch:
    """
    Match required skills against candidate skills (lowercase, substring either way).
    A job with no required skills scores 0: no requirement carries no signal.
    """
    candidates = [s for s in (normalize_skill(c) for c in candidate_skills or []) if s]
    required = [s for s in (normalize_skill(r) for r in required_skills or []) if s]
    if not required:
        return SkillMatch(percentage=0, matched_skills=[], missing_skills=[], total_required=0, total_matched=0)

    matched = [r for r in required if is_skill_covered(r, candidates)]
    missing = [r for r in required if not is_skill_covered(r, candidates)]
    percentage = round_half_up(100 * len(matched) / len(required))
    return SkillMatch(
        percentage=percentage,
        matched_skills=matched,
        missing_skills=missing,
        total_required=len(required),
        total_matched=len(matched),
    )


def check_experience_match(user_years: Optional[float], requirement: Optional[ExperienceRange]) -> ExperienceMatch:
    """
    Compare candidate years with a job's min/max. Exceeding the maximum still counts as a
    match ("overqualified"); that policy is deliberate.
    """
    if requirement is None or (not requirement.min and not requirement.max):
        return ExperienceMatch(matches=True, reason="No experience requirement specified")

    user_exp = user_years or 0
    min_exp = requirement.min or EXPERIENCE_DEFAULT_MIN
    max_exp = requirement.max or EXPERIENCE_DEFAULT_MAX

    if min_exp <= user_exp <= max_exp:
        return ExperienceMatch(
            matches=True,
            reason=(
                f"Your {_fmt_years(user_exp)} years of experience matches the requirement "
                f"({_fmt_years(min_exp)}-{_fmt_years(max_exp)} years)"
            ),
        )
    if user_exp < min_exp:
        return ExperienceMatch(
            matches=False,
            reason=f"You have {_fmt_years(user_exp)} years, but {_fmt_years(min_exp)} years required",
            gap=min_exp - user_exp,
        )
    return ExperienceMatch(
        matches=True,
        reason=(
            f"You have {_fmt_years(user_exp)} years, exceeding the maximum "
            f"{_fmt_years(max_exp)} years (considered overqualified)"
        ),
    )


def check_location_match(location: Optional[ProfileLocation], job_location: Optional[str]) -> LocationMatch:
    """Case-insensitive containment of candidate city/state in the job's free-text location."""
    city = ((location.city if location else None) or "").strip().lower()
    state = ((location.state if location else None) or "").strip().lower()
    job_loc = (job_location or "").lower()
    if location is None or not job_loc:
        return LocationMatch(matches=False, same_state=False, reason="Location not specified")

    if city and city in job_loc:
        return LocationMatch(matches=True, same_state=True, reason=f"Same city: {city}")
    if state and state in job_loc:
        return LocationMatch(matches=False, same_state=True, reason=f"Same state: {state}")
    for keyword in REGIONAL_AFFINITY_KEYWORDS:
        if keyword in job_loc:
            return LocationMatch(matches=False, same_state=True, reason=f"Within {keyword.title()}")
    return LocationMatch(matches=False, same_state=False, reason="Different location")


def list_ranking_score(
    skill_match: SkillMatch,
    experience_match: ExperienceMatch,
    location_match: LocationMatch,
) -> Tuple[int, ScoreBreakdown]:
    """overall = round(skill% * 0.5 + experience (30 / 30 - 5*gap / 15) + location (20 / 10 / 0))."""
    w = LIST_RANKING_WEIGHTS
    skill_score = skill_match.percentage * w["skills"]
    if experience_match.matches:
        experience_score = w["experience_match"]
    elif experience_match.gap is not None:
        experience_score = max(0, w["experience_match"] - experience_match.gap * w["experience_gap_penalty"])
    else:
        experience_score = w["experience_unknown"]
    if location_match.matches:
        location_score = w["location_match"]
    elif location_match.same_state:
        location_score = w["location_same_state"]
    else:
        location_score = 0

    overall = round_half_up(skill_score + experience_score + location_score)
    breakdown = ScoreBreakdown(
        skills=round_half_up(skill_score),
        experience=round_half_up(experience_score),
        location=round_half_up(location_score),
    )
    return overall, breakdown


def single_job_score(skill_match: SkillMatch, experience_match: ExperienceMatch) -> Tuple[int, ScoreBreakdown]:
    """overall = round(skill% * 0.7 + (30 if experience matches else 15))."""
    w = SINGLE_JOB_WEIGHTS
    skill_score = skill_match.percentage * w["skills"]
    experience_score = w["experience_match"] if experience_match.matches else w["experience_miss"]
    overall = round_half_up(skill_score + experience_score)
    return overall, ScoreBreakdown(skills=round_half_up(skill_score), experience=experience_score, location=0)


def rating_for_score(score: int) -> str:
    for threshold, rating in RATING_THRESHOLDS:
        if score >= threshold:
            return rating
    return RATING_FLOOR


def recommendation_for_score(score: int) -> str:
    return RECOMMENDATION_TEXT[rating_for_score(score)]


def score_job(
    profile: CandidateProfile,
    job: JobPosting,
    mode: ScoringMode = ScoringMode.LIST_RANKING,
) -> MatchResult:
    """Full explainable match between one profile and one job under the given weighting mode."""
    mode = ScoringMode(mode)
    skill_match = calculate_skill_match(profile.skills, job.required_skills)
    experience_match = check_experience_match(profile.total_experience_years, job.experience)
    location_match = check_location_match(profile.location, job.location)

    if mode is ScoringMode.SINGLE_JOB:
        overall, breakdown = single_job_score(skill_match, experience_match)
    else:
        overall, breakdown = list_ranking_score(skill_match, experience_match, location_match)

    logger.debug("Scored job %s (%s): mode=%s overall=%s", job.id, job.title, mode.value, overall)
    return MatchResult(
        job=job,
        mode=mode,
        skill_match=skill_match,
        experience_match=experience_match,
        location_match=location_match,
        overall_score=overall,
        rating=rating_for_score(overall),
        recommendation=recommendation_for_score(overall),
        breakdown=breakdown,
    )
