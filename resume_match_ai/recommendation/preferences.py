"""Resume text validation and job preference / search keyword derivation."""

import re
from typing import List, Optional

from resume_match_ai.config import (
    DEFAULT_EXPERIENCE_LEVEL,
    DEFAULT_EXPERIENCE_YEARS,
    DEFAULT_INDUSTRY,
    DEFAULT_LOCATION,
    DEFAULT_ROLE,
    EXPERIENCE_LEVEL_TOP,
    EXPERIENCE_LEVELS,
    FALLBACK_PARSER_MODEL,
    INDUSTRY_KEYWORDS,
    KEYWORD_SKILL_COUNT,
    PREFERENCE_SKILL_COUNT,
    RESUME_INDICATORS,
    RESUME_MAX_CHARS,
    RESUME_MIN_CHARS,
    RESUME_MIN_INDICATORS,
)
from resume_match_ai.errors import InputError
from resume_match_ai.schemas.cv_profile import CandidateProfile
from resume_match_ai.schemas.recommendation import JobPreferences
from resume_match_ai.utils.helpers import contains_term
from resume_match_ai.utils.logger import get_logger

logger = get_logger(__name__)

YEARS_PATTERN = re.compile(r"(\d+)\s*(?:years?|yrs?)\s*(?:of\s*)?(?:experience|exp)", re.IGNORECASE)


def validate_resume_text(resume_text: Optional[str]) -> int:
    """
    Reject text that cannot be a resume. Returns the number of resume indicators found.

    Raises:
        InputError: empty, shorter than 100 or longer than 50 000 characters, or fewer than
            two section indicators (experience, education, skills, ...).
    """
    if not resume_text or not resume_text.strip():
        raise InputError("Resume text is empty")
    if len(resume_text) < RESUME_MIN_CHARS:
        raise InputError(f"Resume text too short (minimum {RESUME_MIN_CHARS} characters required)")
    if len(resume_text) > RESUME_MAX_CHARS:
        raise InputError(f"Resume text too long (maximum {RESUME_MAX_CHARS:,} characters allowed)")

    text_lower = resume_text.lower()
    found = [i for i in RESUME_INDICATORS if i in text_lower]
    if len(found) < RESUME_MIN_INDICATORS:
        raise InputError("Text does not appear to be a resume (missing key resume sections)")
    return len(found)


def level_for_years(years: float) -> str:
    for upper, level in EXPERIENCE_LEVELS:
        if years <= upper:
            return level
    return EXPERIENCE_LEVEL_TOP


def explicit_experience_years(resume_text: str) -> Optional[int]:
    """Years from the first "N years of experience" style phrase, if the resume states one."""
    match = YEARS_PATTERN.search(resume_text or "")
    return int(match.group(1)) if match else None


def detect_industry(resume_text: str) -> str:
    for industry, keywords in INDUSTRY_KEYWORDS:
        if any(contains_term(resume_text, k) for k in keywords):
            return industry
    return DEFAULT_INDUSTRY


def _current_role(profile: CandidateProfile) -> Optional[str]:
    if profile.current_role:
        return profile.current_role
    for entry in profile.experience:
        if entry.current and entry.job_title:
            return entry.job_title
    return None


def _preferred_location(profile: CandidateProfile) -> str:
    parts = [p for p in (profile.location.city, profile.location.state) if p]
    return ", ".join(parts) if parts else DEFAULT_LOCATION


def derive_preferences(profile: CandidateProfile, resume_text: str, desired_role: str = "") -> JobPreferences:
    """
    Turn a parsed profile plus the raw resume text into search preferences.

    Years come from an explicit phrase in the text, then from an AI-parsed total; when
    neither exists the defaults (2 years, "mid") apply as-is rather than by threshold.
    """
    role = (desired_role or "").strip() or _current_role(profile) or DEFAULT_ROLE

    years: Optional[float] = explicit_experience_years(resume_text)
    if years is None and profile.parsing.model != FALLBACK_PARSER_MODEL and profile.total_experience_years > 0:
        years = profile.total_experience_years
    if years is None:
        experience_years: float = DEFAULT_EXPERIENCE_YEARS
        level = DEFAULT_EXPERIENCE_LEVEL
    else:
        experience_years = years
        level = level_for_years(years)

    preferences = JobPreferences(
        role=role,
        experience_level=level,
        experience_years=experience_years,
        skills=list(profile.skills[:PREFERENCE_SKILL_COUNT]),
        industry=detect_industry(resume_text),
        location=_preferred_location(profile),
    )
    logger.info(
        "Derived preferences: role=%s level=%s years=%s industry=%s skills=%s",
        preferences.role,
        preferences.experience_level,
        preferences.experience_years,
        preferences.industry,
        len(preferences.skills),
    )
    return preferences


def generate_search_keywords(preferences: JobPreferences) -> List[str]:
    """Role, top three skills and industry; anything of two characters or fewer is dropped."""
    keywords = [preferences.role, *preferences.skills[:KEYWORD_SKILL_COUNT], preferences.industry]
    return [k for k in keywords if k and len(k.strip()) > 2]
