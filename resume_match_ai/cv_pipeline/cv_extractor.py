"""Structured extraction of a CandidateProfile from resume text: AI tier, heuristic fallback, cleaning."""

import asyncio
from typing import Any, Dict, Optional

from resume_match_ai.config import AI_MAX_INPUT_CHARS, AI_PARSING_CONFIDENCE
from resume_match_ai.cv_pipeline.ai_client import AICompletionClient, CompletionClient
from resume_match_ai.cv_pipeline.fallback_parser import basic_parse
from resume_match_ai.cv_pipeline.json_adapter import extract_json_object
from resume_match_ai.cv_pipeline.profile_cleaner import clean_profile
from resume_match_ai.errors import AIServiceError
from resume_match_ai.schemas.cv_profile import CandidateProfile, ParsingError, ParsingMetadata
from resume_match_ai.utils.logger import get_logger

logger = get_logger(__name__)

CV_EXTRACTION_PROMPT = """Analyze the following resume and extract information in this EXACT JSON structure.
Return ONLY the JSON object, no additional text, no markdown:
{
  "name": "Full name of the candidate",
  "email": "Email address",
  "phone": "Phone number",
  "location": {
    "address": "Full address if available",
    "city": "City name",
    "state": "State/Province",
    "country": "Country",
    "postal_code": "Postal/ZIP code"
  },
  "summary": "Professional summary or objective",
  "skills": ["Technical and professional skills"],
  "experience": [
    {
      "job_title": "Job title",
      "company": "Company name",
      "location": "Job location",
      "start_date": "Start date",
      "end_date": "End date or 'Present'",
      "current": false,
      "description": "Job description",
      "responsibilities": ["Key responsibilities"],
      "achievements": ["Notable achievements"]
    }
  ],
  "education": [
    {
      "degree": "Degree title",
      "institution": "Institution name",
      "field_of_study": "Field of study",
      "start_year": 2020,
      "end_year": 2024,
      "grade": "GPA/Grade if mentioned",
      "ongoing": false
    }
  ],
  "projects": [
    {
      "title": "Project name",
      "description": "Project description",
      "technologies": ["Technologies used"],
      "start_date": "Start date",
      "end_date": "End date",
      "url": "Project URL if available",
      "github": "Repository URL if available"
    }
  ],
  "certifications": [
    {
      "name": "Certification name",
      "issuer": "Issuing organization",
      "issue_date": "Issue date",
      "expiry_date": "Expiry date if applicable",
      "credential_id": "Credential ID if available",
      "url": "Verification URL if available"
    }
  ],
  "languages": [
    {"language": "Language name", "proficiency": "basic|intermediate|advanced|native|fluent"}
  ],
  "total_experience_years": 5,
  "current_role": "Current job title",
  "current_company": "Current company name",
  "linkedin": "LinkedIn profile URL",
  "github": "GitHub profile URL",
  "portfolio": "Portfolio website URL"
}
If information is not available, use null or empty arrays as appropriate.
total_experience_years must be a whole number.

Resume Text:
"""


def build_extraction_prompt(cv_text: str) -> str:
    return CV_EXTRACTION_PROMPT + cv_text[:AI_MAX_INPUT_CHARS].strip()


async def _extract_with_ai(client: CompletionClient, cv_text: str) -> Dict[str, Any]:
    """Tier 1: completion call plus JSON parsing. Raises AIServiceError on any failure."""
    response_text = await client.complete(build_extraction_prompt(cv_text))
    result = extract_json_object(response_text)
    if not result.ok:
        raise AIServiceError(result.error or "Unparseable AI response")
    draft = dict(result.value)
    draft["parsing"] = {
        "model": getattr(client, "model", None),
        "confidence": AI_PARSING_CONFIDENCE,
        "errors": [],
    }
    return draft


def _log_coverage(tier: str, profile: CandidateProfile) -> None:
    logger.info(
        "Profile extraction finished: tier=%s model=%s skills=%s experience=%s education=%s projects=%s email=%s",
        tier,
        profile.parsing.model,
        len(profile.skills),
        len(profile.experience),
        len(profile.education),
        len(profile.projects),
        profile.email is not None,
    )


async def extract_candidate_profile_async(
    cv_text: str,
    client: Optional[CompletionClient] = None,
) -> CandidateProfile:
    """
    Extract a cleaned CandidateProfile. Never raises: any Tier-1 failure (missing key,
    network error, timeout, malformed JSON) is absorbed by the heuristic Tier 2.
    """
    client = client or AICompletionClient()
    tier = "ai"
    try:
        draft = await _extract_with_ai(client, cv_text or "")
    except AIServiceError as e:
        logger.warning("AI parsing unavailable, falling back to basic parsing: %s", e)
        tier = "fallback"
        draft = basic_parse(cv_text, str(e))
    except Exception as e:
        logger.exception("AI parsing failed unexpectedly, falling back to basic parsing: %s", e)
        tier = "fallback"
        draft = basic_parse(cv_text, str(e))

    try:
        profile = clean_profile(draft)
    except Exception as e:
        logger.exception("Profile cleaning failed: %s", e)
        tier = "fallback"
        profile = clean_profile(basic_parse(cv_text, f"cleaning failed: {e}"))

    _log_coverage(tier, profile)
    return profile


def extract_candidate_profile(cv_text: str, client: Optional[CompletionClient] = None) -> CandidateProfile:
    """
    Sync entry point for extract_candidate_profile_async.
    Uses a private event loop; safe to call from sync context (e.g. a worker or a script).
    """
    loop = asyncio.new_event_loop()
    try:
        return loop.run_until_complete(extract_candidate_profile_async(cv_text, client))
    except Exception as e:
        logger.exception("Profile extraction failed: %s", e)
        return CandidateProfile(
            parsing=ParsingMetadata(
                errors=[ParsingError(field="general", error=f"Profile extraction failed: {e}", severity="high")]
            )
        )
    finally:
        loop.close()
