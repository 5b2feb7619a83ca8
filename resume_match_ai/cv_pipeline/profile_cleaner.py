"""Mandatory, tier-independent cleaning of draft profile data into a CandidateProfile.

Cleaning is idempotent: clean_profile(clean_profile(x)) == clean_profile(x).
Invalid fields are nulled or dropped (recorded as low-severity parsing errors), never raised.
"""

from typing import Any, Dict, List, Optional, Tuple, Union

from pydantic import HttpUrl, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from resume_match_ai.config import (
    DEFAULT_LANGUAGE_PROFICIENCY,
    LANGUAGE_PROFICIENCIES,
    MAX_EXPERIENCE_YEARS,
    MAX_SKILLS,
    YEARS_PER_EXPERIENCE_ENTRY,
)
from resume_match_ai.errors import ValidationError
from resume_match_ai.schemas.cv_profile import CandidateProfile, ParsingError
from resume_match_ai.utils.helpers import is_email_shaped
from resume_match_ai.utils.logger import get_logger

logger = get_logger(__name__)

_HTTP_URL = TypeAdapter(HttpUrl)

URL_DOMAINS = {"linkedin": "linkedin.com", "github": "github.com"}


def clean_string(value: Any) -> Optional[str]:
    if not isinstance(value, str):
        return None
    value = value.strip()
    return value or None


def clean_email(value: Any) -> Optional[str]:
    cleaned = clean_string(value)
    if cleaned is None:
        return None
    cleaned = cleaned.lower()
    if not is_email_shaped(cleaned):
        raise ValidationError("email", f"invalid email {cleaned!r}")
    return cleaned


def clean_url(value: Any, kind: Optional[str] = None) -> Optional[str]:
    """Add an https scheme when missing; linkedin/github URLs must point at their domain."""
    cleaned = clean_string(value)
    if cleaned is None:
        return None
    if not cleaned.lower().startswith(("http://", "https://")):
        cleaned = f"https://{cleaned}"
    try:
        _HTTP_URL.validate_python(cleaned)
    except PydanticValidationError:
        raise ValidationError(kind or "url", f"malformed URL {cleaned!r}") from None
    domain = URL_DOMAINS.get(kind or "")
    if domain and domain not in cleaned.lower():
        raise ValidationError(kind, f"URL is not a {domain} address")
    return cleaned


def clean_string_list(values: Any) -> List[str]:
    if not isinstance(values, list):
        return []
    return [v for v in (clean_string(item) for item in values) if v is not None]


def clean_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("true", "yes", "1")
    return bool(value)


def clean_year(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_list(value: Any) -> List[Dict[str, Any]]:
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, dict)]


class _Cleaner:
    """Collects field-level validation failures while cleaning one draft."""

    def __init__(self) -> None:
        self.errors: List[ParsingError] = []

    def _guard(self, fn, *args) -> Optional[str]:
        try:
            return fn(*args)
        except ValidationError as e:
            logger.warning("Removing invalid field from parsed data: %s", e)
            self.errors.append(ParsingError(field=e.field, error=str(e), severity="low"))
            return None

    def email(self, value: Any) -> Optional[str]:
        return self._guard(clean_email, value)

    def url(self, value: Any, kind: Optional[str] = None) -> Optional[str]:
        return self._guard(clean_url, value, kind)

    def location(self, value: Any) -> Dict[str, Optional[str]]:
        loc = _as_dict(value)
        return {
            "address": clean_string(loc.get("address")),
            "city": clean_string(loc.get("city")),
            "state": clean_string(loc.get("state")),
            "country": clean_string(loc.get("country")),
            "postal_code": clean_string(loc.get("postal_code")),
        }

    def experience(self, values: Any) -> List[Dict[str, Any]]:
        entries = [
            {
                "job_title": clean_string(exp.get("job_title")),
                "company": clean_string(exp.get("company")),
                "location": clean_string(exp.get("location")),
                "start_date": clean_string(exp.get("start_date")),
                "end_date": clean_string(exp.get("end_date")),
                "current": clean_bool(exp.get("current")),
                "description": clean_string(exp.get("description")),
                "responsibilities": clean_string_list(exp.get("responsibilities")),
                "achievements": clean_string_list(exp.get("achievements")),
            }
            for exp in _as_list(values)
        ]
        return [e for e in entries if e["job_title"] or e["company"]]

    def education(self, values: Any) -> List[Dict[str, Any]]:
        entries = [
            {
                "degree": clean_string(edu.get("degree")),
                "institution": clean_string(edu.get("institution")),
                "field_of_study": clean_string(edu.get("field_of_study")),
                "start_year": clean_year(edu.get("start_year")),
                "end_year": clean_year(edu.get("end_year")),
                "grade": clean_string(edu.get("grade")),
                "ongoing": clean_bool(edu.get("ongoing")),
            }
            for edu in _as_list(values)
        ]
        return [e for e in entries if e["degree"] or e["institution"]]

    def projects(self, values: Any) -> List[Dict[str, Any]]:
        entries = [
            {
                "title": clean_string(proj.get("title")),
                "description": clean_string(proj.get("description")),
                "technologies": clean_string_list(proj.get("technologies")),
                "start_date": clean_string(proj.get("start_date")),
                "end_date": clean_string(proj.get("end_date")),
                "url": self.url(proj.get("url")),
                "github": self.url(proj.get("github"), "github"),
            }
            for proj in _as_list(values)
        ]
        return [p for p in entries if p["title"] or p["url"]]

    def certifications(self, values: Any) -> List[Dict[str, Any]]:
        entries = [
            {
                "name": clean_string(cert.get("name")),
                "issuer": clean_string(cert.get("issuer")),
                "issue_date": clean_string(cert.get("issue_date")),
                "expiry_date": clean_string(cert.get("expiry_date")),
                "credential_id": clean_string(cert.get("credential_id")),
                "url": self.url(cert.get("url")),
            }
            for cert in _as_list(values)
        ]
        return [c for c in entries if c["name"] or c["issuer"]]

    def languages(self, values: Any) -> List[Dict[str, Any]]:
        entries = []
        for lang in _as_list(values):
            language = clean_string(lang.get("language"))
            if not language:
                continue
            proficiency = (clean_string(lang.get("proficiency")) or "").lower()
            if proficiency not in LANGUAGE_PROFICIENCIES:
                proficiency = DEFAULT_LANGUAGE_PROFICIENCY
            entries.append({"language": language, "proficiency": proficiency})
        return entries


def clean_skills(values: Any) -> List[str]:
    return clean_string_list(values)[:MAX_SKILLS]


def calculate_experience_years(provided: Any, experience_count: int) -> float:
    """
    Prefer a provided non-negative whole number; otherwise estimate from the number of
    experience entries. The estimate is a rough approximation, not calendar accurate.
    """
    if not isinstance(provided, bool) and isinstance(provided, (int, float)):
        if provided >= 0 and float(provided).is_integer():
            return float(min(provided, MAX_EXPERIENCE_YEARS))
    return float(min(experience_count * YEARS_PER_EXPERIENCE_ENTRY, MAX_EXPERIENCE_YEARS))


def _clean_parsing(value: Any) -> Tuple[Optional[str], float, List[Dict[str, Any]]]:
    parsing = _as_dict(value)
    confidence = parsing.get("confidence")
    if isinstance(confidence, bool) or not isinstance(confidence, (int, float)):
        confidence = 0.0
    confidence = max(0.0, min(1.0, float(confidence)))
    errors = []
    for err in _as_list(parsing.get("errors")):
        field = clean_string(err.get("field"))
        message = clean_string(err.get("error"))
        if field and message:
            errors.append({"field": field, "error": message, "severity": clean_string(err.get("severity")) or "low"})
    return clean_string(parsing.get("model")), confidence, errors


def clean_profile(draft: Union[CandidateProfile, Dict[str, Any], None]) -> CandidateProfile:
    """Validate and clean draft profile data (AI output, fallback output or an existing profile)."""
    if isinstance(draft, CandidateProfile):
        data = draft.model_dump()
    else:
        data = _as_dict(draft)

    cleaner = _Cleaner()
    experience = cleaner.experience(data.get("experience"))
    cleaned = {
        "name": clean_string(data.get("name")),
        "email": cleaner.email(data.get("email")),
        "phone": clean_string(data.get("phone")),
        "location": cleaner.location(data.get("location")),
        "summary": clean_string(data.get("summary")),
        "skills": clean_skills(data.get("skills")),
        "experience": experience,
        "education": cleaner.education(data.get("education")),
        "projects": cleaner.projects(data.get("projects")),
        "certifications": cleaner.certifications(data.get("certifications")),
        "languages": cleaner.languages(data.get("languages")),
        "total_experience_years": calculate_experience_years(data.get("total_experience_years"), len(experience)),
        "current_role": clean_string(data.get("current_role")),
        "current_company": clean_string(data.get("current_company")),
        "linkedin": cleaner.url(data.get("linkedin"), "linkedin"),
        "github": cleaner.url(data.get("github"), "github"),
        "portfolio": cleaner.url(data.get("portfolio")),
    }

    model, confidence, errors = _clean_parsing(data.get("parsing"))
    errors.extend(e.model_dump() for e in cleaner.errors)
    cleaned["parsing"] = {"model": model, "confidence": confidence, "errors": errors}
    return CandidateProfile.model_validate(cleaned)
