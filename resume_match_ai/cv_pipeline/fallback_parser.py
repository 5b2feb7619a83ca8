"""Tier-2 heuristic resume parsing. Local, deterministic, always succeeds."""

from typing import Any, Dict, List, Optional

from resume_match_ai.config import (
    FALLBACK_PARSER_MODEL,
    FALLBACK_PARSING_CONFIDENCE,
    NAME_SCAN_LINES,
    SKILL_VOCABULARY,
)
from resume_match_ai.utils.helpers import contains_term, extract_emails, extract_phones

CONTACT_WORDS = ("phone", "email", "address")
MAX_NAME_LENGTH = 50


def extract_basic_name(lines: List[str]) -> Optional[str]:
    """Usually the name is in the first few lines; skip lines that look like contact info."""
    for line in lines[:NAME_SCAN_LINES]:
        if "@" in line or line.lstrip("+(")[:1].isdigit() or len(line) >= MAX_NAME_LENGTH:
            continue
        lower = line.lower()
        if any(word in lower for word in CONTACT_WORDS):
            continue
        return line
    return None


def extract_basic_email(text: str) -> Optional[str]:
    emails = extract_emails(text)
    if not emails:
        return None
    return emails[0].rstrip(".,;:)>]").lower()


def extract_basic_phone(text: str) -> Optional[str]:
    phones = extract_phones(text)
    return phones[0] if phones else None


def extract_basic_skills(text: str) -> List[str]:
    """Whole-word intersection of the text with the fixed skill vocabulary."""
    return [display for term, display in SKILL_VOCABULARY.items() if contains_term(text, term)]


def basic_parse(text: str, reason: str) -> Dict[str, Any]:
    """Build a draft profile from heuristics; `reason` records why the AI tier was bypassed."""
    lines = [line.strip() for line in (text or "").splitlines() if line.strip()]
    return {
        "name": extract_basic_name(lines),
        "email": extract_basic_email(text or ""),
        "phone": extract_basic_phone(text or ""),
        "skills": extract_basic_skills(text or ""),
        "parsing": {
            "model": FALLBACK_PARSER_MODEL,
            "confidence": FALLBACK_PARSING_CONFIDENCE,
            "errors": [
                {
                    "field": "general",
                    "error": f"AI parsing failed, using basic extraction: {reason}",
                    "severity": "medium",
                }
            ],
        },
    }
