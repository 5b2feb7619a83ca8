"""Helper utilities shared by extraction, matching and recommendations."""

import math
import re
from typing import List, Optional

EMAIL_SEARCH_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
EMAIL_FULL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
PHONE_SEARCH_PATTERN = re.compile(r"\+?\(?\d[\d \t().-]{5,}\d")
YEAR_RANGE_PATTERN = re.compile(r"^(?:19|20)\d{2}\s*[-.]\s*(?:19|20)\d{2}$")
PHONE_MIN_DIGITS = 7
PHONE_MAX_DIGITS = 15


def extract_emails(text: str) -> List[str]:
    """Extract email-shaped substrings from text, in order of appearance."""
    if not text:
        return []
    return list(dict.fromkeys(EMAIL_SEARCH_PATTERN.findall(text)))


def extract_phones(text: str) -> List[str]:
    """Extract phone-shaped substrings (7-15 digits once separators are removed)."""
    if not text:
        return []
    phones = []
    for match in PHONE_SEARCH_PATTERN.finditer(text):
        candidate = match.group(0).strip()
        if YEAR_RANGE_PATTERN.match(candidate.strip("()")):
            continue
        digits = re.sub(r"\D", "", candidate)
        if PHONE_MIN_DIGITS <= len(digits) <= PHONE_MAX_DIGITS:
            phones.append(candidate)
    return list(dict.fromkeys(phones))


def is_email_shaped(value: str) -> bool:
    return bool(value) and EMAIL_FULL_PATTERN.match(value) is not None


def normalize_url(url: str) -> str:
    """Normalize URL for deduplication (strip trailing slashes, fragments, query)."""
    if not url:
        return ""
    url = url.strip().rstrip("/")
    if "#" in url:
        url = url.split("#")[0]
    if "?" in url:
        url = url.split("?", 1)[0]
    return url


def round_half_up(value: float) -> int:
    """Round .5 away from zero for non-negative scores (Python's round() is banker's rounding)."""
    return int(math.floor(value + 0.5))


def normalize_skill(skill: Optional[str]) -> str:
    return (skill or "").strip().lower()


def contains_term(text: str, term: str) -> bool:
    """Whole-word, case-insensitive containment; tolerant of terms with punctuation like 'node.js'."""
    if not text or not term:
        return False
    pattern = r"(?<![\w])" + re.escape(term.lower()) + r"(?![\w])"
    return re.search(pattern, text.lower()) is not None
