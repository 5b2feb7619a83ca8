"""Utility exports."""

from .helpers import (
    contains_term,
    extract_emails,
    extract_phones,
    is_email_shaped,
    normalize_skill,
    normalize_url,
    round_half_up,
)
from .logger import get_logger

__all__ = [
    "get_logger",
    "contains_term",
    "extract_emails",
    "extract_phones",
    "is_email_shaped",
    "normalize_skill",
    "normalize_url",
    "round_half_up",
]
