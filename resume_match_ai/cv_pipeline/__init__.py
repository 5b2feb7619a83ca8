"""CV pipeline: text extraction (PDF/DOCX/DOC/TXT), AI + heuristic profile extraction, cleaning."""

from .ai_client import AICompletionClient, CompletionClient
from .cv_extractor import extract_candidate_profile, extract_candidate_profile_async
from .json_adapter import ParseResult, extract_json_object
from .profile_cleaner import clean_profile
from .text_extractor import SUPPORTED_MIME_TYPES, extract_text

__all__ = [
    "AICompletionClient",
    "CompletionClient",
    "ParseResult",
    "SUPPORTED_MIME_TYPES",
    "clean_profile",
    "extract_candidate_profile",
    "extract_candidate_profile_async",
    "extract_json_object",
    "extract_text",
]
