"""Job recommendations from raw resume text."""

from .orchestrator import adapt_external_job, get_recommendations, get_recommendations_async, match_reasons
from .preferences import derive_preferences, generate_search_keywords, level_for_years, validate_resume_text

__all__ = [
    "adapt_external_job",
    "derive_preferences",
    "generate_search_keywords",
    "get_recommendations",
    "get_recommendations_async",
    "level_for_years",
    "match_reasons",
    "validate_resume_text",
]
