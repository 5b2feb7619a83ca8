"""Service exports."""

from .filter_service import filter_active, filter_by_title, prefilter_by_skills
from .job_source import (
    InMemoryJobSource,
    JobSource,
    SerpJobSource,
    build_search_queries,
    map_seniority_level,
    search_serp,
)

__all__ = [
    "filter_active",
    "filter_by_title",
    "prefilter_by_skills",
    "JobSource",
    "InMemoryJobSource",
    "SerpJobSource",
    "build_search_queries",
    "map_seniority_level",
    "search_serp",
]
