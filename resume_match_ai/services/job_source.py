"""Job corpus collaborators: an in-memory corpus and a SerpAPI (Google Search) source."""

import asyncio
import re
from abc import ABC, abstractmethod
from typing import Any, Iterable, List, Optional, Tuple

import httpx

from resume_match_ai.config import AVAILABLE_SOURCES, HTTP_TIMEOUT_SECONDS, LEVEL_EXPERIENCE_RANGES, SERPAPI_KEY
from resume_match_ai.schemas.external_job import ExternalJob
from resume_match_ai.schemas.recommendation import JobPreferences
from resume_match_ai.utils.helpers import contains_term, normalize_url
from resume_match_ai.utils.logger import get_logger

logger = get_logger(__name__)

SERPAPI_BASE = "https://serpapi.com/search"

# Trailing site name in search result titles, e.g. "... | LinkedIn", "... - Indeed.com"
_SITE_SUFFIX = re.compile(r"\s*[|\-–]\s*(linkedin|indeed(\.com)?|glassdoor)\s*$", re.IGNORECASE)

# Whole-word markers, checked in order; first hit wins
_TITLE_LEVELS: Tuple[Tuple[Tuple[str, ...], str], ...] = (
    (("head of", "vp", "vice president", "chief"), "executive"),
    (("senior", "sr."), "senior"),
    (("lead", "principal", "staff", "director"), "lead"),
    (("junior", "jr.", "associate"), "junior"),
    (("intern", "entry level", "entry-level", "graduate", "fresher"), "entry"),
)


class JobSource(ABC):
    """Anything that can return external jobs for a set of preferences."""

    name: str = "unknown"

    @abstractmethod
    async def search(self, preferences: JobPreferences, keywords: List[str], limit: int) -> List[ExternalJob]:
        ...


def map_seniority_level(level: Optional[str]) -> Optional[str]:
    """
    Map a source's seniority label (LinkedIn style) onto entry..executive.
    Labels already on that scale pass through; unknown labels map to mid.
    """
    if not level or not level.strip():
        return None
    level_lower = level.strip().lower()
    if level_lower in LEVEL_EXPERIENCE_RANGES:
        return level_lower
    if "entry" in level_lower:
        return "entry"
    if "associate" in level_lower:
        return "junior"
    if "mid" in level_lower:
        return "mid"
    if "senior" in level_lower:
        return "senior"
    if "director" in level_lower:
        return "lead"
    if "executive" in level_lower:
        return "executive"
    return "mid"


def infer_level_from_title(title: str) -> Optional[str]:
    for markers, level in _TITLE_LEVELS:
        if any(contains_term(title, m) for m in markers):
            return level
    return None


class InMemoryJobSource(JobSource):
    """Serves a fixed list of jobs, keeping those that mention any search keyword."""

    name = "in_memory"

    def __init__(self, jobs: Optional[Iterable[ExternalJob]] = None):
        self._jobs: List[ExternalJob] = list(jobs or [])

    async def search(self, preferences: JobPreferences, keywords: List[str], limit: int) -> List[ExternalJob]:
        terms = [k.lower() for k in keywords if k and k.strip()]
        result = []
        for job in self._jobs:
            if len(result) >= limit:
                break
            haystack = " ".join([job.title, job.description, " ".join(job.skills)]).lower()
            if not terms or any(t in haystack for t in terms):
                result.append(job)
        logger.info("In-memory source matched %s of %s jobs", len(result), len(self._jobs))
        return result


def _is_job_like(url: str, title: str, snippet: str) -> bool:
    """Filter out obvious non-job pages (login, feed, generic)."""
    url_lower = url.lower()
    if "/login" in url_lower or "/auth" in url_lower or "/feed" in url_lower:
        return False
    if "linkedin.com" in url_lower and "/jobs/" in url_lower:
        return True
    if "indeed.com" in url_lower and ("/viewjob" in url_lower or "/job/" in url_lower or "/jobs" in url_lower):
        return True
    if "glassdoor.com" in url_lower and ("/job/" in url_lower or "/job-listing" in url_lower):
        return True
    job_keywords = ("job", "hiring", "position", "recruit", "engineer", "developer", "role", "vacancy")
    text = f"{title} {snippet}".lower()
    return any(kw in text for kw in job_keywords)


def split_result_title(raw_title: str) -> Tuple[str, Optional[str]]:
    """
    Split a search result title into (job title, company).
    Handles "Acme hiring Data Engineer in Pune" and "Data Engineer - Acme".
    """
    title = _SITE_SUFFIX.sub("", (raw_title or "").strip())
    hiring = re.match(r"^(?P<company>.+?)\s+hiring\s+(?P<title>.+?)(?:\s+in\s+.+)?$", title, re.IGNORECASE)
    if hiring:
        return hiring.group("title").strip(), hiring.group("company").strip()
    parts = [p.strip() for p in re.split(r"\s+[-–|]\s+", title) if p.strip()]
    if len(parts) >= 2:
        return parts[0], parts[1]
    return title, None


def _parse_organic_result(item: dict, source_key: str, searched_location: str = "") -> Optional[ExternalJob]:
    """Build an ExternalJob from one SerpAPI organic result, or None if it is not a job page."""
    link = item.get("link") or item.get("url")
    if not link:
        return None
    raw_title = item.get("title") or ""
    snippet = item.get("snippet") or item.get("description") or ""
    if not _is_job_like(link, raw_title, snippet):
        return None
    title, company = split_result_title(raw_title)
    return ExternalJob(
        source=source_key,
        url=link,
        title=title[:500] or "Unknown Position",
        company=company or "Unknown Company",
        location=searched_location,
        description=snippet[:1000],
        experience_level=infer_level_from_title(title),
    )


def build_search_queries(
    job_title: str,
    locations: List[str],
    selected_sources: Optional[List[str]] = None,
) -> List[Tuple[str, str, str]]:
    """Build (source_key, location, query) for each location x source combination."""
    qt = (job_title or "").strip() or "job"
    sources = selected_sources if selected_sources is not None else list(AVAILABLE_SOURCES)
    result = []
    for loc in locations:
        loc = (loc or "").strip()
        for key in sources:
            if key not in AVAILABLE_SOURCES:
                continue
            query = AVAILABLE_SOURCES[key]["query_pattern"].format(job_title=qt, location=loc)
            result.append((key, loc, query))
    return result


async def search_serp(
    client: httpx.AsyncClient,
    query: str,
    api_key: str,
    num: int = 10,
    source_key: str = "unknown",
    searched_location: str = "",
) -> List[ExternalJob]:
    """Run one SerpAPI Google search and return the job-like organic results."""
    params: dict = {
        "q": query,
        "api_key": api_key,
        "num": min(100, max(10, num)),
        "engine": "google",
    }
    try:
        response = await client.get(SERPAPI_BASE, params=params)
        response.raise_for_status()
        data: Any = response.json()
    except httpx.HTTPStatusError as e:
        logger.error("SerpAPI HTTP error: %s %s", e.response.status_code, e.response.text[:200])
        return []
    except (httpx.HTTPError, ValueError) as e:
        logger.exception("SerpAPI request failed: %s", e)
        return []
    if not isinstance(data, dict):
        logger.error("SerpAPI returned %s instead of an object", type(data).__name__)
        return []

    jobs = []
    for item in data.get("organic_results") or []:
        job = _parse_organic_result(item, source_key, searched_location)
        if job:
            jobs.append(job)
    logger.info("SerpAPI query '%s' returned %s jobs", query[:50], len(jobs))
    return jobs


class SerpJobSource(JobSource):
    """Searches job boards through SerpAPI site: queries, one per configured source."""

    name = "serpapi"

    def __init__(
        self,
        api_key: Optional[str] = None,
        sources: Optional[List[str]] = None,
        timeout: float = HTTP_TIMEOUT_SECONDS,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key if api_key is not None else SERPAPI_KEY
        self.sources = sources
        self.timeout = timeout
        self.transport = transport

    async def search(self, preferences: JobPreferences, keywords: List[str], limit: int) -> List[ExternalJob]:
        if not self.api_key:
            logger.error("SERPAPI_KEY is not set")
            return []
        queries = build_search_queries(preferences.role, [preferences.location], self.sources)
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            batches = await asyncio.gather(
                *[
                    search_serp(client, query, self.api_key, num=limit, source_key=key, searched_location=loc)
                    for key, loc, query in queries
                ]
            )

        seen = set()
        jobs: List[ExternalJob] = []
        for batch in batches:
            for job in batch:
                key = normalize_url(job.url)
                if key in seen:
                    continue
                seen.add(key)
                jobs.append(job)
        logger.info("SerpAPI source: %s queries, %s unique jobs", len(queries), len(jobs))
        return jobs[:limit]
