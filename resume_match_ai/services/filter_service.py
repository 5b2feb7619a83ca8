"""Filter the job corpus by status, title and a coarse skill pre-filter. Never mutates the input list."""

from typing import List, Optional

from resume_match_ai.schemas.job_posting import JobPosting
from resume_match_ai.utils.helpers import normalize_skill


def filter_active(jobs: List[JobPosting]) -> List[JobPosting]:
    return [j for j in jobs if (j.status or "").lower() == "active"]


def filter_by_title(jobs: List[JobPosting], role: Optional[str]) -> List[JobPosting]:
    """
    Case-insensitive substring match of role against job title.
    If role is empty, return all jobs.
    """
    needle = (role or "").strip().lower()
    if not needle:
        return list(jobs)
    return [j for j in jobs if needle in (j.title or "").lower()]


def prefilter_by_skills(
    jobs: List[JobPosting],
    candidate_skills: List[str],
    limit: Optional[int] = None,
) -> List[JobPosting]:
    """
    Coarse keyword pre-filter: keep active jobs where some required skill contains some
    candidate skill. Imprecise by nature; callers over-fetch and score afterwards.
    """
    skills = [s for s in (normalize_skill(c) for c in candidate_skills) if s]
    if not skills:
        return []
    result: List[JobPosting] = []
    for job in filter_active(jobs):
        required = [normalize_skill(r) for r in job.required_skills]
        if any(skill in r for r in required if r for skill in skills):
            result.append(job)
            if limit is not None and len(result) >= limit:
                break
    return result
