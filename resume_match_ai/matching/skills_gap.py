"""Skills-gap report: which skills, in demand across a job sample, the profile lacks."""

from typing import Dict, List, Optional

from resume_match_ai.config import SKILLS_GAP_SAMPLE_SIZE
from resume_match_ai.matching.scoring_engine import is_skill_covered
from resume_match_ai.schemas.cv_profile import CandidateProfile
from resume_match_ai.schemas.job_posting import JobPosting
from resume_match_ai.schemas.match_result import GapReport, SkillGapEntry
from resume_match_ai.services.filter_service import filter_active, filter_by_title
from resume_match_ai.utils.helpers import normalize_skill, round_half_up
from resume_match_ai.utils.logger import get_logger

logger = get_logger(__name__)


def analyze_skills_gap(
    profile: CandidateProfile,
    jobs: List[JobPosting],
    target_role: Optional[str] = None,
    sample_size: int = SKILLS_GAP_SAMPLE_SIZE,
) -> GapReport:
    """
    Aggregate required skills over an (optionally role-filtered) sample of active jobs and
    rank the ones the profile does not cover by how many sampled jobs ask for them.
    """
    sample = filter_by_title(filter_active(jobs), target_role)[: max(0, sample_size)]

    # Case-insensitive key -> first spelling seen; counts are per job, not per mention
    display: Dict[str, str] = {}
    frequency: Dict[str, int] = {}
    for job in sample:
        seen_in_job = set()
        for skill in job.required_skills:
            key = normalize_skill(skill)
            if not key or key in seen_in_job:
                continue
            seen_in_job.add(key)
            display.setdefault(key, skill.strip())
            frequency[key] = frequency.get(key, 0) + 1

    candidate_skills = [s for s in (normalize_skill(c) for c in profile.skills) if s]
    missing_keys = [key for key in display if not is_skill_covered(key, candidate_skills)]
    missing: List[SkillGapEntry] = [
        SkillGapEntry(
            skill=display[key],
            demand_count=frequency[key],
            percentage=round_half_up(100 * frequency[key] / len(sample)),
        )
        for key in missing_keys
    ]
    missing.sort(key=lambda e: -e.demand_count)

    total_required = len(display)
    covered = total_required - len(missing_keys)
    completion = round_half_up(100 * covered / total_required) if total_required else 0
    logger.info(
        "Skills gap: role=%s jobs=%s required=%s missing=%s",
        target_role or "all",
        len(sample),
        total_required,
        len(missing),
    )
    return GapReport(
        current_skills=list(profile.skills),
        missing_skills=missing,
        total_jobs_analyzed=len(sample),
        total_skills_required=total_required,
        skills_you_have=len(profile.skills),
        skills_to_learn=len(missing),
        completion_percentage=completion,
        target_role=(target_role or "").strip() or "All roles",
    )
