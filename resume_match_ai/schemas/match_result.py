"""Match results, ranked recommendation lists and skills-gap reports. Always computed fresh."""

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from .job_posting import JobPosting


class ScoringMode(str, Enum):
    LIST_RANKING = "list_ranking"
    SINGLE_JOB = "single_job"


class SkillMatch(BaseModel):
    percentage: int = Field(default=0, ge=0, le=100, description="Share of required skills matched")
    matched_skills: List[str] = Field(default_factory=list, description="Required skills matched (lowercase)")
    missing_skills: List[str] = Field(default_factory=list, description="Required skills not matched (lowercase)")
    total_required: int = Field(default=0, description="Number of required skills")
    total_matched: int = Field(default=0, description="Number of matched required skills")


class ExperienceMatch(BaseModel):
    matches: bool = Field(..., description="True if the candidate meets the requirement (or is overqualified)")
    reason: str = Field(..., description="Explanation shown to the candidate")
    gap: Optional[float] = Field(default=None, description="Missing years when under the minimum")


class LocationMatch(BaseModel):
    matches: bool = Field(default=False, description="True on city match")
    same_state: bool = Field(default=False, description="True on city, state or regional match")
    reason: str = Field(default="", description="Explanation shown to the candidate")


class ScoreBreakdown(BaseModel):
    skills: int = Field(default=0, description="Skill component (rounded)")
    experience: int = Field(default=0, description="Experience component (rounded)")
    location: int = Field(default=0, description="Location component (rounded, 0 in single-job mode)")


class MatchResult(BaseModel):
    """Explainable comparison between one candidate profile and one job posting."""

    job: JobPosting = Field(..., description="Scored job")
    mode: ScoringMode = Field(..., description="Weighting mode used for overall_score")
    skill_match: SkillMatch
    experience_match: ExperienceMatch
    location_match: LocationMatch
    overall_score: int = Field(..., ge=0, le=100, description="Composite score")
    rating: str = Field(..., description="Excellent|Good|Fair|Poor")
    recommendation: str = Field(default="", description="Advice sentence for the rating band")
    breakdown: ScoreBreakdown


class RankedRecommendations(BaseModel):
    recommendations: List[MatchResult] = Field(default_factory=list, description="Sorted, score-floor filtered")
    total_found: int = Field(default=0, description="Jobs above the score floor before truncation")
    match_basis: Dict[str, Any] = Field(default_factory=dict, description="Profile signals used for matching")
    message: Optional[str] = Field(default=None, description="Explanation when nothing could be ranked")
    algorithm: str = Field(default="weighted_list_ranking")


class SkillGapEntry(BaseModel):
    skill: str = Field(..., description="Skill as first spelled in the job sample")
    demand_count: int = Field(..., description="Number of sampled jobs requiring it")
    percentage: int = Field(..., description="Share of sampled jobs requiring it")


class GapReport(BaseModel):
    current_skills: List[str] = Field(default_factory=list)
    missing_skills: List[SkillGapEntry] = Field(default_factory=list, description="Most demanded first")
    total_jobs_analyzed: int = 0
    total_skills_required: int = 0
    skills_you_have: int = 0
    skills_to_learn: int = 0
    completion_percentage: int = Field(default=0, description="Share of required skills already covered")
    target_role: str = Field(default="All roles")
