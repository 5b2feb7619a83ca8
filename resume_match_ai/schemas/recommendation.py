"""Job preferences derived from a resume and the recommendation response envelope."""

from datetime import datetime, timezone
from typing import List, Optional

from pydantic import BaseModel, Field

from .external_job import ExternalJob
from .match_result import MatchResult


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class JobPreferences(BaseModel):
    role: str = Field(..., description="Searchable role, e.g. 'Software Engineer'")
    experience_level: str = Field(..., description="entry|junior|mid|senior|lead|executive")
    experience_years: float = Field(..., ge=0, description="Years of experience used for matching")
    skills: List[str] = Field(default_factory=list, description="Top skills from the profile")
    industry: str = Field(..., description="Primary industry")
    location: str = Field(default="", description="Preferred location")


class ScoredJob(BaseModel):
    job: ExternalJob
    relevance_score: int = Field(..., ge=0, le=100)
    match_reasons: List[str] = Field(default_factory=list)
    match: Optional[MatchResult] = Field(default=None, description="Full breakdown behind relevance_score")


class RecommendationList(BaseModel):
    count: int = 0
    jobs: List[ScoredJob] = Field(default_factory=list)
    average_relevance_score: int = 0


class RecommendationAnalysis(BaseModel):
    extracted_role: str
    experience_level: str
    experience_years: float
    skills: List[str] = Field(default_factory=list)
    industry: str
    location: str = ""
    parsing_model: Optional[str] = None
    parsing_confidence: float = 0.0


class RecommendationMetadata(BaseModel):
    source: str = Field(..., description="Job source name, or 'error'")
    requested_at: datetime = Field(default_factory=_utcnow)
    location: Optional[str] = None
    error: Optional[str] = None


class RecommendationEnvelope(BaseModel):
    """Always well formed: failures set success=False and leave recommendation fields empty."""

    success: bool
    error: Optional[str] = None
    processing_time_seconds: float = 0.0
    analysis: Optional[RecommendationAnalysis] = None
    search_keywords: List[str] = Field(default_factory=list)
    recommendations: RecommendationList = Field(default_factory=RecommendationList)
    metadata: RecommendationMetadata
    timestamp: datetime = Field(default_factory=_utcnow)
