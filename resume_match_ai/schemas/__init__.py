"""Schema exports."""

from .cv_profile import (
    CandidateProfile,
    CertificationEntry,
    EducationEntry,
    ExperienceEntry,
    LanguageEntry,
    ParsingError,
    ParsingMetadata,
    ProfileLocation,
    ProjectEntry,
)
from .external_job import ExternalJob
from .job_posting import ExperienceRange, JobPosting
from .match_result import (
    ExperienceMatch,
    GapReport,
    LocationMatch,
    MatchResult,
    RankedRecommendations,
    ScoreBreakdown,
    ScoringMode,
    SkillGapEntry,
    SkillMatch,
)
from .recommendation import (
    JobPreferences,
    RecommendationAnalysis,
    RecommendationEnvelope,
    RecommendationList,
    RecommendationMetadata,
    ScoredJob,
)

__all__ = [
    "CandidateProfile",
    "CertificationEntry",
    "EducationEntry",
    "ExperienceEntry",
    "LanguageEntry",
    "ParsingError",
    "ParsingMetadata",
    "ProfileLocation",
    "ProjectEntry",
    "ExternalJob",
    "ExperienceRange",
    "JobPosting",
    "ExperienceMatch",
    "GapReport",
    "LocationMatch",
    "MatchResult",
    "RankedRecommendations",
    "ScoreBreakdown",
    "ScoringMode",
    "SkillGapEntry",
    "SkillMatch",
    "JobPreferences",
    "RecommendationAnalysis",
    "RecommendationEnvelope",
    "RecommendationList",
    "RecommendationMetadata",
    "ScoredJob",
]
