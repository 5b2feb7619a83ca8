"""Job posting schema consumed by the matching engine (never mutated)."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ExperienceRange(BaseModel):
    model_config = ConfigDict(frozen=True)

    min: Optional[float] = Field(default=None, ge=0, description="Minimum years required")
    max: Optional[float] = Field(default=None, ge=0, description="Maximum years accepted")


class JobPosting(BaseModel):
    """Job from the corpus: title, location, required skills and experience bounds."""

    model_config = ConfigDict(frozen=True)

    id: Optional[str] = Field(default=None, description="Corpus identifier")
    title: str = Field(default="", description="Job title")
    company: Optional[str] = Field(default=None, description="Company or employer name")
    location: Optional[str] = Field(default=None, description="Free-text job location")
    description: Optional[str] = Field(default=None, description="Job description")
    required_skills: List[str] = Field(default_factory=list, description="Required skills")
    experience: Optional[ExperienceRange] = Field(default=None, description="Experience bounds in years")
    status: str = Field(default="active", description="active|closed|draft")
