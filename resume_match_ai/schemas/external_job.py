"""Job shape returned by external job sources (search results, aggregators)."""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ExternalJob(BaseModel):
    """Loosely structured job from an external source; skills and level are often missing."""

    model_config = ConfigDict(frozen=True)

    source: str = Field(default="unknown", description="Source key (e.g. linkedin_job, indeed)")
    url: str = Field(default="", description="URL of the job post or page")
    title: str = Field(default="Unknown Position", description="Job title or headline")
    company: str = Field(default="Unknown Company", description="Company or employer name")
    location: str = Field(default="", description="Job location, or the location used in the search")
    description: str = Field(default="", description="Description or search snippet")
    skills: List[str] = Field(default_factory=list, description="Skills listed by the source, if any")
    experience_level: Optional[str] = Field(default=None, description="entry|junior|mid|senior|lead|executive")
    posted_at: Optional[datetime] = Field(default=None, description="Posting date if known")
