"""Structured candidate profile extracted from an uploaded resume (PDF/DOCX/DOC/TXT)."""

from typing import List, Optional

from pydantic import BaseModel, Field


class ProfileLocation(BaseModel):
    address: Optional[str] = Field(default=None, description="Full address if available")
    city: Optional[str] = Field(default=None, description="City name")
    state: Optional[str] = Field(default=None, description="State or province")
    country: Optional[str] = Field(default=None, description="Country")
    postal_code: Optional[str] = Field(default=None, description="Postal or ZIP code")


class ExperienceEntry(BaseModel):
    job_title: Optional[str] = Field(default=None, description="Job title")
    company: Optional[str] = Field(default=None, description="Company name")
    location: Optional[str] = Field(default=None, description="Job location")
    start_date: Optional[str] = Field(default=None, description="Start date as written in the resume")
    end_date: Optional[str] = Field(default=None, description="End date or 'Present'")
    current: bool = Field(default=False, description="True if this is the current position")
    description: Optional[str] = Field(default=None, description="Free-text role description")
    responsibilities: List[str] = Field(default_factory=list, description="Key responsibilities")
    achievements: List[str] = Field(default_factory=list, description="Notable achievements")


class EducationEntry(BaseModel):
    degree: Optional[str] = Field(default=None, description="Degree title")
    institution: Optional[str] = Field(default=None, description="Institution name")
    field_of_study: Optional[str] = Field(default=None, description="Field of study")
    start_year: Optional[int] = Field(default=None, description="Start year")
    end_year: Optional[int] = Field(default=None, description="End year")
    grade: Optional[str] = Field(default=None, description="GPA or grade if mentioned")
    ongoing: bool = Field(default=False, description="True if still studying")


class ProjectEntry(BaseModel):
    title: Optional[str] = Field(default=None, description="Project name")
    description: Optional[str] = Field(default=None, description="Project description")
    technologies: List[str] = Field(default_factory=list, description="Technologies used")
    start_date: Optional[str] = Field(default=None, description="Start date")
    end_date: Optional[str] = Field(default=None, description="End date")
    url: Optional[str] = Field(default=None, description="Project URL")
    github: Optional[str] = Field(default=None, description="GitHub repository URL")


class CertificationEntry(BaseModel):
    name: Optional[str] = Field(default=None, description="Certification name")
    issuer: Optional[str] = Field(default=None, description="Issuing organization")
    issue_date: Optional[str] = Field(default=None, description="Issue date")
    expiry_date: Optional[str] = Field(default=None, description="Expiry date if applicable")
    credential_id: Optional[str] = Field(default=None, description="Credential ID")
    url: Optional[str] = Field(default=None, description="Verification URL")


class LanguageEntry(BaseModel):
    language: Optional[str] = Field(default=None, description="Language name")
    proficiency: str = Field(default="intermediate", description="basic|intermediate|advanced|native|fluent")


class ParsingError(BaseModel):
    field: str = Field(..., description="Profile field the problem relates to, or 'general'")
    error: str = Field(..., description="Human-readable description")
    severity: str = Field(default="low", description="low|medium|high")


class ParsingMetadata(BaseModel):
    model: Optional[str] = Field(default=None, description="Model name or 'basic_parser'")
    confidence: float = Field(default=0.0, ge=0.0, le=1.0, description="Extraction confidence in [0, 1]")
    errors: List[ParsingError] = Field(default_factory=list, description="Non-fatal parsing problems")


class CandidateProfile(BaseModel):
    """Structured resume data, always produced through the cleaning step."""

    name: Optional[str] = Field(default=None, description="Full name of the candidate")
    email: Optional[str] = Field(default=None, description="Validated, lower-cased email")
    phone: Optional[str] = Field(default=None, description="Phone number as written")
    location: ProfileLocation = Field(default_factory=ProfileLocation, description="Candidate location")
    summary: Optional[str] = Field(default=None, description="Professional summary or objective")
    skills: List[str] = Field(default_factory=list, description="Skills (trimmed, non-empty, at most 50)")
    experience: List[ExperienceEntry] = Field(default_factory=list, description="Work history")
    education: List[EducationEntry] = Field(default_factory=list, description="Education history")
    projects: List[ProjectEntry] = Field(default_factory=list, description="Projects")
    certifications: List[CertificationEntry] = Field(default_factory=list, description="Certifications")
    languages: List[LanguageEntry] = Field(default_factory=list, description="Spoken languages")
    total_experience_years: float = Field(default=0, ge=0, le=50, description="Total years of experience")
    current_role: Optional[str] = Field(default=None, description="Current job title")
    current_company: Optional[str] = Field(default=None, description="Current company name")
    linkedin: Optional[str] = Field(default=None, description="LinkedIn profile URL")
    github: Optional[str] = Field(default=None, description="GitHub profile URL")
    portfolio: Optional[str] = Field(default=None, description="Portfolio website URL")
    parsing: ParsingMetadata = Field(default_factory=ParsingMetadata, description="Parsing model, confidence, errors")
