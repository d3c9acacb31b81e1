#!/usr/bin/env python3
"""
Request models for API endpoints.

Skill lists are coerced before validation: a malformed skills field becomes
an empty list instead of failing the request, and blank entries are dropped.
"""

from pydantic import BaseModel, Field, field_validator
from typing import List, Optional, Any

from core.matcher import CandidateProfile, JobPosting, ResourcePosting
from core.matcher.normalize import coerce_skill_list
from core.recommendations import JobFilter


class ProfileInput(BaseModel):
    """Candidate profile sent by the caller."""
    name: Optional[str] = None
    skills: List[str] = Field(default_factory=list, description="Candidate skills")
    experience_level: Optional[str] = Field(None, description="Free-form level, e.g. 'Junior'")
    preferred_track: Optional[str] = Field(None, description="Career track, e.g. 'Frontend Development'")

    @field_validator("skills", mode="before")
    @classmethod
    def _coerce_skills(cls, value: Any) -> List[str]:
        return coerce_skill_list(value)

    def to_profile(self) -> CandidateProfile:
        return CandidateProfile(
            skills=list(self.skills),
            experience_level=self.experience_level,
            preferred_track=self.preferred_track,
            name=self.name
        )


class JobInput(BaseModel):
    """Job posting sent by the caller."""
    id: Optional[str] = None
    title: str = ""
    company: str = ""
    location: Optional[str] = None
    required_skills: List[str] = Field(default_factory=list)
    experience_level: Optional[str] = None
    job_type: Optional[str] = None
    track: Optional[str] = None
    description: Optional[str] = None
    salary: Optional[str] = None

    @field_validator("required_skills", mode="before")
    @classmethod
    def _coerce_skills(cls, value: Any) -> List[str]:
        return coerce_skill_list(value)

    def to_posting(self) -> JobPosting:
        return JobPosting(**self.model_dump())


class ResourceInput(BaseModel):
    """Learning resource sent by the caller."""
    id: Optional[str] = None
    title: str = ""
    platform: Optional[str] = None
    url: Optional[str] = None
    related_skills: List[str] = Field(default_factory=list)
    cost: Optional[str] = None
    level: Optional[str] = None
    description: Optional[str] = None
    duration: Optional[str] = None
    rating: Optional[float] = Field(None, ge=0, le=5)

    @field_validator("related_skills", mode="before")
    @classmethod
    def _coerce_skills(cls, value: Any) -> List[str]:
        return coerce_skill_list(value)

    def to_posting(self) -> ResourcePosting:
        return ResourcePosting(**self.model_dump())


class JobFilterInput(BaseModel):
    """Listing filters; "all" disables a filter."""
    track: Optional[str] = None
    location: Optional[str] = None
    job_type: Optional[str] = None
    experience_level: Optional[str] = None
    search: Optional[str] = None

    def to_filter(self) -> JobFilter:
        return JobFilter(**self.model_dump())


class JobMatchRequest(BaseModel):
    profile: ProfileInput
    job: JobInput


class JobsMatchRequest(BaseModel):
    profile: ProfileInput
    jobs: List[JobInput] = Field(default_factory=list)
    filters: Optional[JobFilterInput] = None
    min_score: Optional[int] = Field(None, ge=0, le=100, description="Minimum match score (0-100)")
    limit: Optional[int] = Field(None, ge=1, le=500, description="Maximum results to return")
    preset: Optional[str] = Field(None, description="Result policy preset: strict, balanced, discovery")


class ResourceMatchRequest(BaseModel):
    profile: ProfileInput
    resource: ResourceInput


class JobRecommendationRequest(BaseModel):
    profile: ProfileInput
    jobs: List[JobInput] = Field(default_factory=list)
    limit: Optional[int] = Field(None, ge=1, le=100)


class ResourceRecommendationRequest(BaseModel):
    profile: ProfileInput
    resources: List[ResourceInput] = Field(default_factory=list)
    limit: Optional[int] = Field(None, ge=1, le=100)


class DashboardRequest(BaseModel):
    profile: ProfileInput
    jobs: List[JobInput] = Field(default_factory=list)
    resources: List[ResourceInput] = Field(default_factory=list)
    roadmap: Optional[str] = Field(None, description="Markdown roadmap with '## Week N' headings")


class SkillGapRequest(BaseModel):
    """Gap against one job, selected by id out of the supplied jobs."""
    profile: ProfileInput
    job_id: str = Field(..., min_length=1, description="Id of the job to analyse")
    jobs: List[JobInput] = Field(default_factory=list)
    resources: List[ResourceInput] = Field(default_factory=list)


class SkillGapAnalyzeRequest(BaseModel):
    profile: ProfileInput
    jobs: List[JobInput] = Field(default_factory=list)
    resources: List[ResourceInput] = Field(default_factory=list)
    track: Optional[str] = Field(None, description="Only analyse jobs whose track contains this")
    analyze_all: bool = Field(False, description="Ignore the track filter")


class MessageRequest(BaseModel):
    """Message to record in a chat session."""
    role: str = Field("user", description="user, assistant or system")
    text: str = Field(..., description="Message text (trimmed, truncated)")
    conversation_id: Optional[str] = Field(None, description="Omit to start a new conversation")


class ClearSessionsRequest(BaseModel):
    conversation_id: Optional[str] = Field(None, description="Omit to clear every conversation")
