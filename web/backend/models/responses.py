#!/usr/bin/env python3
"""
Response models for API endpoints.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional


class LevelMatchModel(BaseModel):
    matched: bool
    score: int = Field(ge=0, le=100)


class JobMatchModel(BaseModel):
    """Score breakdown of a job match."""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "score": 75,
                "match_percentage": "75%",
                "skill_score": 66.67,
                "matched_skills": ["React.js", "Node"],
                "missing_skills": ["TypeScript"],
                "experience_match": {"matched": True, "score": 100},
                "track_match": {"matched": True, "score": 75},
                "reasons": [
                    "Matches 2 out of 3 required skills: React.js, Node",
                    "Missing: TypeScript",
                    "Experience level aligned",
                    "Fits your preferred track: Frontend"
                ]
            }
        }
    )

    score: int = Field(ge=0, le=100)
    match_percentage: str
    skill_score: float = Field(ge=0, le=100)
    matched_skills: List[str]
    missing_skills: List[str]
    experience_match: LevelMatchModel
    track_match: LevelMatchModel
    reasons: List[str]


class ResourceMatchModel(BaseModel):
    score: int = Field(ge=0, le=100)
    skill_score: float = Field(ge=0, le=100)
    matched_skills: List[str]
    missing_skills: List[str]
    track_match: bool
    reason: str


class JobDetails(BaseModel):
    """Details of a job posting."""
    id: Optional[str]
    title: str
    company: str
    location: Optional[str]
    required_skills: List[str]
    experience_level: Optional[str]
    job_type: Optional[str]
    track: Optional[str]
    description: Optional[str]
    salary: Optional[str]


class ResourceDetails(BaseModel):
    """Details of a learning resource."""
    id: Optional[str]
    title: str
    platform: Optional[str]
    url: Optional[str]
    related_skills: List[str]
    cost: Optional[str]
    level: Optional[str]
    description: Optional[str]
    duration: Optional[str]
    rating: Optional[float]


class MatchedJob(BaseModel):
    job: JobDetails
    match: JobMatchModel


class MatchedResource(BaseModel):
    resource: ResourceDetails
    match: ResourceMatchModel


class ProfileSummary(BaseModel):
    name: Optional[str]
    skills: List[str]
    experience_level: Optional[str]
    preferred_track: Optional[str]


class JobMatchResponse(BaseModel):
    success: bool
    job: JobDetails
    match: JobMatchModel


class JobsMatchResponse(BaseModel):
    """Ranked job matches for a candidate."""
    success: bool
    jobs: List[MatchedJob]
    total_jobs: int
    matched_jobs: int
    user: ProfileSummary


class ResourceMatchResponse(BaseModel):
    success: bool
    resource: ResourceDetails
    match: ResourceMatchModel


class RecommendedJobsResponse(BaseModel):
    success: bool
    count: int
    jobs: List[MatchedJob]


class RecommendedResourcesResponse(BaseModel):
    success: bool
    count: int
    resources: List[MatchedResource]


class DashboardStats(BaseModel):
    skills_count: int
    missing_skills_count: int


class DashboardData(BaseModel):
    user: ProfileSummary
    stats: DashboardStats
    best_jobs: List[MatchedJob]
    recommended_courses: List[MatchedResource]
    roadmap_preview: str


class DashboardResponse(BaseModel):
    success: bool
    data: DashboardData


class JobGapData(BaseModel):
    job: JobDetails
    matched_skills: List[str]
    missing_skills: List[str]
    recommended_resources: List[ResourceDetails]


class SkillGapResponse(BaseModel):
    success: bool
    data: JobGapData


class SkillGapItem(BaseModel):
    skill: str
    frequency: int
    priority: str
    related_jobs: int


class SkillGapSummaryModel(BaseModel):
    total_jobs_analyzed: int
    total_skills_required: int
    skills_you_have: int
    skills_to_learn: int
    average_match_score: int = Field(ge=0, le=100)


class SkillGapAnalysisData(BaseModel):
    user: ProfileSummary
    overall_skill_gaps: List[SkillGapItem]
    track_specific_gaps: List[SkillGapItem]
    high_priority_skills: List[str]
    medium_priority_skills: List[str]
    recommended_resources: List[ResourceDetails]
    summary: SkillGapSummaryModel


class SkillGapAnalysisResponse(BaseModel):
    success: bool
    data: SkillGapAnalysisData


class MessageModel(BaseModel):
    role: str
    text: str
    created_at: str


class ConversationModel(BaseModel):
    conversation_id: str
    message_count: int
    last_message_at: Optional[str]


class Pagination(BaseModel):
    page: int
    limit: int
    total: int
    pages: int


class SessionHistoryResponse(BaseModel):
    success: bool
    conversation_id: str
    messages: List[MessageModel]
    pagination: Pagination


class ConversationsResponse(BaseModel):
    success: bool
    conversations: List[ConversationModel]


class MessageResponse(BaseModel):
    success: bool
    conversation_id: str
    message: MessageModel
    message_count: int


class ClearSessionsResponse(BaseModel):
    success: bool
    deleted_count: int
    message: str
