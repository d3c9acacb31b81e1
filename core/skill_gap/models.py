#!/usr/bin/env python3
"""
Skill Gap Models.
"""

from dataclasses import dataclass, field
from typing import List, Literal

from core.matcher.models import JobPosting, ResourcePosting

Priority = Literal["high", "medium", "low"]


@dataclass(frozen=True)
class SkillGap:
    """A skill missing across analysed jobs."""
    skill: str
    frequency: int  # Jobs missing this skill
    priority: Priority
    related_jobs: int


@dataclass
class JobGapResult:
    """Gap between a candidate and a single job."""
    job: JobPosting
    matched_skills: List[str] = field(default_factory=list)
    missing_skills: List[str] = field(default_factory=list)
    recommended_resources: List[ResourcePosting] = field(default_factory=list)


@dataclass(frozen=True)
class SkillGapSummary:
    total_jobs_analyzed: int
    total_skills_required: int
    skills_you_have: int
    skills_to_learn: int
    average_match_score: int


@dataclass
class SkillGapAnalysis:
    """Aggregate gaps across many jobs."""
    summary: SkillGapSummary
    overall_gaps: List[SkillGap] = field(default_factory=list)
    track_specific_gaps: List[SkillGap] = field(default_factory=list)
    recommended_resources: List[ResourcePosting] = field(default_factory=list)
