#!/usr/bin/env python3
"""
Recommendation Models - ranked results and listing filters.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from core.matcher.models import JobPosting, ResourcePosting, MatchResult, ResourceMatchResult


@dataclass(frozen=True)
class JobFilter:
    """Optional listing filters. The value "all" disables a filter."""
    track: Optional[str] = None
    location: Optional[str] = None
    job_type: Optional[str] = None
    experience_level: Optional[str] = None
    search: Optional[str] = None


@dataclass(frozen=True)
class RankedJob:
    job: JobPosting
    match: MatchResult


@dataclass(frozen=True)
class RankedResource:
    resource: ResourcePosting
    match: ResourceMatchResult


@dataclass
class JobMatchListing:
    """Ranked job matches plus the counts the listing endpoint reports."""
    results: List[RankedJob] = field(default_factory=list)
    total_jobs: int = 0

    @property
    def matched_jobs(self) -> int:
        return len(self.results)


@dataclass
class DashboardSummary:
    skills_count: int = 0
    missing_skills_count: int = 0
    best_jobs: List[RankedJob] = field(default_factory=list)
    recommended_resources: List[RankedResource] = field(default_factory=list)
    roadmap_preview: str = ""
