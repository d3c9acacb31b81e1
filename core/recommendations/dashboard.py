#!/usr/bin/env python3
"""
Dashboard summary for a job seeker.
"""

import re
from typing import Optional, Sequence

from core.config_loader import MatchingConfig
from core.matcher import CandidateProfile, JobPosting, ResourcePosting
from core.recommendations.models import DashboardSummary
from core.recommendations.service import recommend_jobs, recommend_resources

WEEK_HEADING = re.compile(r"^##?\s*Week\s*\d+", re.IGNORECASE)
PREVIEW_WEEKS = 2


def roadmap_preview(roadmap: Optional[str], weeks: int = PREVIEW_WEEKS) -> str:
    """
    Lines of the first `weeks` "# Week N" / "## Week N" sections of a markdown
    roadmap. Text before the first week heading is skipped.
    """
    if not roadmap:
        return ""

    week_count = 0
    preview_lines = []
    for line in roadmap.split("\n"):
        if WEEK_HEADING.match(line):
            week_count += 1
            if week_count > weeks:
                break
        if week_count > 0:
            preview_lines.append(line)

    return "\n".join(preview_lines)


def build_dashboard(
    profile: CandidateProfile,
    jobs: Sequence[JobPosting],
    resources: Sequence[ResourcePosting],
    roadmap: Optional[str] = None,
    limit: int = 3,
    config: Optional[MatchingConfig] = None
) -> DashboardSummary:
    best_jobs = recommend_jobs(profile, jobs, limit=limit, config=config)
    courses = recommend_resources(profile, resources, limit=limit, config=config)

    missing_skills_count = len(best_jobs[0].match.missing_skills) if best_jobs else 0

    return DashboardSummary(
        skills_count=len(profile.skills),
        missing_skills_count=missing_skills_count,
        best_jobs=best_jobs,
        recommended_resources=courses,
        roadmap_preview=roadmap_preview(roadmap)
    )
