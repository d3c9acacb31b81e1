#!/usr/bin/env python3
"""
Skill gap service - per-job and aggregate gap analysis.
"""

import logging

from core.config_loader import AppConfig
from core.exceptions import JobNotFoundException
from core.skill_gap import analyze_job_gap, analyze_skill_gaps, top_priority_gaps
from ..models.requests import SkillGapRequest, SkillGapAnalyzeRequest
from ..models.responses import (
    JobGapData,
    SkillGapResponse,
    SkillGapItem,
    SkillGapSummaryModel,
    SkillGapAnalysisData,
    SkillGapAnalysisResponse
)
from .match_service import to_job_details, to_resource_details, to_profile_summary

logger = logging.getLogger(__name__)


class SkillGapService:
    """Service for skill gap analysis."""

    def __init__(self, config: AppConfig):
        self.config = config

    def analyze_job(self, request: SkillGapRequest) -> SkillGapResponse:
        """
        Gap between the profile and one job.

        Raises:
            JobNotFoundException: If job_id is not among the supplied jobs.
        """
        job = next((j for j in request.jobs if j.id == request.job_id), None)
        if job is None:
            logger.warning(f"Job {request.job_id} not among {len(request.jobs)} supplied jobs")
            raise JobNotFoundException(f"Job {request.job_id} not found")

        result = analyze_job_gap(
            request.profile.to_profile(),
            job.to_posting(),
            [r.to_posting() for r in request.resources],
            limit=self.config.skill_gap.job_resource_limit
        )

        return SkillGapResponse(
            success=True,
            data=JobGapData(
                job=to_job_details(result.job),
                matched_skills=result.matched_skills,
                missing_skills=result.missing_skills,
                recommended_resources=[to_resource_details(r) for r in result.recommended_resources]
            )
        )

    def analyze(self, request: SkillGapAnalyzeRequest) -> SkillGapAnalysisResponse:
        """
        Gaps across all supplied jobs.

        Raises:
            NoJobsFoundException: If no job is left to analyse.
        """
        profile = request.profile.to_profile()
        analysis = analyze_skill_gaps(
            profile,
            [j.to_posting() for j in request.jobs],
            [r.to_posting() for r in request.resources],
            track=None if request.analyze_all else request.track,
            config=self.config.skill_gap,
            matching_config=self.config.matching
        )
        high, medium = top_priority_gaps(analysis.overall_gaps)

        return SkillGapAnalysisResponse(
            success=True,
            data=SkillGapAnalysisData(
                user=to_profile_summary(profile),
                overall_skill_gaps=[SkillGapItem(**vars(g)) for g in analysis.overall_gaps],
                track_specific_gaps=[SkillGapItem(**vars(g)) for g in analysis.track_specific_gaps],
                high_priority_skills=high,
                medium_priority_skills=medium,
                recommended_resources=[to_resource_details(r) for r in analysis.recommended_resources],
                summary=SkillGapSummaryModel(**vars(analysis.summary))
            )
        )
