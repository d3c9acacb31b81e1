#!/usr/bin/env python3
"""
Skill gap endpoints - what a candidate is missing and what to study.
"""

import logging
from fastapi import APIRouter, Depends, Request

from ..dependencies import get_skill_gap_service
from ..services.skill_gap_service import SkillGapService
from ..models.requests import SkillGapRequest, SkillGapAnalyzeRequest
from ..models.responses import SkillGapResponse, SkillGapAnalysisResponse
from .rate_limit import limiter

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/skill-gap", tags=["skill-gap"])


@router.post("", response_model=SkillGapResponse)
def analyze_job_gap(
    body: SkillGapRequest,
    service: SkillGapService = Depends(get_skill_gap_service)
):
    """
    Skill gap for one job.

    Returns matched and missing skills plus resources that teach the
    missing ones. Responds 404 if job_id is not among the supplied jobs.
    """
    return service.analyze_job(body)


@router.post("/analyze", response_model=SkillGapAnalysisResponse)
@limiter.limit("20/minute")
def analyze_skill_gaps(
    request: Request,
    body: SkillGapAnalyzeRequest,
    service: SkillGapService = Depends(get_skill_gap_service)
):
    """
    Aggregate skill gaps across many jobs.

    Missing skills are counted over all analyzed jobs and bucketed by
    how often they appear. Restrict to one track with `track`, or set
    `analyze_all` to ignore it.
    """
    return service.analyze(body)
