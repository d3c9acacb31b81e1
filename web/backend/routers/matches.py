#!/usr/bin/env python3
"""
Match endpoints - score a profile against jobs and learning resources.
"""

import logging
from fastapi import APIRouter, Depends, Request

from ..dependencies import get_match_service
from ..services.match_service import MatchService
from ..models.requests import JobMatchRequest, JobsMatchRequest, ResourceMatchRequest
from ..models.responses import JobMatchResponse, JobsMatchResponse, ResourceMatchResponse
from .rate_limit import limiter

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/match", tags=["matches"])


@router.post("/job", response_model=JobMatchResponse)
def match_job(
    body: JobMatchRequest,
    service: MatchService = Depends(get_match_service)
):
    """
    Score a single job posting against a candidate profile.

    Returns the composite score, per-dimension breakdown and reasons.
    """
    return service.match_job(body)


@router.post("/jobs", response_model=JobsMatchResponse)
@limiter.limit("30/minute")
def match_jobs(
    request: Request,
    body: JobsMatchRequest,
    service: MatchService = Depends(get_match_service)
):
    """
    Filter, score and rank a batch of job postings.

    Filters apply before scoring: type, location, experience level and a
    free-text search over title, company, description and skills. The
    result policy (preset, min_score, limit) applies after ranking.
    """
    logger.info(f"Matching {len(body.jobs)} jobs")
    return service.match_jobs(body)


@router.post("/resource", response_model=ResourceMatchResponse)
def match_resource(
    body: ResourceMatchRequest,
    service: MatchService = Depends(get_match_service)
):
    """Score a single learning resource against a candidate profile."""
    return service.match_resource(body)
