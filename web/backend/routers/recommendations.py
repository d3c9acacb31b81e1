#!/usr/bin/env python3
"""
Recommendation endpoints - top jobs, top resources and the dashboard.
"""

import logging
from fastapi import APIRouter, Depends, Request

from ..dependencies import get_match_service
from ..services.match_service import MatchService
from ..models.requests import (
    JobRecommendationRequest,
    ResourceRecommendationRequest,
    DashboardRequest
)
from ..models.responses import (
    RecommendedJobsResponse,
    RecommendedResourcesResponse,
    DashboardResponse
)
from .rate_limit import limiter

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["recommendations"])


@router.post("/recommendations/jobs", response_model=RecommendedJobsResponse)
def recommend_jobs(
    body: JobRecommendationRequest,
    service: MatchService = Depends(get_match_service)
):
    """
    Recommend the best matching jobs for a profile.

    Only jobs with a positive score are returned, highest first.
    """
    return service.recommend_jobs(body)


@router.post("/recommendations/resources", response_model=RecommendedResourcesResponse)
def recommend_resources(
    body: ResourceRecommendationRequest,
    service: MatchService = Depends(get_match_service)
):
    """Recommend learning resources with a positive score, highest first."""
    return service.recommend_resources(body)


@router.post("/dashboard", response_model=DashboardResponse)
@limiter.limit("30/minute")
def dashboard(
    request: Request,
    body: DashboardRequest,
    service: MatchService = Depends(get_match_service)
):
    """
    Build the dashboard view for a profile.

    Includes counts, the best jobs, recommended courses and a preview of
    the first weeks of the learning roadmap.
    """
    return service.dashboard(body)
