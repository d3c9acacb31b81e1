#!/usr/bin/env python3
"""
Match service - business logic for match and recommendation endpoints.

Converts validated request models into matcher inputs and matcher results
into response models. All scoring goes through core.matcher.
"""

import logging

from core.config_loader import AppConfig
from core.matcher import (
    CandidateProfile, JobPosting, ResourcePosting, MatchResult, ResourceMatchResult,
    calculate_job_match, calculate_resource_match
)
from core.recommendations import (
    RankedJob, RankedResource,
    match_jobs, recommend_jobs, recommend_resources, build_dashboard,
    get_preset, build_policy
)
from ..models.requests import (
    JobMatchRequest,
    JobsMatchRequest,
    ResourceMatchRequest,
    JobRecommendationRequest,
    ResourceRecommendationRequest,
    DashboardRequest
)
from ..models.responses import (
    LevelMatchModel,
    JobMatchModel,
    ResourceMatchModel,
    JobDetails,
    ResourceDetails,
    MatchedJob,
    MatchedResource,
    ProfileSummary,
    JobMatchResponse,
    JobsMatchResponse,
    ResourceMatchResponse,
    RecommendedJobsResponse,
    RecommendedResourcesResponse,
    DashboardStats,
    DashboardData,
    DashboardResponse
)

logger = logging.getLogger(__name__)


def to_job_details(job: JobPosting) -> JobDetails:
    return JobDetails(**job.to_dict())


def to_resource_details(resource: ResourcePosting) -> ResourceDetails:
    return ResourceDetails(**resource.to_dict())


def to_profile_summary(profile: CandidateProfile) -> ProfileSummary:
    return ProfileSummary(
        name=profile.name,
        skills=list(profile.skills),
        experience_level=profile.experience_level,
        preferred_track=profile.preferred_track
    )


def to_job_match_model(result: MatchResult) -> JobMatchModel:
    return JobMatchModel(
        score=result.score,
        match_percentage=result.match_percentage,
        skill_score=result.skill_score,
        matched_skills=result.matched_skills,
        missing_skills=result.missing_skills,
        experience_match=LevelMatchModel(
            matched=result.experience_match.matched,
            score=result.experience_match.score
        ),
        track_match=LevelMatchModel(
            matched=result.track_match.matched,
            score=result.track_match.score
        ),
        reasons=result.reasons
    )


def to_resource_match_model(result: ResourceMatchResult) -> ResourceMatchModel:
    return ResourceMatchModel(**result.to_dict())


def to_matched_job(ranked: RankedJob) -> MatchedJob:
    return MatchedJob(job=to_job_details(ranked.job), match=to_job_match_model(ranked.match))


def to_matched_resource(ranked: RankedResource) -> MatchedResource:
    return MatchedResource(
        resource=to_resource_details(ranked.resource),
        match=to_resource_match_model(ranked.match)
    )


class MatchService:
    """Service for scoring candidates against jobs and resources."""

    def __init__(self, config: AppConfig):
        self.config = config
        self.matching = config.matching

    def match_job(self, request: JobMatchRequest) -> JobMatchResponse:
        job = request.job.to_posting()
        result = calculate_job_match(request.profile.to_profile(), job, self.matching)
        return JobMatchResponse(
            success=True,
            job=to_job_details(job),
            match=to_job_match_model(result)
        )

    def match_jobs(self, request: JobsMatchRequest) -> JobsMatchResponse:
        """
        Score, rank and filter a batch of jobs.

        The configured result policy (or a named preset) supplies defaults;
        min_score and limit in the request override it.

        Raises:
            InvalidPolicyException: If the preset name is unknown.
        """
        profile = request.profile.to_profile()
        jobs = [j.to_posting() for j in request.jobs]

        base_policy = (
            get_preset(request.preset) if request.preset
            else self.config.recommendations.result_policy
        )
        policy = build_policy(base_policy, min_score=request.min_score, top_k=request.limit)

        listing = match_jobs(
            profile,
            jobs,
            job_filter=request.filters.to_filter() if request.filters else None,
            policy=policy,
            config=self.matching
        )

        return JobsMatchResponse(
            success=True,
            jobs=[to_matched_job(r) for r in listing.results],
            total_jobs=listing.total_jobs,
            matched_jobs=listing.matched_jobs,
            user=to_profile_summary(profile)
        )

    def match_resource(self, request: ResourceMatchRequest) -> ResourceMatchResponse:
        resource = request.resource.to_posting()
        result = calculate_resource_match(request.profile.to_profile(), resource, self.matching)
        return ResourceMatchResponse(
            success=True,
            resource=to_resource_details(resource),
            match=to_resource_match_model(result)
        )

    def recommend_jobs(self, request: JobRecommendationRequest) -> RecommendedJobsResponse:
        limit = request.limit or self.config.recommendations.job_limit
        ranked = recommend_jobs(
            request.profile.to_profile(),
            [j.to_posting() for j in request.jobs],
            limit=limit,
            config=self.matching
        )
        return RecommendedJobsResponse(
            success=True,
            count=len(ranked),
            jobs=[to_matched_job(r) for r in ranked]
        )

    def recommend_resources(self, request: ResourceRecommendationRequest) -> RecommendedResourcesResponse:
        limit = request.limit or self.config.recommendations.resource_limit
        ranked = recommend_resources(
            request.profile.to_profile(),
            [r.to_posting() for r in request.resources],
            limit=limit,
            config=self.matching
        )
        return RecommendedResourcesResponse(
            success=True,
            count=len(ranked),
            resources=[to_matched_resource(r) for r in ranked]
        )

    def dashboard(self, request: DashboardRequest) -> DashboardResponse:
        profile = request.profile.to_profile()
        summary = build_dashboard(
            profile,
            [j.to_posting() for j in request.jobs],
            [r.to_posting() for r in request.resources],
            roadmap=request.roadmap,
            limit=self.config.recommendations.dashboard_limit,
            config=self.matching
        )

        return DashboardResponse(
            success=True,
            data=DashboardData(
                user=to_profile_summary(profile),
                stats=DashboardStats(
                    skills_count=summary.skills_count,
                    missing_skills_count=summary.missing_skills_count
                ),
                best_jobs=[to_matched_job(r) for r in summary.best_jobs],
                recommended_courses=[to_matched_resource(r) for r in summary.recommended_resources],
                roadmap_preview=summary.roadmap_preview
            )
        )
