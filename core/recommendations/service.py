#!/usr/bin/env python3
"""
Recommendation Service - rank postings for a candidate.

Every ranking goes through the single Matcher; nothing here re-implements
scoring. Sorting is stable, so ties keep the caller's posting order.
"""

from typing import List, Optional, Sequence
import logging

from core.config_loader import MatchingConfig, ResultPolicy
from core.matcher import (
    CandidateProfile, JobPosting, ResourcePosting,
    calculate_job_match, calculate_resource_match
)
from core.matcher.normalize import normalize
from core.recommendations.models import JobFilter, RankedJob, RankedResource, JobMatchListing
from core.recommendations.policy import apply_result_policy

logger = logging.getLogger(__name__)

DEFAULT_RECOMMENDATION_LIMIT = 6


def _filter_value(value: Optional[str]) -> str:
    value = normalize(value)
    return "" if value == "all" else value


def _matches_search(job: JobPosting, term: str) -> bool:
    fields = [job.title, job.company, job.description or ""]
    if any(term in normalize(f) for f in fields):
        return True
    return any(term in normalize(skill) for skill in job.required_skills)


def filter_postings(jobs: Sequence[JobPosting], job_filter: Optional[JobFilter]) -> List[JobPosting]:
    """Apply exact (case-insensitive) field filters and a free-text search."""
    if job_filter is None:
        return list(jobs)

    track = _filter_value(job_filter.track)
    location = _filter_value(job_filter.location)
    job_type = _filter_value(job_filter.job_type)
    experience_level = _filter_value(job_filter.experience_level)
    search = normalize(job_filter.search)

    filtered = []
    for job in jobs:
        if track and normalize(job.track) != track:
            continue
        if location and normalize(job.location) != location:
            continue
        if job_type and normalize(job.job_type) != job_type:
            continue
        if experience_level and normalize(job.experience_level) != experience_level:
            continue
        if search and not _matches_search(job, search):
            continue
        filtered.append(job)

    return filtered


def rank_jobs(
    profile: CandidateProfile,
    jobs: Sequence[JobPosting],
    config: Optional[MatchingConfig] = None
) -> List[RankedJob]:
    """Score every job and sort highest first."""
    ranked = [RankedJob(job=job, match=calculate_job_match(profile, job, config)) for job in jobs]
    ranked.sort(key=lambda r: r.match.score, reverse=True)
    return ranked


def rank_resources(
    profile: CandidateProfile,
    resources: Sequence[ResourcePosting],
    config: Optional[MatchingConfig] = None
) -> List[RankedResource]:
    ranked = [
        RankedResource(resource=resource, match=calculate_resource_match(profile, resource, config))
        for resource in resources
    ]
    ranked.sort(key=lambda r: r.match.score, reverse=True)
    return ranked


def match_jobs(
    profile: CandidateProfile,
    jobs: Sequence[JobPosting],
    job_filter: Optional[JobFilter] = None,
    policy: Optional[ResultPolicy] = None,
    config: Optional[MatchingConfig] = None
) -> JobMatchListing:
    """
    Filter, score and rank jobs, then apply the result policy.

    total_jobs counts the jobs that passed the filter, before the policy.
    """
    candidates = filter_postings(jobs, job_filter)
    ranked = rank_jobs(profile, candidates, config)
    results = apply_result_policy(ranked, policy)

    logger.info(
        f"Matched {len(results)} of {len(candidates)} jobs "
        f"({len(jobs) - len(candidates)} filtered out)"
    )
    return JobMatchListing(results=results, total_jobs=len(candidates))


def recommend_jobs(
    profile: CandidateProfile,
    jobs: Sequence[JobPosting],
    limit: int = DEFAULT_RECOMMENDATION_LIMIT,
    config: Optional[MatchingConfig] = None
) -> List[RankedJob]:
    """Top `limit` jobs with a non-zero score."""
    ranked = rank_jobs(profile, jobs, config)
    return [r for r in ranked if r.match.score > 0][:limit]


def recommend_resources(
    profile: CandidateProfile,
    resources: Sequence[ResourcePosting],
    limit: int = DEFAULT_RECOMMENDATION_LIMIT,
    config: Optional[MatchingConfig] = None
) -> List[RankedResource]:
    """Top `limit` resources with a non-zero score."""
    ranked = rank_resources(profile, resources, config)
    return [r for r in ranked if r.match.score > 0][:limit]
