#!/usr/bin/env python3
"""
Skill Gap Analyzer.

Two views of what a candidate is missing:
- analyze_job_gap: one job, with resources that teach the missing skills.
- analyze_skill_gaps: many jobs, with missing skills ranked by how many jobs
  ask for them and bucketed into high/medium/low priority.
"""

from typing import Dict, List, Optional, Sequence, Tuple
import logging

from core.config_loader import MatchingConfig, SkillGapConfig
from core.exceptions import NoJobsFoundException
from core.matcher import (
    CandidateProfile, JobPosting, ResourcePosting,
    match_skills, match_track, calculate_job_match
)
from core.matcher.normalize import normalize, any_loose_match, round_half_up
from core.skill_gap.models import (
    SkillGap, JobGapResult, SkillGapSummary, SkillGapAnalysis, Priority
)

logger = logging.getLogger(__name__)

TRACK_GAP_LIMIT = 10


def _relevance(resource: ResourcePosting, missing_lower: Sequence[str]) -> int:
    """Number of the resource's skills that loosely match a missing skill."""
    return sum(
        1 for skill in resource.related_skills
        if any_loose_match(normalize(skill), missing_lower)
    )


def recommend_resources_for_skills(
    missing_skills: Sequence[str],
    resources: Sequence[ResourcePosting],
    limit: int
) -> List[ResourcePosting]:
    """
    Resources teaching any missing skill, most matching skills first.

    Duplicate resource ids are dropped (first relevant occurrence wins).
    """
    missing_lower = [normalize(s) for s in missing_skills if normalize(s)]
    if not missing_lower:
        return []

    seen_ids = set()
    scored: List[Tuple[int, ResourcePosting]] = []
    for resource in resources:
        relevance = _relevance(resource, missing_lower)
        if relevance <= 0:
            continue
        if resource.id is not None:
            if resource.id in seen_ids:
                continue
            seen_ids.add(resource.id)
        scored.append((relevance, resource))

    scored.sort(key=lambda item: item[0], reverse=True)
    return [resource for _, resource in scored[:limit]]


def analyze_job_gap(
    profile: CandidateProfile,
    job: JobPosting,
    resources: Sequence[ResourcePosting],
    limit: int = 10
) -> JobGapResult:
    skill_match = match_skills(profile.skills, job.required_skills)
    recommended = recommend_resources_for_skills(skill_match.missing, resources, limit)

    return JobGapResult(
        job=job,
        matched_skills=skill_match.matched,
        missing_skills=skill_match.missing,
        recommended_resources=recommended
    )


def _priority(frequency: int, total_jobs: int, config: SkillGapConfig) -> Priority:
    percentage = 100.0 * frequency / total_jobs if total_jobs else 0.0
    if percentage >= config.high_priority_threshold:
        return "high"
    if percentage >= config.medium_priority_threshold:
        return "medium"
    return "low"


def _display_name(skill_lower: str) -> str:
    return skill_lower[:1].upper() + skill_lower[1:]


def _collect_gaps(
    missing_by_job: List[Tuple[str, List[str]]],
    config: SkillGapConfig
) -> List[SkillGap]:
    """Count missing skills per normalized name and rank by frequency."""
    counts: Dict[str, int] = {}
    job_ids: Dict[str, set] = {}

    for job_key, missing in missing_by_job:
        for skill in missing:
            key = normalize(skill)
            counts[key] = counts.get(key, 0) + 1
            job_ids.setdefault(key, set()).add(job_key)

    total_jobs = len(missing_by_job)
    gaps = [
        SkillGap(
            skill=_display_name(key),
            frequency=count,
            priority=_priority(count, total_jobs, config),
            related_jobs=len(job_ids[key])
        )
        for key, count in counts.items()
    ]
    gaps.sort(key=lambda g: g.frequency, reverse=True)
    return gaps


def analyze_skill_gaps(
    profile: CandidateProfile,
    jobs: Sequence[JobPosting],
    resources: Sequence[ResourcePosting],
    track: Optional[str] = None,
    config: Optional[SkillGapConfig] = None,
    matching_config: Optional[MatchingConfig] = None
) -> SkillGapAnalysis:
    """
    Aggregate skill gaps across jobs, optionally restricted to jobs whose track
    contains `track` (case-insensitive).

    Raises:
        NoJobsFoundException: If no job is left to analyse.
    """
    config = config or SkillGapConfig()

    track_filter = normalize(track)
    if track_filter:
        jobs = [job for job in jobs if track_filter in normalize(job.track)]

    if not jobs:
        if track_filter:
            raise NoJobsFoundException(f"No jobs found for track: {track}")
        raise NoJobsFoundException("No jobs found to analyze")

    total_score = 0
    missing_by_job: List[Tuple[str, List[str]]] = []
    track_missing_by_job: List[Tuple[str, List[str]]] = []
    required = set()

    for index, job in enumerate(jobs):
        result = calculate_job_match(profile, job, matching_config)
        total_score += result.score

        job_key = job.id if job.id is not None else f"#{index}"
        missing_by_job.append((job_key, result.missing_skills))
        if match_track(profile.preferred_track, job.track).matched:
            track_missing_by_job.append((job_key, result.missing_skills))

        required.update(normalize(s) for s in job.required_skills if normalize(s))

    overall_gaps = _collect_gaps(missing_by_job, config)
    track_gaps = _collect_gaps(track_missing_by_job, config)[:TRACK_GAP_LIMIT]

    recommended = recommend_resources_for_skills(
        [gap.skill for gap in overall_gaps],
        resources,
        config.overall_resource_limit
    )

    summary = SkillGapSummary(
        total_jobs_analyzed=len(jobs),
        total_skills_required=len(required),
        skills_you_have=len(profile.skills),
        skills_to_learn=len(overall_gaps),
        average_match_score=round_half_up(total_score / len(jobs))
    )

    logger.info(
        f"Skill gap analysis: {summary.skills_to_learn} gaps across "
        f"{summary.total_jobs_analyzed} jobs (avg match {summary.average_match_score}%)"
    )

    return SkillGapAnalysis(
        summary=summary,
        overall_gaps=overall_gaps,
        track_specific_gaps=track_gaps,
        recommended_resources=recommended
    )


def top_priority_gaps(
    gaps: Sequence[SkillGap],
    high_limit: int = 5,
    medium_limit: int = 3
) -> Tuple[List[str], List[str]]:
    """Names of the most frequent high and medium priority gaps."""
    high = [g.skill for g in gaps if g.priority == "high"][:high_limit]
    medium = [g.skill for g in gaps if g.priority == "medium"][:medium_limit]
    return high, medium
