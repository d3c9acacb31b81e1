#!/usr/bin/env python3
"""
Match Scoring - composite job and resource scores.

Job score:      skill * 0.6 + experience * 0.2 + track * 0.2, rounded half-up.
Resource score: skill score, plus a flat +15 when the resource relates to the
                candidate's track, capped at 100. Resources have no experience
                axis; the track is a secondary nudge rather than a scored axis.

Weights and the resource bonus come from MatchingConfig. The scorer never
raises on absent or empty data: it degrades to zero scores.
"""

from typing import Any, Optional
import logging

from core.config_loader import MatchingConfig
from core.matcher.models import (
    CandidateProfile, JobPosting, ResourcePosting,
    MatchResult, ResourceMatchResult
)
from core.matcher.normalize import round_half_up
from core.matcher.skill_matcher import match_skills
from core.matcher.experience_matcher import match_experience
from core.matcher.track_matcher import match_track, resource_relates_to_track
from core.matcher.reasons import build_job_reasons, build_resource_reason

logger = logging.getLogger(__name__)

_DEFAULT_CONFIG = MatchingConfig()


def _clamp(x: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, x))


def _warn_correct(name: str, old: Any, new: Any) -> None:
    if old != new:
        logger.warning("Corrected %s from %r to %r", name, old, new)


def _nonneg(name: str, x: float) -> float:
    y = max(0.0, float(x))
    _warn_correct(name, x, y)
    return y


def calculate_job_match(
    profile: CandidateProfile,
    posting: JobPosting,
    config: Optional[MatchingConfig] = None
) -> MatchResult:
    """Score a candidate profile against a job posting."""
    config = config or _DEFAULT_CONFIG
    weights = config.job_weights

    w_skill = _nonneg("job_weights.skill", weights.skill)
    w_exp = _nonneg("job_weights.experience", weights.experience)
    w_track = _nonneg("job_weights.track", weights.track)

    skill_match = match_skills(profile.skills, posting.required_skills)
    experience_match = match_experience(profile.experience_level, posting.experience_level)
    track_match = match_track(profile.preferred_track, posting.track)

    total = (
        w_skill * skill_match.score +
        w_exp * experience_match.score +
        w_track * track_match.score
    )
    score = round_half_up(_clamp(total, 0.0, 100.0))

    reasons = build_job_reasons(
        skill_match,
        experience_match,
        track_match,
        profile.preferred_track,
        preview_count=config.reason_preview_count
    )

    logger.debug(
        "Job match %s: %d (skill=%.2f, exp=%d, track=%d)",
        posting.id or posting.title, score,
        skill_match.score, experience_match.score, track_match.score
    )

    return MatchResult(
        score=score,
        skill_score=skill_match.score,
        matched_skills=skill_match.matched,
        missing_skills=skill_match.missing,
        experience_match=experience_match,
        track_match=track_match,
        reasons=reasons
    )


def calculate_resource_match(
    profile: CandidateProfile,
    resource: ResourcePosting,
    config: Optional[MatchingConfig] = None
) -> ResourceMatchResult:
    """Score a candidate profile against a learning resource."""
    config = config or _DEFAULT_CONFIG
    bonus = _nonneg("resource_track_bonus", config.resource_track_bonus)

    skill_match = match_skills(profile.skills, resource.related_skills)
    track_match = resource_relates_to_track(
        profile.preferred_track,
        resource.title,
        resource.related_skills
    )

    total = skill_match.score
    if track_match:
        total = min(100.0, total + bonus)
    score = round_half_up(total)

    logger.debug(
        "Resource match %s: %d (skill=%.2f, track=%s)",
        resource.id or resource.title, score, skill_match.score, track_match
    )

    return ResourceMatchResult(
        score=score,
        skill_score=skill_match.score,
        matched_skills=skill_match.matched,
        missing_skills=skill_match.missing,
        track_match=track_match,
        reason=build_resource_reason(skill_match.matched, track_match, profile.preferred_track)
    )
