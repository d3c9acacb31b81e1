#!/usr/bin/env python3
"""
Human-readable match reasons.
"""
from typing import List, Optional, Sequence

from core.matcher.models import SkillMatch, LevelMatch

DEFAULT_PREVIEW_COUNT = 3


def _preview(skills: Sequence[str], count: int) -> str:
    return ", ".join(skills[:count])


def build_job_reasons(
    skill_match: SkillMatch,
    experience_match: LevelMatch,
    track_match: LevelMatch,
    preferred_track: Optional[str],
    preview_count: int = DEFAULT_PREVIEW_COUNT
) -> List[str]:
    """
    Ordered reasons: skills matched, skills missing, experience, track.
    """
    reasons = []
    matched = skill_match.matched
    missing = skill_match.missing
    total = len(matched) + len(missing)

    if matched:
        if not missing:
            reasons.append(f"Matches all {total} required skills")
        else:
            more = "..." if len(matched) > preview_count else ""
            reasons.append(
                f"Matches {len(matched)} out of {total} required skills: "
                f"{_preview(matched, preview_count)}{more}"
            )

    if missing:
        extra = len(missing) - preview_count
        more = f" and {extra} more" if extra > 0 else ""
        reasons.append(f"Missing: {_preview(missing, preview_count)}{more}")

    if experience_match.matched:
        if experience_match.score == 100:
            reasons.append("Experience level aligned")
        else:
            reasons.append("Experience level partially aligned")
    else:
        reasons.append("Experience level mismatch")

    if track_match.matched:
        reasons.append(f"Fits your preferred track: {preferred_track}")

    return reasons


def build_resource_reason(
    matched_skills: Sequence[str],
    track_match: bool,
    preferred_track: Optional[str]
) -> str:
    if track_match and matched_skills:
        return f"Matches your track ({preferred_track}) and skills: {', '.join(matched_skills)}"
    if track_match:
        return f"Recommended because it fits your track: {preferred_track}"
    if matched_skills:
        return f"Matches your skills: {', '.join(matched_skills)}"
    return "General recommendation"
