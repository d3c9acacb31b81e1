#!/usr/bin/env python3
"""
Track Matcher - compare a candidate's preferred track with a posting's track.
"""
from typing import Optional, Sequence

from core.matcher.models import LevelMatch
from core.matcher.normalize import normalize, loose_match

EXACT_SCORE = 100
PARTIAL_SCORE = 75


def match_track(candidate_track: Optional[str], posting_track: Optional[str]) -> LevelMatch:
    """
    Exact (case-insensitive) track equality scores 100, symmetric containment
    ("Frontend" vs "Frontend Development") scores 75. Absent tracks never match.
    """
    candidate = normalize(candidate_track)
    posting = normalize(posting_track)

    if not candidate or not posting:
        return LevelMatch(matched=False, score=0)

    if candidate == posting:
        return LevelMatch(matched=True, score=EXACT_SCORE)

    if loose_match(candidate, posting):
        return LevelMatch(matched=True, score=PARTIAL_SCORE)

    return LevelMatch(matched=False, score=0)


def resource_relates_to_track(
    preferred_track: Optional[str],
    resource_title: Optional[str],
    resource_skills: Sequence[str]
) -> bool:
    """
    Resources carry no track. They relate to one when a related skill appears
    inside the track name ("React" in "React Development") or the title
    mentions the track.
    """
    track = normalize(preferred_track)
    if not track:
        return False

    for skill in resource_skills or []:
        skill_lower = normalize(skill)
        if skill_lower and skill_lower in track:
            return True

    return track in normalize(resource_title)
