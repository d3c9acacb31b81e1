#!/usr/bin/env python3
"""
Experience Level Matcher.

Free-form level labels ("Fresher", "Mid-level", "Senior Engineer") are mapped
onto an ordered three-tier scale by keyword. Tiers one step apart are a
partial match.
"""
from typing import Optional, Tuple

from core.matcher.models import LevelMatch
from core.matcher.normalize import normalize

TIERS = ("beginner", "intermediate", "advanced")

# Checked in order: "mid-senior" is intermediate.
TIER_KEYWORDS: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("beginner", ("fresher", "entry", "intern")),
    ("intermediate", ("junior", "mid")),
    ("advanced", ("senior", "lead", "expert")),
)

EXACT_SCORE = 100
ADJACENT_SCORE = 50


def map_experience_level(level: Optional[str]) -> str:
    """Return the tier name, or the lowercase label itself when no keyword hits."""
    level_lower = normalize(level)
    for tier, keywords in TIER_KEYWORDS:
        if any(keyword in level_lower for keyword in keywords):
            return tier
    return level_lower


def tier_index(level: Optional[str]) -> Optional[int]:
    mapped = map_experience_level(level)
    if mapped in TIERS:
        return TIERS.index(mapped)
    return None


def match_experience(candidate_level: Optional[str], posting_level: Optional[str]) -> LevelMatch:
    if not normalize(candidate_level):
        return LevelMatch(matched=False, score=0)

    candidate_index = tier_index(candidate_level)
    posting_index = tier_index(posting_level)

    # Unmapped labels never compare, even if they are spelled identically.
    if candidate_index is None or posting_index is None:
        return LevelMatch(matched=False, score=0)

    distance = abs(candidate_index - posting_index)
    if distance == 0:
        return LevelMatch(matched=True, score=EXACT_SCORE)
    if distance == 1:
        return LevelMatch(matched=True, score=ADJACENT_SCORE)
    return LevelMatch(matched=False, score=0)
