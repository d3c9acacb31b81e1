#!/usr/bin/env python3
"""
Skill Matcher - compare candidate skills against a posting's skill list.
"""
from typing import Sequence
import logging

from core.matcher.models import SkillMatch
from core.matcher.normalize import normalize, any_loose_match

logger = logging.getLogger(__name__)


def match_skills(candidate_skills: Sequence[str], posting_skills: Sequence[str]) -> SkillMatch:
    """
    Split posting skills into matched and missing.

    A posting skill is matched when any candidate skill equals it, contains it,
    or is contained in it (case-insensitive, trimmed). Both output lists keep the
    posting's original spelling, deduplicated by normalized form.

    Score is 100 * matched / len(posting_skills). No posting skills means no
    basis for a match, so the score is 0.
    """
    posting = [s for s in (posting_skills or []) if isinstance(s, str) and s.strip()]
    if not posting:
        return SkillMatch(matched=[], missing=[], score=0.0)

    candidate = [normalize(s) for s in (candidate_skills or []) if isinstance(s, str)]
    candidate = [s for s in candidate if s]

    matched = []
    missing = []
    seen = set()

    for skill in posting:
        key = normalize(skill)
        if key in seen:
            continue
        seen.add(key)

        if any_loose_match(key, candidate):
            matched.append(skill)
        else:
            missing.append(skill)

    score = 100.0 * len(matched) / len(posting)

    logger.debug(
        "Skill match %d/%d (score=%.2f)", len(matched), len(posting), score
    )
    return SkillMatch(matched=matched, missing=missing, score=score)
