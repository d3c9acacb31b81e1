#!/usr/bin/env python3
"""
Unit tests for experience level mapping and matching.
"""

import pytest

from core.matcher import match_experience, map_experience_level
from core.matcher.experience_matcher import tier_index


class TestMapExperienceLevel:
    """Keyword mapping onto the three-tier scale."""

    @pytest.mark.parametrize("label,tier", [
        ("Fresher", "beginner"),
        ("Entry Level", "beginner"),
        ("Internship", "beginner"),
        ("Junior", "intermediate"),
        ("Mid-level", "intermediate"),
        ("Senior", "advanced"),
        ("Tech Lead", "advanced"),
        ("Expert", "advanced"),
    ])
    def test_keywords(self, label, tier):
        assert map_experience_level(label) == tier

    def test_first_matching_tier_wins(self):
        """'mid' is checked before 'senior'."""
        assert map_experience_level("Mid-Senior") == "intermediate"

    def test_unknown_label_passes_through_lowercased(self):
        assert map_experience_level("  Principal ") == "principal"
        assert tier_index("Principal") is None

    def test_absent_label(self):
        assert map_experience_level(None) == ""
        assert tier_index(None) is None


class TestMatchExperience:
    """Tier distance scoring."""

    @pytest.mark.parametrize("candidate,posting,matched,score", [
        ("Fresher", "Entry", True, 100),
        ("Fresher", "Junior", True, 50),
        ("Fresher", "Senior", False, 0),
        ("Mid", "Intern", True, 50),
        ("Mid", "Junior", True, 100),
        ("Mid", "Lead", True, 50),
        ("Expert", "Intern", False, 0),
        ("Expert", "Mid", True, 50),
        ("Expert", "Senior", True, 100),
    ])
    def test_tier_grid(self, candidate, posting, matched, score):
        result = match_experience(candidate, posting)
        assert result.matched is matched
        assert result.score == score

    def test_symmetric(self):
        assert match_experience("Senior", "Junior") == match_experience("Junior", "Senior")

    def test_missing_candidate_level(self):
        result = match_experience(None, "Junior")
        assert result.matched is False
        assert result.score == 0

    def test_missing_posting_level(self):
        result = match_experience("Junior", None)
        assert result.matched is False
        assert result.score == 0

    def test_identical_unmapped_levels_do_not_match(self):
        result = match_experience("Principal", "Principal")
        assert result.matched is False
        assert result.score == 0
