#!/usr/bin/env python3
"""
Unit tests for the skill matcher.
"""

import unittest

from core.matcher import match_skills
from core.matcher.normalize import dedupe_by_normalized, normalize


class TestSkillMatcher(unittest.TestCase):
    """Unit tests for match_skills."""

    def test_01_containment_in_both_directions(self):
        """React matches React.js and Node.js matches Node."""
        result = match_skills(["React", "Node.js"], ["React.js", "TypeScript", "Node"])

        self.assertEqual(result.matched, ["React.js", "Node"])
        self.assertEqual(result.missing, ["TypeScript"])
        self.assertAlmostEqual(result.score, 66.67, places=2)

    def test_02_case_and_whitespace_insensitive(self):
        result = match_skills(["  python "], ["PYTHON", "Sql"])

        self.assertEqual(result.matched, ["PYTHON"])
        self.assertEqual(result.missing, ["Sql"])
        self.assertEqual(result.score, 50.0)

    def test_03_no_posting_skills_scores_zero(self):
        result = match_skills(["React"], [])

        self.assertEqual(result.matched, [])
        self.assertEqual(result.missing, [])
        self.assertEqual(result.score, 0.0)

    def test_04_no_candidate_skills_misses_everything(self):
        result = match_skills([], ["Go", "Rust"])

        self.assertEqual(result.matched, [])
        self.assertEqual(result.missing, ["Go", "Rust"])
        self.assertEqual(result.score, 0.0)

    def test_05_blank_candidate_skills_are_ignored(self):
        """An empty string would otherwise be a substring of every skill."""
        result = match_skills(["", "   "], ["Go"])

        self.assertEqual(result.matched, [])
        self.assertEqual(result.missing, ["Go"])

    def test_06_blank_posting_skills_are_dropped(self):
        result = match_skills(["React"], ["React", "  ", ""])

        self.assertEqual(result.matched, ["React"])
        self.assertEqual(result.missing, [])
        self.assertEqual(result.score, 100.0)

    def test_07_duplicates_listed_once_but_counted_in_score(self):
        result = match_skills(["React"], ["React", "react", "CSS"])

        self.assertEqual(result.matched, ["React"])
        self.assertEqual(result.missing, ["CSS"])
        self.assertAlmostEqual(result.score, 100.0 / 3)

    def test_08_first_spelling_wins(self):
        result = match_skills([], ["TypeScript", "typescript"])

        self.assertEqual(result.missing, ["TypeScript"])

    def test_09_short_names_match_by_containment(self):
        """Containment is deliberately loose: Java matches JavaScript."""
        result = match_skills(["Java"], ["JavaScript"])

        self.assertEqual(result.matched, ["JavaScript"])

    def test_10_score_within_bounds(self):
        result = match_skills(["a", "b", "c"], ["a", "b", "c"])

        self.assertEqual(result.score, 100.0)
        self.assertEqual(len(result.matched) + len(result.missing), 3)

    def test_11_matched_and_missing_partition_posting_skills(self):
        """Every distinct posting skill lands in exactly one of matched/missing."""
        cases = [
            (["React"], ["React", "react", "REACT ", "CSS", "css"]),
            (["node"], ["Node.js", "NODE", "Go", "go", "  "]),
            (["Java", "SQL"], ["JavaScript", "PostgreSQL", "Rust", "rust", "Java"]),
            ([], ["Docker", "docker", "Kubernetes"]),
            (["python", "Python "], ["Python", "python3", "Django"]),
        ]
        for candidate, posting in cases:
            with self.subTest(candidate=candidate, posting=posting):
                result = match_skills(candidate, posting)
                matched = {normalize(s) for s in result.matched}
                missing = {normalize(s) for s in result.missing}

                self.assertEqual(matched & missing, set())
                self.assertEqual(
                    sorted(result.matched + result.missing),
                    sorted(dedupe_by_normalized([s for s in posting if s.strip()]))
                )


if __name__ == '__main__':
    unittest.main()
