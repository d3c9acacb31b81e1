#!/usr/bin/env python3
"""
Unit tests for result policy presets and overrides.
"""

import unittest
from types import SimpleNamespace

from core.config_loader import ResultPolicy
from core.exceptions import InvalidPolicyException
from core.recommendations import POLICY_PRESETS, get_preset, build_policy, apply_result_policy


def _result(score):
    return SimpleNamespace(match=SimpleNamespace(score=score))


class TestPolicyPresets(unittest.TestCase):

    def test_presets(self):
        self.assertEqual(set(POLICY_PRESETS), {"strict", "balanced", "discovery"})
        self.assertEqual(get_preset("strict"), ResultPolicy(min_score=70, top_k=25))
        self.assertEqual(get_preset("discovery").min_score, 0)

    def test_unknown_preset(self):
        with self.assertRaises(InvalidPolicyException) as ctx:
            get_preset("everything")
        self.assertIn("Unknown preset: everything", str(ctx.exception))


class TestBuildPolicy(unittest.TestCase):

    def test_overrides_only_given_fields(self):
        policy = build_policy(ResultPolicy(min_score=50, top_k=50), top_k=5)
        self.assertEqual(policy, ResultPolicy(min_score=50, top_k=5))

    def test_zero_min_score_is_an_override(self):
        policy = build_policy(ResultPolicy(min_score=70), min_score=0)
        self.assertEqual(policy.min_score, 0)

    def test_invalid_values(self):
        with self.assertRaises(InvalidPolicyException):
            build_policy(ResultPolicy(), min_score=101)
        with self.assertRaises(InvalidPolicyException):
            build_policy(ResultPolicy(), top_k=0)


class TestApplyResultPolicy(unittest.TestCase):

    def setUp(self):
        self.results = [_result(90), _result(70), _result(40), _result(0)]

    def test_no_policy(self):
        self.assertIs(apply_result_policy(self.results, None), self.results)

    def test_min_score_is_inclusive(self):
        filtered = apply_result_policy(self.results, ResultPolicy(min_score=70))
        self.assertEqual([r.match.score for r in filtered], [90, 70])

    def test_top_k(self):
        filtered = apply_result_policy(self.results, ResultPolicy(top_k=3))
        self.assertEqual([r.match.score for r in filtered], [90, 70, 40])


if __name__ == '__main__':
    unittest.main()
