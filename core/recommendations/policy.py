#!/usr/bin/env python3
"""
Result policies - filter and truncate ranked matches.
"""

import logging
from typing import Dict, List, Optional, TypeVar

from core.config_loader import ResultPolicy
from core.exceptions import InvalidPolicyException

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Policy presets
POLICY_PRESETS: Dict[str, ResultPolicy] = {
    "strict": ResultPolicy(min_score=70, top_k=25),
    "balanced": ResultPolicy(min_score=50, top_k=50),
    "discovery": ResultPolicy(min_score=0, top_k=100),
}


def get_preset(preset_name: str) -> ResultPolicy:
    """
    Look up a policy preset by name.

    Raises:
        InvalidPolicyException: If the preset does not exist.
    """
    preset = POLICY_PRESETS.get(preset_name)
    if preset is None:
        raise InvalidPolicyException(
            f"Unknown preset: {preset_name}. Valid presets: {', '.join(POLICY_PRESETS)}"
        )
    return preset


def build_policy(
    base: ResultPolicy,
    min_score: Optional[int] = None,
    top_k: Optional[int] = None
) -> ResultPolicy:
    """Override policy fields that are explicitly given."""
    if min_score is not None and not (0 <= min_score <= 100):
        raise InvalidPolicyException(f"min_score must be between 0 and 100, got {min_score}")
    if top_k is not None and top_k < 1:
        raise InvalidPolicyException(f"top_k must be positive, got {top_k}")

    return ResultPolicy(
        min_score=base.min_score if min_score is None else min_score,
        top_k=base.top_k if top_k is None else top_k
    )


def apply_result_policy(results: List[T], policy: Optional[ResultPolicy]) -> List[T]:
    """
    Apply a ResultPolicy to results already sorted by score.

    Each result must expose `.match.score`.
    """
    if policy is None:
        return results

    filtered = results
    if policy.min_score > 0:
        filtered = [r for r in filtered if r.match.score >= policy.min_score]

    if policy.top_k is not None:
        filtered = filtered[:policy.top_k]

    return filtered
