#!/usr/bin/env python3
"""
Normalization helpers shared by the matchers.

All comparisons are case-insensitive and whitespace-trimmed. "Loose" matching
is symmetric substring containment, so "React" and "React.js" match.
"""

import math
from typing import Any, List, Optional, Sequence


def normalize(text: Optional[str]) -> str:
    """Lowercase and trim; None becomes an empty string."""
    if not text:
        return ""
    return text.strip().lower()


def loose_match(a: str, b: str) -> bool:
    """Symmetric containment on already-normalized strings. Blank never matches."""
    if not a or not b:
        return False
    return a == b or a in b or b in a


def any_loose_match(needle: str, haystack: Sequence[str]) -> bool:
    return any(loose_match(needle, candidate) for candidate in haystack)


def dedupe_by_normalized(values: Sequence[str]) -> List[str]:
    """Keep the first original spelling of each normalized value."""
    seen = set()
    result = []
    for value in values:
        key = normalize(value)
        if key in seen:
            continue
        seen.add(key)
        result.append(value)
    return result


def round_half_up(value: float) -> int:
    # Python's round() is banker's rounding; scores round .5 upwards.
    return int(math.floor(value + 0.5))


def coerce_skill_list(value: Any) -> List[str]:
    """Non-sequence input becomes []; non-string or blank entries are dropped."""
    if not isinstance(value, (list, tuple, set, frozenset)):
        return []
    return [item for item in value if isinstance(item, str) and item.strip()]


def coerce_optional_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return None
