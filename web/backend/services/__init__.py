"""Business logic services."""

from .match_service import MatchService
from .skill_gap_service import SkillGapService
from .session_service import SessionService
