"""API route handlers."""

from .matches import router as matches_router
from .recommendations import router as recommendations_router
from .skill_gap import router as skill_gap_router
from .sessions import router as sessions_router
