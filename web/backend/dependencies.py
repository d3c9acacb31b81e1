#!/usr/bin/env python3
"""
FastAPI dependencies for dependency injection.

Tests swap any of these through app.dependency_overrides.
"""

from functools import lru_cache

from core.cache import ChatSessionCache, build_session_cache
from core.config_loader import AppConfig
from .config import get_config
from .services import MatchService, SkillGapService, SessionService


def get_app_config() -> AppConfig:
    return get_config()


@lru_cache()
def get_session_cache() -> ChatSessionCache:
    """
    The application's session cache, built once from config.

    The store backend (memory or redis) is chosen by sessions.backend.
    """
    return build_session_cache(get_config().sessions)


def get_match_service() -> MatchService:
    """
    FastAPI dependency that provides a MatchService.

    Usage:
        @router.post("/endpoint")
        def my_endpoint(service: MatchService = Depends(get_match_service)):
            ...
    """
    return MatchService(get_app_config())


def get_skill_gap_service() -> SkillGapService:
    return SkillGapService(get_app_config())


def get_session_service() -> SessionService:
    return SessionService(get_session_cache())
