import yaml
import os
from typing import Optional, Literal
from pydantic import BaseModel, Field


class JobMatchWeights(BaseModel):
    """Weights of the three job match axes. Expected to sum to 1.0."""
    skill: float = 0.6
    experience: float = 0.2
    track: float = 0.2


class MatchingConfig(BaseModel):
    """
    Configuration for the Matcher.

    Job matches blend skill/experience/track with `job_weights`.
    Resource matches use the skill score plus a flat track bonus.
    """
    job_weights: JobMatchWeights = Field(default_factory=JobMatchWeights)
    resource_track_bonus: float = 15.0
    reason_preview_count: int = 3  # Skill names listed in a reason line


class ResultPolicy(BaseModel):
    """Post-scoring result filtering and truncation policy."""
    min_score: int = 0  # 0-100, filter threshold
    top_k: Optional[int] = None  # None = no truncation


class RecommendationsConfig(BaseModel):
    result_policy: ResultPolicy = Field(default_factory=ResultPolicy)
    job_limit: int = 6
    resource_limit: int = 6
    dashboard_limit: int = 3


class SkillGapConfig(BaseModel):
    """Thresholds are percentages of analysed jobs missing a skill."""
    high_priority_threshold: float = 50.0
    medium_priority_threshold: float = 25.0
    job_resource_limit: int = 10
    overall_resource_limit: int = 15


class SessionConfig(BaseModel):
    """Chat session cache configuration."""
    backend: Literal["memory", "redis"] = "memory"
    redis_url: Optional[str] = None
    ttl_seconds: int = 24 * 60 * 60
    history_limit: int = 12  # Messages loaded into a fresh session
    max_message_chars: int = 2000


class WebConfig(BaseModel):
    """Web server configuration."""
    host: str = "0.0.0.0"
    port: int = 8080


class AppConfig(BaseModel):
    matching: MatchingConfig = Field(default_factory=MatchingConfig)
    recommendations: RecommendationsConfig = Field(default_factory=RecommendationsConfig)
    skill_gap: SkillGapConfig = Field(default_factory=SkillGapConfig)
    sessions: SessionConfig = Field(default_factory=SessionConfig)
    web: WebConfig = Field(default_factory=WebConfig)


def load_config(config_path: str = "config.yaml") -> AppConfig:
    # If not found at relative path (e.g. running from a subdirectory), try the project root
    if not os.path.exists(config_path):
        base_dir = os.path.dirname(os.path.abspath(__file__))
        config_path = os.path.join(base_dir, "..", "config.yaml")

    data = {}
    if os.path.exists(config_path):
        with open(config_path, "r") as f:
            data = yaml.safe_load(f) or {}

    # Allow env var override for the session store
    env_redis_url = os.environ.get("REDIS_URL")
    if env_redis_url:
        if 'sessions' not in data or data['sessions'] is None:
            data['sessions'] = {}
        data['sessions']['redis_url'] = env_redis_url

    env_session_backend = os.environ.get("SESSION_BACKEND")
    if env_session_backend:
        if 'sessions' not in data or data['sessions'] is None:
            data['sessions'] = {}
        data['sessions']['backend'] = env_session_backend

    # Allow env var override for the web server
    env_web_host = os.environ.get("WEB_HOST")
    if env_web_host:
        if 'web' not in data or data['web'] is None:
            data['web'] = {}
        data['web']['host'] = env_web_host

    env_web_port = os.environ.get("WEB_PORT")
    if env_web_port:
        if 'web' not in data or data['web'] is None:
            data['web'] = {}
        data['web']['port'] = int(env_web_port)

    return AppConfig(**data)
