"""Recommendations Module - ranking, result policies and dashboard summary."""
from core.recommendations.models import (
    JobFilter, RankedJob, RankedResource, JobMatchListing, DashboardSummary
)
from core.recommendations.policy import (
    POLICY_PRESETS, get_preset, build_policy, apply_result_policy
)
from core.recommendations.service import (
    filter_postings, rank_jobs, rank_resources,
    match_jobs, recommend_jobs, recommend_resources
)
from core.recommendations.dashboard import build_dashboard, roadmap_preview

__all__ = [
    'JobFilter', 'RankedJob', 'RankedResource', 'JobMatchListing', 'DashboardSummary',
    'POLICY_PRESETS', 'get_preset', 'build_policy', 'apply_result_policy',
    'filter_postings', 'rank_jobs', 'rank_resources',
    'match_jobs', 'recommend_jobs', 'recommend_resources',
    'build_dashboard', 'roadmap_preview'
]
