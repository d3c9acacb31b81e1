"""Matcher Module - deterministic profile-to-posting scoring."""
from core.matcher.models import (
    CandidateProfile, JobPosting, ResourcePosting,
    SkillMatch, LevelMatch, MatchResult, ResourceMatchResult
)
from core.matcher.skill_matcher import match_skills
from core.matcher.experience_matcher import match_experience, map_experience_level
from core.matcher.track_matcher import match_track, resource_relates_to_track
from core.matcher.service import calculate_job_match, calculate_resource_match

__all__ = [
    'calculate_job_match', 'calculate_resource_match',
    'match_skills', 'match_experience', 'map_experience_level',
    'match_track', 'resource_relates_to_track',
    'CandidateProfile', 'JobPosting', 'ResourcePosting',
    'SkillMatch', 'LevelMatch', 'MatchResult', 'ResourceMatchResult'
]
