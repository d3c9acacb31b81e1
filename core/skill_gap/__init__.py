"""Skill Gap Module - what a candidate is missing and where to learn it."""
from core.skill_gap.models import SkillGap, JobGapResult, SkillGapSummary, SkillGapAnalysis
from core.skill_gap.analyzer import (
    analyze_job_gap, analyze_skill_gaps,
    recommend_resources_for_skills, top_priority_gaps
)

__all__ = [
    'analyze_job_gap', 'analyze_skill_gaps',
    'recommend_resources_for_skills', 'top_priority_gaps',
    'SkillGap', 'JobGapResult', 'SkillGapSummary', 'SkillGapAnalysis'
]
