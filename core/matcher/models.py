#!/usr/bin/env python3
"""
Matcher Models - Data structures for matching.

Profiles and postings are read-only inputs owned by the caller. Results are
created fresh per (profile, posting) pair and never mutated afterwards.
"""

from dataclasses import dataclass, field, asdict
from typing import List, Dict, Any, Optional, Mapping

from core.matcher.normalize import coerce_skill_list, coerce_optional_str


@dataclass(frozen=True)
class CandidateProfile:
    """Job seeker profile as seen by the matcher."""
    skills: List[str] = field(default_factory=list)
    experience_level: Optional[str] = None
    preferred_track: Optional[str] = None
    name: Optional[str] = None

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> 'CandidateProfile':
        """Build a profile from loosely-typed data, coercing malformed fields."""
        data = data or {}
        return cls(
            skills=coerce_skill_list(data.get('skills')),
            experience_level=coerce_optional_str(data.get('experience_level')),
            preferred_track=coerce_optional_str(data.get('preferred_track')),
            name=coerce_optional_str(data.get('name')),
        )


@dataclass(frozen=True)
class JobPosting:
    """Job listing carrying required skills, a level and a track."""
    id: Optional[str] = None
    title: str = ""
    company: str = ""
    location: Optional[str] = None
    required_skills: List[str] = field(default_factory=list)
    experience_level: Optional[str] = None
    job_type: Optional[str] = None
    track: Optional[str] = None
    description: Optional[str] = None
    salary: Optional[str] = None

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> 'JobPosting':
        data = data or {}
        return cls(
            id=coerce_optional_str(data.get('id')),
            title=coerce_optional_str(data.get('title')) or "",
            company=coerce_optional_str(data.get('company')) or "",
            location=coerce_optional_str(data.get('location')),
            required_skills=coerce_skill_list(data.get('required_skills')),
            experience_level=coerce_optional_str(data.get('experience_level')),
            job_type=coerce_optional_str(data.get('job_type')),
            track=coerce_optional_str(data.get('track')),
            description=coerce_optional_str(data.get('description')),
            salary=coerce_optional_str(data.get('salary')),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class ResourcePosting:
    """Learning resource; relates to a track only through its skills and title."""
    id: Optional[str] = None
    title: str = ""
    platform: Optional[str] = None
    url: Optional[str] = None
    related_skills: List[str] = field(default_factory=list)
    cost: Optional[str] = None
    level: Optional[str] = None
    description: Optional[str] = None
    duration: Optional[str] = None
    rating: Optional[float] = None

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> 'ResourcePosting':
        data = data or {}
        rating = data.get('rating')
        return cls(
            id=coerce_optional_str(data.get('id')),
            title=coerce_optional_str(data.get('title')) or "",
            platform=coerce_optional_str(data.get('platform')),
            url=coerce_optional_str(data.get('url')),
            related_skills=coerce_skill_list(data.get('related_skills')),
            cost=coerce_optional_str(data.get('cost')),
            level=coerce_optional_str(data.get('level')),
            description=coerce_optional_str(data.get('description')),
            duration=coerce_optional_str(data.get('duration')),
            rating=float(rating) if isinstance(rating, (int, float)) else None,
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class SkillMatch:
    """Outcome of the skill matcher."""
    matched: List[str] = field(default_factory=list)
    missing: List[str] = field(default_factory=list)
    score: float = 0.0


@dataclass(frozen=True)
class LevelMatch:
    """Outcome of the experience or track matcher."""
    matched: bool = False
    score: int = 0


@dataclass(frozen=True)
class MatchResult:
    """Complete job match breakdown."""
    score: int
    skill_score: float
    matched_skills: List[str]
    missing_skills: List[str]
    experience_match: LevelMatch
    track_match: LevelMatch
    reasons: List[str] = field(default_factory=list)

    @property
    def match_percentage(self) -> str:
        return f"{self.score}%"

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data['match_percentage'] = self.match_percentage
        return data


@dataclass(frozen=True)
class ResourceMatchResult:
    """Resource match: skill relevance plus a flat track bonus."""
    score: int
    skill_score: float
    matched_skills: List[str]
    missing_skills: List[str]
    track_match: bool
    reason: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
