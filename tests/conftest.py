"""
Pytest configuration and fixtures.

Shared profiles and postings used across the unit tests.
"""

import pytest

from core.matcher import CandidateProfile, JobPosting, ResourcePosting


@pytest.fixture
def frontend_profile():
    return CandidateProfile(
        skills=["React", "Node.js", "CSS"],
        experience_level="Mid",
        preferred_track="Frontend",
        name="Asha"
    )


@pytest.fixture
def sample_jobs():
    return [
        JobPosting(
            id="job-1",
            title="Frontend Developer",
            company="Pixel Labs",
            location="Dhaka",
            required_skills=["React.js", "TypeScript", "Node"],
            experience_level="Junior",
            job_type="Full-time",
            track="Frontend Development",
            description="Build dashboards"
        ),
        JobPosting(
            id="job-2",
            title="Data Engineer",
            company="Flow Data",
            location="Remote",
            required_skills=["Python", "SQL", "Airflow"],
            experience_level="Senior",
            job_type="Full-time",
            track="Data"
        ),
        JobPosting(
            id="job-3",
            title="UI Intern",
            company="Pixel Labs",
            location="Dhaka",
            required_skills=["CSS", "Figma"],
            experience_level="Intern",
            job_type="Internship",
            track="Frontend"
        ),
    ]


@pytest.fixture
def sample_resources():
    return [
        ResourcePosting(
            id="res-1",
            title="TypeScript Fundamentals",
            platform="Udemy",
            related_skills=["TypeScript"],
            cost="Paid"
        ),
        ResourcePosting(
            id="res-2",
            title="Modern Frontend Workshop",
            platform="YouTube",
            related_skills=["React", "CSS"],
            cost="Free"
        ),
        ResourcePosting(
            id="res-3",
            title="Data Pipelines with Airflow",
            platform="Coursera",
            related_skills=["Airflow", "Python", "SQL"],
            cost="Paid"
        ),
    ]
