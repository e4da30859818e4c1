"""
Report Pydantic schemas
"""
from typing import List

from recruitment.core.schemas import CamelModel


class SourceAnalysis(CamelModel):
    source: str
    count: int
    percentage: float


class RecentActivity(CamelModel):
    type: str  # application, interview, shortlist
    description: str
    time_ago: str


class ReportsOverview(CamelModel):
    total_applications: int
    interview_rate: float  # percent of applicants interviewed
    hire_rate: float  # percent of applicants selected
    time_to_hire: float  # mean days from application to selection
    source_analysis: List[SourceAnalysis] = []
    recent_activity: List[RecentActivity] = []


class CandidateStatusCount(CamelModel):
    status: str
    count: int
    percentage: float


class JobDepartmentCount(CamelModel):
    department: str
    count: int
    percentage: float


class InterviewTrend(CamelModel):
    month: str  # "Mar 2025"
    year: int
    count: int
