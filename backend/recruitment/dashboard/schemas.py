"""
Dashboard Pydantic schemas
"""
from typing import Optional, List
from datetime import datetime

from recruitment.core.schemas import CamelModel
from recruitment.candidates.schemas import CandidateResponse
from recruitment.notifications.schemas import NotificationResponse


class DashboardStats(CamelModel):
    total_jobs: int = 0
    open_jobs: int = 0
    on_hold_jobs: int = 0
    closed_jobs: int = 0
    total_candidates: int = 0
    applied_candidates: int = 0
    shortlisted_candidates: int = 0
    interview_candidates: int = 0
    selected_candidates: int = 0
    rejected_candidates: int = 0
    on_hold_candidates: int = 0
    total_interviews: int = 0
    scheduled_interviews: int = 0
    completed_interviews: int = 0
    pending_interviews: int = 0
    total_offers: int = 0
    pending_offers: int = 0
    accepted_offers: int = 0
    rejected_offers: int = 0


class RecentJob(CamelModel):
    id: int
    title: str
    location: str
    min_experience: str
    status: str
    created_at: datetime
    created_by: str
    applied_count: int


class UpcomingInterview(CamelModel):
    id: int
    candidate_name: str
    job_title: str
    interview_type: str
    round_no: int
    scheduled_date: datetime
    interviewers: List[str] = []


class PendingTask(CamelModel):
    """Reminder computed on read, never stored"""
    id: int
    type: str  # Interview, Approval
    title: str
    description: str
    due_date: datetime
    priority: str  # High, Medium, Low
    assigned_to: str


class StaffDashboardBase(CamelModel):
    stats: DashboardStats
    pending_tasks: List[PendingTask]
    notifications: List[NotificationResponse]


class AdminDashboard(StaffDashboardBase):
    """Also served to recruiters"""
    recent_jobs: List[RecentJob]
    recent_candidates: List[CandidateResponse]
    upcoming_interviews: List[UpcomingInterview]


class HRDashboard(StaffDashboardBase):
    recent_candidates: List[CandidateResponse]
    upcoming_interviews: List[UpcomingInterview]


class InterviewerDashboard(StaffDashboardBase):
    upcoming_interviews: List[UpcomingInterview]


class ReviewerDashboard(StaffDashboardBase):
    recent_candidates: List[CandidateResponse]


class OthersDashboard(StaffDashboardBase):
    recent_jobs: Optional[List[RecentJob]] = None  # recruiters only
    recent_candidates: List[CandidateResponse]
    upcoming_interviews: List[UpcomingInterview]


class CandidateUser(CamelModel):
    full_name: str
    email: str


class CandidateSummary(CamelModel):
    id: int
    status: str
    experience_years: int
    created_at: datetime
    updated_at: Optional[datetime] = None
    user: CandidateUser


class AppliedJob(CamelModel):
    id: int
    job_id: int
    job_title: str
    job_location: str
    applied_date: datetime
    status: str  # the candidate's pipeline status


class CandidateInterview(CamelModel):
    id: int
    job_title: str
    interview_type: str
    round_no: int
    scheduled_date: datetime
    status: str
    interviewers: List[str] = []


class CandidateOffer(CamelModel):
    id: int
    job_title: str
    offer_date: datetime
    joining_date: Optional[datetime] = None
    status: str


class CandidateDashboard(CamelModel):
    candidate: CandidateSummary
    applied_jobs: List[AppliedJob]
    interviews: List[CandidateInterview]
    offers: List[CandidateOffer]
    notifications: List[NotificationResponse]
