"""
Interview Pydantic schemas
"""
from typing import Optional, List
from pydantic import Field
from datetime import datetime

from recruitment.core.schemas import CamelModel


class ScheduleInterviewRequest(CamelModel):
    """Interview scheduling schema"""
    candidate_id: int
    job_id: int
    scheduled_date: datetime
    interview_type: str = Field(..., min_length=1, max_length=50)
    round_no: int = Field(1, ge=1)
    interviewer_ids: List[int] = Field(default_factory=list)


class UpdateInterviewStatusRequest(CamelModel):
    # Checked against the known statuses by the service
    status: str = Field(..., min_length=1, max_length=20)


class FeedbackRequest(CamelModel):
    interviewer_id: int
    rating: int
    comments: str = Field("", max_length=1000)


class InterviewerResponse(CamelModel):
    id: int
    user_id: int
    user_name: str
    full_name: str


class FeedbackResponse(CamelModel):
    id: int
    interview_id: int
    interviewer_id: Optional[int] = None
    interviewer_name: str
    rating: int
    comments: str
    created_at: datetime


class InterviewResponse(CamelModel):
    """Interview with its panel and feedback"""
    id: int
    candidate_id: int
    candidate_name: str
    job_id: int
    job_title: str
    scheduled_date: datetime
    interview_type: str
    round_no: int
    status: str
    completed_at: Optional[datetime] = None
    interviewers: List[InterviewerResponse] = []
    feedbacks: List[FeedbackResponse] = []
