"""
Interview routes
"""
from typing import List
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from recruitment.core.database import get_db
from recruitment.auth.dependencies import get_current_principal, require_any_role, require_role
from recruitment.auth.principal import Principal
from recruitment.interviews.schemas import (
    FeedbackRequest,
    FeedbackResponse,
    InterviewResponse,
    ScheduleInterviewRequest,
    UpdateInterviewStatusRequest,
)
from recruitment.interviews.service import InterviewService
from recruitment.models.user import RoleName

router = APIRouter(prefix="/api/interview", tags=["Interviews"])

panel_roles = require_any_role(RoleName.ADMIN, RoleName.HR, RoleName.INTERVIEWER)


@router.get("", response_model=List[InterviewResponse])
def list_interviews(
    principal: Principal = Depends(get_current_principal),
    db: Session = Depends(get_db),
):
    return InterviewService(db).list_interviews()


@router.get("/candidate/{candidate_id}", response_model=List[InterviewResponse])
def list_interviews_for_candidate(
    candidate_id: int,
    principal: Principal = Depends(get_current_principal),
    db: Session = Depends(get_db),
):
    return InterviewService(db).list_by_candidate(candidate_id)


@router.get("/job/{job_id}", response_model=List[InterviewResponse])
def list_interviews_for_job(
    job_id: int,
    principal: Principal = Depends(get_current_principal),
    db: Session = Depends(get_db),
):
    return InterviewService(db).list_by_job(job_id)


@router.get("/interviewer/{user_id}", response_model=List[InterviewResponse])
def list_interviews_for_interviewer(
    user_id: int,
    principal: Principal = Depends(get_current_principal),
    db: Session = Depends(get_db),
):
    return InterviewService(db).list_by_interviewer(user_id)


@router.post("/schedule", response_model=InterviewResponse, status_code=status.HTTP_201_CREATED)
def schedule_interview(
    interview_data: ScheduleInterviewRequest,
    principal: Principal = Depends(require_any_role(RoleName.ADMIN, RoleName.HR)),
    db: Session = Depends(get_db),
):
    """Schedule an interview round with its panel"""
    return InterviewService(db).schedule_interview(interview_data)


@router.get("/{interview_id}", response_model=InterviewResponse)
def get_interview(
    interview_id: int,
    principal: Principal = Depends(get_current_principal),
    db: Session = Depends(get_db),
):
    return InterviewService(db).get_interview(interview_id)


@router.put("/{interview_id}/status", response_model=InterviewResponse)
def update_interview_status(
    interview_id: int,
    status_data: UpdateInterviewStatusRequest,
    principal: Principal = Depends(panel_roles),
    db: Session = Depends(get_db),
):
    """Change the status; the candidate is notified when it actually changes"""
    return InterviewService(db).update_status(interview_id, status_data.status)


@router.post("/{interview_id}/feedback", response_model=FeedbackResponse)
def add_interview_feedback(
    interview_id: int,
    feedback_data: FeedbackRequest,
    principal: Principal = Depends(panel_roles),
    db: Session = Depends(get_db),
):
    return InterviewService(db).add_feedback(interview_id, feedback_data)


@router.get("/{interview_id}/feedbacks", response_model=List[FeedbackResponse])
def get_interview_feedbacks(
    interview_id: int,
    principal: Principal = Depends(get_current_principal),
    db: Session = Depends(get_db),
):
    return InterviewService(db).get_feedbacks(interview_id)


@router.delete("/{interview_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_interview(
    interview_id: int,
    principal: Principal = Depends(require_role(RoleName.ADMIN)),
    db: Session = Depends(get_db),
):
    InterviewService(db).delete_interview(interview_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
