"""
Report routes
"""
from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from recruitment.core.database import get_db
from recruitment.auth.dependencies import get_current_principal
from recruitment.auth.principal import Principal
from recruitment.reports.schemas import (
    CandidateStatusCount,
    InterviewTrend,
    JobDepartmentCount,
    ReportsOverview,
)
from recruitment.reports.service import ReportsService

router = APIRouter(prefix="/api/reports", tags=["Reports"])


@router.get("/overview", response_model=ReportsOverview)
def get_overview(
    principal: Principal = Depends(get_current_principal),
    db: Session = Depends(get_db),
):
    """Funnel rates, application sources and recent activity"""
    return ReportsService(db).overview()


@router.get("/candidates-by-status", response_model=List[CandidateStatusCount])
def get_candidates_by_status(
    principal: Principal = Depends(get_current_principal),
    db: Session = Depends(get_db),
):
    return ReportsService(db).candidates_by_status()


@router.get("/jobs-by-department", response_model=List[JobDepartmentCount])
def get_jobs_by_department(
    principal: Principal = Depends(get_current_principal),
    db: Session = Depends(get_db),
):
    return ReportsService(db).jobs_by_department()


@router.get("/interview-trends", response_model=List[InterviewTrend])
def get_interview_trends(
    principal: Principal = Depends(get_current_principal),
    db: Session = Depends(get_db),
):
    return ReportsService(db).interview_trends()
