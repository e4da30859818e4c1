"""
Role dashboards
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
import structlog

from recruitment.core.database import get_db
from recruitment.auth.dependencies import get_current_principal, require_role
from recruitment.auth.principal import Principal
from recruitment.dashboard.schemas import (
    AdminDashboard,
    CandidateDashboard,
    HRDashboard,
    InterviewerDashboard,
    OthersDashboard,
    ReviewerDashboard,
)
from recruitment.dashboard.service import DashboardService
from recruitment.models.user import RoleName

router = APIRouter(prefix="/api/dashboard", tags=["Dashboard"])
logger = structlog.get_logger()


@router.get("/admin", response_model=AdminDashboard)
def admin_dashboard(
    principal: Principal = Depends(require_role(RoleName.ADMIN)),
    db: Session = Depends(get_db),
):
    logger.info("dashboard_viewed", dashboard="admin", user_id=principal.user_id)
    return DashboardService(db).admin_view(principal)


@router.get("/hr", response_model=HRDashboard)
def hr_dashboard(
    principal: Principal = Depends(require_role(RoleName.HR)),
    db: Session = Depends(get_db),
):
    logger.info("dashboard_viewed", dashboard="hr", user_id=principal.user_id)
    return DashboardService(db).hr_view(principal)


@router.get("/recruiter", response_model=AdminDashboard)
def recruiter_dashboard(
    principal: Principal = Depends(require_role(RoleName.RECRUITER)),
    db: Session = Depends(get_db),
):
    logger.info("dashboard_viewed", dashboard="recruiter", user_id=principal.user_id)
    return DashboardService(db).recruiter_view(principal)


@router.get("/interviewer", response_model=InterviewerDashboard)
def interviewer_dashboard(
    principal: Principal = Depends(require_role(RoleName.INTERVIEWER)),
    db: Session = Depends(get_db),
):
    """Only interviews the caller sits on"""
    logger.info("dashboard_viewed", dashboard="interviewer", user_id=principal.user_id)
    return DashboardService(db).interviewer_view(principal)


@router.get("/reviewer", response_model=ReviewerDashboard)
def reviewer_dashboard(
    principal: Principal = Depends(require_role(RoleName.REVIEWER)),
    db: Session = Depends(get_db),
):
    logger.info("dashboard_viewed", dashboard="reviewer", user_id=principal.user_id)
    return DashboardService(db).reviewer_view(principal)


@router.get("/candidate", response_model=CandidateDashboard)
def candidate_dashboard(
    principal: Principal = Depends(require_role(RoleName.CANDIDATE)),
    db: Session = Depends(get_db),
):
    """Own applications, interviews and offers; Selected interviews show up as offers"""
    logger.info("dashboard_viewed", dashboard="candidate", user_id=principal.user_id)
    return DashboardService(db).candidate_view(principal)


@router.get("/others", response_model=OthersDashboard)
def others_dashboard(
    principal: Principal = Depends(get_current_principal),
    db: Session = Depends(get_db),
):
    """Fallback for multi-role staff"""
    logger.info("dashboard_viewed", dashboard="others", user_id=principal.user_id)
    return DashboardService(db).others_view(principal)
