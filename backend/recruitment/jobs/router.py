"""
Job routes
"""
from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from recruitment.core.database import get_db
from recruitment.core.schemas import MessageResponse
from recruitment.auth.dependencies import require_any_role
from recruitment.auth.principal import Principal
from recruitment.jobs.schemas import JobCreate, JobResponse, JobUpdate
from recruitment.jobs.service import JobService
from recruitment.models.user import RoleName
from recruitment.skills.repository import SkillRepository
from recruitment.skills.schemas import SkillResponse

router = APIRouter(prefix="/api/jobs", tags=["Jobs"])

job_staff = require_any_role(
    RoleName.ADMIN, RoleName.HR, RoleName.RECRUITER, RoleName.INTERVIEWER, RoleName.REVIEWER
)


@router.get("", response_model=List[JobResponse])
def list_jobs(
    principal: Principal = Depends(job_staff),
    db: Session = Depends(get_db),
):
    """List all jobs, newest first"""
    return JobService(db).list_jobs()


@router.get("/skills", response_model=List[SkillResponse])
def list_skills(
    principal: Principal = Depends(job_staff),
    db: Session = Depends(get_db),
):
    """Skills selectable on a job"""
    return SkillRepository(db).list_all()


@router.get("/{job_id}", response_model=JobResponse)
def get_job(
    job_id: int,
    principal: Principal = Depends(job_staff),
    db: Session = Depends(get_db),
):
    return JobService(db).get_job(job_id)


@router.post("", response_model=JobResponse, status_code=status.HTTP_201_CREATED)
def create_job(
    job_data: JobCreate,
    principal: Principal = Depends(job_staff),
    db: Session = Depends(get_db),
):
    """Create a job; at least one skill is required"""
    return JobService(db).create_job(job_data, principal)


@router.put("/{job_id}", response_model=JobResponse)
def update_job(
    job_id: int,
    job_data: JobUpdate,
    principal: Principal = Depends(job_staff),
    db: Session = Depends(get_db),
):
    """Update a job. Closing a job requires a reason"""
    return JobService(db).update_job(job_id, job_data)


@router.delete("/{job_id}", response_model=MessageResponse)
def delete_job(
    job_id: int,
    principal: Principal = Depends(job_staff),
    db: Session = Depends(get_db),
):
    JobService(db).delete_job(job_id)
    return MessageResponse(message="Job deleted successfully")
