"""
Candidate routes

/api/candidate is the candidate's own surface, /api/candidates the staff view.
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, File, Form, Query, UploadFile
from sqlalchemy.orm import Session

from recruitment.core.database import get_db
from recruitment.core.exceptions import AlreadyAppliedError, NotFoundError, ValidationError
from recruitment.core.schemas import MessageResponse, Page
from recruitment.auth.dependencies import STAFF_ROLES, require_any_role, require_role
from recruitment.auth.principal import Principal
from recruitment.candidates import storage
from recruitment.candidates.schemas import (
    ApplicationResponse,
    CandidateResponse,
    CandidateStatusUpdate,
    DocumentResponse,
    ProfileResponse,
    ProfileUpdate,
)
from recruitment.candidates.service import CandidateService, to_profile_response
from recruitment.jobs.schemas import JobResponse
from recruitment.models.user import RoleName

router = APIRouter(prefix="/api/candidate", tags=["Candidate"])
staff_router = APIRouter(prefix="/api/candidates", tags=["Candidates"])

candidate_only = require_role(RoleName.CANDIDATE)


@router.get("/jobs", response_model=Page[JobResponse])
def get_open_jobs(
    page: int = Query(1, ge=1),
    page_size: int = Query(10, ge=1, le=100, alias="pageSize"),
    location: Optional[str] = None,
    experience: Optional[int] = Query(None, ge=0),
    skills: Optional[str] = Query(None, description="Comma separated skill names"),
    search: Optional[str] = None,
    principal: Principal = Depends(candidate_only),
    db: Session = Depends(get_db),
):
    """Open jobs, newest first"""
    return CandidateService(db).get_open_jobs(
        page=page,
        page_size=page_size,
        location=location,
        experience=experience,
        skills=skills,
        search=search,
    )


@router.get("/profile", response_model=ProfileResponse)
def get_profile(
    principal: Principal = Depends(candidate_only),
    db: Session = Depends(get_db),
):
    candidate = CandidateService(db).get_or_create_for_user(principal.user_id)
    return to_profile_response(candidate)


@router.put("/profile", response_model=ProfileResponse)
def update_profile(
    profile_data: ProfileUpdate,
    principal: Principal = Depends(candidate_only),
    db: Session = Depends(get_db),
):
    candidate = CandidateService(db).update_profile(principal.user_id, profile_data)
    return to_profile_response(candidate)


@router.post("/apply/{job_id}", response_model=MessageResponse)
def apply_for_job(
    job_id: int,
    principal: Principal = Depends(candidate_only),
    db: Session = Depends(get_db),
):
    service = CandidateService(db)
    candidate = service.get_or_create_for_user(principal.user_id)

    if not service.apply_for_job(candidate.id, job_id):
        raise AlreadyAppliedError(job_id)

    return MessageResponse(message="Successfully applied for the job")


@router.get("/applications", response_model=List[ApplicationResponse])
def get_applications(
    principal: Principal = Depends(candidate_only),
    db: Session = Depends(get_db),
):
    service = CandidateService(db)
    candidate = service.get_or_create_for_user(principal.user_id)
    return service.get_applied_jobs(candidate.id)


def _store_upload(db: Session, principal: Principal, file: UploadFile, document_type: str):
    service = CandidateService(db)
    candidate = service.get_or_create_for_user(principal.user_id)
    return service.store_upload(candidate.id, file, document_type)


@router.post("/upload-cv", response_model=DocumentResponse)
def upload_cv(
    file: UploadFile = File(...),
    principal: Principal = Depends(candidate_only),
    db: Session = Depends(get_db),
):
    """Upload a CV (pdf, doc, docx)"""
    return _store_upload(db, principal, file, storage.CV_DOCUMENT_TYPE)


@router.post("/upload-document", response_model=DocumentResponse)
def upload_document(
    file: UploadFile = File(...),
    document_type: str = Form(..., alias="documentType"),
    principal: Principal = Depends(candidate_only),
    db: Session = Depends(get_db),
):
    """Upload a supporting document of any type"""
    if not document_type.strip():
        raise ValidationError("Document type is required")
    return _store_upload(db, principal, file, document_type.strip())


@router.get("/documents", response_model=List[DocumentResponse])
def get_documents(
    principal: Principal = Depends(candidate_only),
    db: Session = Depends(get_db),
):
    service = CandidateService(db)
    candidate = service.get_or_create_for_user(principal.user_id)
    return service.get_documents(candidate.id)


@router.delete("/document/{document_id}", response_model=MessageResponse)
def delete_document(
    document_id: int,
    principal: Principal = Depends(candidate_only),
    db: Session = Depends(get_db),
):
    service = CandidateService(db)
    candidate = service.get_or_create_for_user(principal.user_id)

    if not service.delete_document(document_id, candidate.id):
        raise NotFoundError("Document", str(document_id))

    return MessageResponse(message="Document deleted successfully")


@router.post("/verify-document/{document_id}", response_model=DocumentResponse)
def verify_document(
    document_id: int,
    principal: Principal = Depends(
        require_any_role(RoleName.ADMIN, RoleName.HR, RoleName.RECRUITER, RoleName.REVIEWER)
    ),
    db: Session = Depends(get_db),
):
    return CandidateService(db).verify_document(document_id, principal.user_id)


@staff_router.get("", response_model=List[CandidateResponse])
def list_candidates(
    principal: Principal = Depends(require_any_role(*STAFF_ROLES)),
    db: Session = Depends(get_db),
):
    """All candidates, newest first"""
    return CandidateService(db).list_candidates()


@staff_router.get("/{candidate_id}/documents", response_model=List[DocumentResponse])
def get_candidate_documents(
    candidate_id: int,
    principal: Principal = Depends(require_any_role(*STAFF_ROLES)),
    db: Session = Depends(get_db),
):
    service = CandidateService(db)
    candidate = service.get_by_id(candidate_id)
    return service.get_documents(candidate.id)


@staff_router.put("/{candidate_id}/status", response_model=CandidateResponse)
def update_candidate_status(
    candidate_id: int,
    status_data: CandidateStatusUpdate,
    principal: Principal = Depends(require_any_role(*STAFF_ROLES)),
    db: Session = Depends(get_db),
):
    return CandidateService(db).update_status(candidate_id, status_data.status, principal)
