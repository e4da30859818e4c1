"""
Candidate Pydantic schemas
"""
from typing import Optional, List
from pydantic import EmailStr, Field
from datetime import datetime

from recruitment.core.schemas import CamelModel
from recruitment.models.candidate import CandidateStatus


class CandidateResponse(CamelModel):
    """Candidate as seen by staff"""
    id: int
    user_id: int
    full_name: str
    email: str
    experience_years: int
    status: str
    created_at: datetime
    updated_at: Optional[datetime] = None
    updated_by: Optional[str] = None  # name of the last staff member to change the status
    skills: List[str] = []


class ProfileResponse(CamelModel):
    """The candidate's own profile"""
    id: int
    user_id: int
    full_name: str
    email: str
    username: str
    experience_years: int
    status: str
    skills: List[str] = []
    created_at: datetime
    updated_at: Optional[datetime] = None


class ProfileUpdate(CamelModel):
    """Profile update; omitted fields are left unchanged"""
    full_name: Optional[str] = Field(None, min_length=1, max_length=100)
    email: Optional[EmailStr] = None
    experience_years: Optional[int] = Field(None, ge=0, le=60)
    skills: Optional[List[str]] = None


class CandidateStatusUpdate(CamelModel):
    status: CandidateStatus


class DocumentResponse(CamelModel):
    """Document response schema"""
    id: int
    candidate_id: int
    document_type: str
    file_name: Optional[str] = None
    file_path: str
    verified: bool
    uploaded_at: datetime
    verified_at: Optional[datetime] = None
    verified_by: Optional[int] = None


class ApplicationResponse(CamelModel):
    """One job application"""
    id: int
    job_id: int
    job_title: str
    department: str
    location: str
    job_status: str
    applied_date: datetime
    source: str
