"""
Job Pydantic schemas
"""
from typing import Optional, List
from pydantic import Field, model_validator
from datetime import datetime

from recruitment.core.schemas import CamelModel
from recruitment.models.job import JobStatus
from recruitment.skills.schemas import SkillResponse


class JobSkillRef(CamelModel):
    """Reference to an existing skill"""
    skill_id: int


class JobCreate(CamelModel):
    """Job creation schema"""
    title: str = Field(..., min_length=1, max_length=200)
    department: str = Field(..., min_length=1, max_length=50)
    description: str = Field(..., min_length=1)
    min_experience: str = Field(..., max_length=20)
    location: str = Field(..., min_length=1, max_length=100)
    skills: List[JobSkillRef] = Field(..., min_length=1)


class JobUpdate(CamelModel):
    """Job update schema"""
    title: str = Field(..., min_length=1, max_length=200)
    department: str = Field(..., min_length=1, max_length=50)
    description: str = Field(..., min_length=1)
    min_experience: str = Field(..., max_length=20)
    location: str = Field(..., min_length=1, max_length=100)
    skill_ids: List[int] = Field(default_factory=list)
    status: JobStatus = JobStatus.OPEN
    closed_reason: Optional[str] = None
    selected_candidate_id: Optional[int] = None

    @model_validator(mode="after")
    def closed_needs_reason(self):
        if self.status == JobStatus.CLOSED and not (self.closed_reason or "").strip():
            raise ValueError("closedReason is required when status is Closed")
        return self


class JobResponse(CamelModel):
    """Job response schema"""
    id: int
    title: str
    department: str
    description: str
    min_experience: str
    location: str
    status: str
    created_by: Optional[int]
    created_by_name: str = ""
    created_at: datetime
    updated_at: Optional[datetime] = None
    closed_reason: Optional[str] = None
    selected_candidate_id: Optional[int] = None
    skills: List[SkillResponse] = []
