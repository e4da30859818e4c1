"""
User directory routes
"""
from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from recruitment.core.database import get_db
from recruitment.auth.dependencies import get_current_principal
from recruitment.auth.principal import Principal
from recruitment.auth.repository import UserRepository
from recruitment.auth.schemas import UserResponse
from recruitment.models.user import RoleName

router = APIRouter(prefix="/api/users", tags=["Users"])


@router.get("/interviewers", response_model=List[UserResponse])
def list_interviewers(
    principal: Principal = Depends(get_current_principal),
    db: Session = Depends(get_db),
):
    """Active users who can sit on an interview panel"""
    return UserRepository(db).list_active_with_role(RoleName.INTERVIEWER)
