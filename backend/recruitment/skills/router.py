"""
Skill catalogue routes
"""
from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from recruitment.core.database import get_db
from recruitment.auth.dependencies import get_current_principal
from recruitment.auth.principal import Principal
from recruitment.skills.repository import SkillRepository
from recruitment.skills.schemas import SkillResponse

router = APIRouter(prefix="/api/skills", tags=["Skills"])


@router.get("", response_model=List[SkillResponse])
def list_skills(
    principal: Principal = Depends(get_current_principal),
    db: Session = Depends(get_db),
):
    """All skills, alphabetically"""
    return SkillRepository(db).list_all()
