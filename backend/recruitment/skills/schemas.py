"""
Skill Pydantic schemas
"""
from recruitment.core.schemas import CamelModel


class SkillResponse(CamelModel):
    id: int
    name: str
