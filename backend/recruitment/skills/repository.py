"""
Skill data access
"""
from typing import Iterable, List, Optional
from sqlalchemy.orm import Session

from recruitment.models.job import Skill, fold_case


class SkillRepository:
    def __init__(self, db: Session):
        self.db = db

    def list_all(self) -> List[Skill]:
        return self.db.query(Skill).order_by(Skill.name).all()

    def get_by_ids(self, skill_ids: Iterable[int]) -> List[Skill]:
        ids = list(skill_ids)
        if not ids:
            return []
        return self.db.query(Skill).filter(Skill.id.in_(ids)).all()

    def find_by_name(self, name: str) -> Optional[Skill]:
        """Case-insensitive lookup"""
        return (
            self.db.query(Skill)
            .filter(Skill.name_key == fold_case(name))
            .first()
        )

    def create(self, name: str) -> Skill:
        skill = Skill(name=name)
        self.db.add(skill)
        self.db.commit()
        self.db.refresh(skill)
        return skill
