"""
Job data access
"""
from typing import List, Optional, Sequence, Tuple
from sqlalchemy.orm import Session, joinedload

from recruitment.models.job import Job, JobSkill, JobStatus, Skill, fold_case


def _icontains(key_column, term: str):
    """Substring match against a column that already holds case-folded text"""
    return key_column.contains(fold_case(term), autoescape=True)


class JobRepository:
    def __init__(self, db: Session):
        self.db = db

    def _query(self):
        return self.db.query(Job).options(joinedload(Job.created_by_user))

    def get_all(self) -> List[Job]:
        return self._query().order_by(Job.created_at.desc(), Job.id.desc()).all()

    def get_by_id(self, job_id: int) -> Optional[Job]:
        return self._query().filter(Job.id == job_id).first()

    def list_open(
        self,
        page: int = 1,
        page_size: int = 10,
        location: Optional[str] = None,
        experience: Optional[int] = None,
        skill_names: Optional[Sequence[str]] = None,
        search: Optional[str] = None,
    ) -> Tuple[List[Job], int]:
        """Open jobs matching every given filter, newest first, plus the unpaged total"""
        query = self.db.query(Job).filter(Job.status == JobStatus.OPEN.value)

        if location:
            query = query.filter(_icontains(Job.location_key, location))

        if experience is not None:
            # Jobs whose bar the candidate can meet
            query = query.filter(Job.min_experience_years <= experience)

        if skill_names:
            keys = [fold_case(name) for name in skill_names]
            query = query.filter(
                Job.job_skills.any(JobSkill.skill.has(Skill.name_key.in_(keys)))
            )

        if search:
            query = query.filter(_icontains(Job.search_text, search))

        total = query.count()
        jobs = (
            query.order_by(Job.created_at.desc(), Job.id.desc())
            .offset((page - 1) * page_size)
            .limit(page_size)
            .all()
        )
        return jobs, total

    def create(self, job: Job) -> Job:
        self.db.add(job)
        self.db.commit()
        self.db.refresh(job)
        return job

    def save(self, job: Job) -> Job:
        self.db.commit()
        self.db.refresh(job)
        return job

    def delete(self, job: Job) -> None:
        self.db.delete(job)
        self.db.commit()
