"""
Job service - job postings and their required skills
"""
from typing import Iterable, List
from sqlalchemy.orm import Session
import structlog

from recruitment.auth.principal import Principal
from recruitment.core.exceptions import NotFoundError, ValidationError
from recruitment.core.timeutils import utcnow
from recruitment.jobs.repository import JobRepository
from recruitment.jobs.schemas import JobCreate, JobResponse, JobUpdate
from recruitment.models.job import Job, JobSkill, JobStatus
from recruitment.skills.repository import SkillRepository
from recruitment.skills.schemas import SkillResponse

logger = structlog.get_logger()


def to_job_response(job: Job) -> JobResponse:
    return JobResponse(
        id=job.id,
        title=job.title,
        department=job.department,
        description=job.description,
        min_experience=job.min_experience,
        location=job.location,
        status=job.status,
        created_by=job.created_by,
        created_by_name=job.created_by_user.full_name if job.created_by_user else "",
        created_at=job.created_at,
        updated_at=job.updated_at,
        closed_reason=job.closed_reason,
        selected_candidate_id=job.selected_candidate_id,
        skills=[SkillResponse.model_validate(skill) for skill in job.skills],
    )


class JobService:
    """CRUD over jobs"""

    def __init__(self, db: Session):
        self.db = db
        self.jobs = JobRepository(db)
        self.skills = SkillRepository(db)

    def _get(self, job_id: int) -> Job:
        job = self.jobs.get_by_id(job_id)
        if not job:
            raise NotFoundError("Job", str(job_id))
        return job

    def _check_skill_ids(self, skill_ids: Iterable[int]) -> List[int]:
        wanted = list(dict.fromkeys(skill_ids))
        found = {skill.id for skill in self.skills.get_by_ids(wanted)}
        missing = [skill_id for skill_id in wanted if skill_id not in found]
        if missing:
            raise ValidationError("Unknown skill ids", details={"skill_ids": missing})
        return wanted

    def list_jobs(self) -> List[JobResponse]:
        return [to_job_response(job) for job in self.jobs.get_all()]

    def get_job(self, job_id: int) -> JobResponse:
        return to_job_response(self._get(job_id))

    def create_job(self, payload: JobCreate, principal: Principal) -> JobResponse:
        skill_ids = self._check_skill_ids(ref.skill_id for ref in payload.skills)

        # Job and its skill rows go out in one commit
        job = Job(
            title=payload.title,
            department=payload.department,
            description=payload.description,
            min_experience=payload.min_experience,
            location=payload.location,
            status=JobStatus.OPEN.value,
            created_by=principal.user_id,
            created_at=utcnow(),
        )
        job.job_skills = [JobSkill(skill_id=skill_id) for skill_id in skill_ids]
        job = self.jobs.create(job)

        logger.info("job_created", job_id=job.id, title=job.title, created_by=principal.user_id)
        return to_job_response(job)

    def update_job(self, job_id: int, payload: JobUpdate) -> JobResponse:
        job = self._get(job_id)
        wanted = self._check_skill_ids(payload.skill_ids)

        job.title = payload.title
        job.department = payload.department
        job.description = payload.description
        job.min_experience = payload.min_experience
        job.location = payload.location
        job.status = payload.status.value
        job.closed_reason = payload.closed_reason
        job.selected_candidate_id = payload.selected_candidate_id
        job.updated_at = utcnow()

        added, removed = self._patch_skills(job, wanted)
        job = self.jobs.save(job)

        logger.info(
            "job_updated",
            job_id=job.id,
            status=job.status,
            skills_added=added,
            skills_removed=removed,
        )
        return to_job_response(job)

    @staticmethod
    def _patch_skills(job: Job, wanted: List[int]):
        """Touch only the skill links that actually change"""
        current = {link.skill_id: link for link in job.job_skills}
        removed = [skill_id for skill_id in current if skill_id not in wanted]
        added = [skill_id for skill_id in wanted if skill_id not in current]

        for skill_id in removed:
            job.job_skills.remove(current[skill_id])
        for skill_id in added:
            job.job_skills.append(JobSkill(skill_id=skill_id))
        return added, removed

    def delete_job(self, job_id: int) -> None:
        job = self._get(job_id)
        self.jobs.delete(job)
        logger.info("job_deleted", job_id=job_id)
