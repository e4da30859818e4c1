"""
Candidate service - profiles, job search, applications and documents
"""
from typing import List, Optional, Sequence
from fastapi import UploadFile
from sqlalchemy.orm import Session
import structlog

from recruitment.auth.principal import Principal
from recruitment.auth.repository import UserRepository
from recruitment.candidates import storage
from recruitment.candidates.repository import CandidateRepository
from recruitment.candidates.schemas import (
    ApplicationResponse,
    CandidateResponse,
    ProfileResponse,
    ProfileUpdate,
)
from recruitment.core.exceptions import DuplicateAccountError, JobNotOpenError, NotFoundError, ValidationError
from recruitment.core.schemas import Page
from recruitment.core.timeutils import utcnow
from recruitment.jobs.repository import JobRepository
from recruitment.jobs.schemas import JobResponse
from recruitment.jobs.service import to_job_response
from recruitment.models.candidate import (
    DEFAULT_APPLICATION_SOURCE,
    Candidate,
    CandidateJob,
    CandidateSkill,
    CandidateStatus,
    Document,
)
from recruitment.models.job import JobStatus, Skill
from recruitment.skills.repository import SkillRepository

logger = structlog.get_logger()


def split_skill_names(raw: Optional[str]) -> List[str]:
    """'React, sql ,' -> ['React', 'sql']"""
    if not raw:
        return []
    return [name.strip() for name in raw.split(",") if name.strip()]


def to_candidate_response(candidate: Candidate) -> CandidateResponse:
    return CandidateResponse(
        id=candidate.id,
        user_id=candidate.user_id,
        full_name=candidate.user.full_name,
        email=candidate.user.email,
        experience_years=candidate.experience_years,
        status=candidate.status,
        created_at=candidate.created_at,
        updated_at=candidate.updated_at,
        updated_by=candidate.updated_by_user.full_name if candidate.updated_by_user else None,
        skills=candidate.skill_names,
    )


def to_profile_response(candidate: Candidate) -> ProfileResponse:
    return ProfileResponse(
        id=candidate.id,
        user_id=candidate.user_id,
        full_name=candidate.user.full_name,
        email=candidate.user.email,
        username=candidate.user.username,
        experience_years=candidate.experience_years,
        status=candidate.status,
        skills=candidate.skill_names,
        created_at=candidate.created_at,
        updated_at=candidate.updated_at,
    )


def to_application_response(application: CandidateJob) -> ApplicationResponse:
    job = application.job
    return ApplicationResponse(
        id=application.id,
        job_id=application.job_id,
        job_title=job.title,
        department=job.department,
        location=job.location,
        job_status=job.status,
        applied_date=application.applied_date,
        source=application.source,
    )


class CandidateService:
    """Candidate-facing operations plus the staff views over candidates"""

    def __init__(self, db: Session):
        self.db = db
        self.candidates = CandidateRepository(db)
        self.jobs = JobRepository(db)
        self.skills = SkillRepository(db)

    # Profiles

    def get_by_user_id(self, user_id: int) -> Candidate:
        candidate = self.candidates.get_by_user_id(user_id)
        if not candidate:
            raise NotFoundError("Candidate profile", str(user_id))
        return candidate

    def get_by_id(self, candidate_id: int) -> Candidate:
        candidate = self.candidates.get_by_id(candidate_id)
        if not candidate:
            raise NotFoundError("Candidate", str(candidate_id))
        return candidate

    def get_or_create_for_user(self, user_id: int) -> Candidate:
        """The candidate row is created the first time a candidate-facing view needs it"""
        candidate = self.candidates.get_by_user_id(user_id)
        if candidate:
            return candidate

        if not UserRepository(self.db).get_by_id(user_id):
            raise NotFoundError("User", str(user_id))

        now = utcnow()
        candidate = self.candidates.create(
            Candidate(
                user_id=user_id,
                experience_years=0,
                status=CandidateStatus.APPLIED.value,
                created_at=now,
                updated_at=now,
            )
        )
        logger.info("candidate_profile_created", candidate_id=candidate.id, user_id=user_id)
        return candidate

    def update_profile(self, user_id: int, payload: ProfileUpdate) -> Candidate:
        candidate = self.get_or_create_for_user(user_id)
        user = candidate.user

        if payload.email is not None and payload.email != user.email:
            existing = UserRepository(self.db).get_by_email(payload.email)
            if existing and existing.id != user.id:
                raise DuplicateAccountError("email", "Email already registered")
            user.email = payload.email
        if payload.full_name is not None:
            user.full_name = payload.full_name
        if payload.experience_years is not None:
            candidate.experience_years = payload.experience_years

        if payload.skills is not None:
            wanted = [self.get_or_create_skill(name) for name in payload.skills if name.strip()]
            self._patch_skills(candidate, [skill.id for skill in wanted])

        candidate.updated_at = utcnow()
        candidate = self.candidates.save(candidate)
        logger.info("candidate_profile_updated", candidate_id=candidate.id)
        return candidate

    @staticmethod
    def _patch_skills(candidate: Candidate, skill_ids: Sequence[int]) -> None:
        wanted = list(dict.fromkeys(skill_ids))
        current = {link.skill_id: link for link in candidate.candidate_skills}
        for skill_id, link in current.items():
            if skill_id not in wanted:
                candidate.candidate_skills.remove(link)
        for skill_id in wanted:
            if skill_id not in current:
                candidate.candidate_skills.append(CandidateSkill(skill_id=skill_id))

    def get_or_create_skill(self, name: str) -> Skill:
        """Case-insensitive lookup, creating the skill on a miss"""
        name = name.strip()
        if not name:
            raise ValidationError("Skill name is required")

        skill = self.skills.find_by_name(name)
        if skill:
            return skill

        skill = self.skills.create(name)
        logger.info("skill_created", skill_id=skill.id, name=name)
        return skill

    # Jobs and applications

    def get_open_jobs(
        self,
        page: int = 1,
        page_size: int = 10,
        location: Optional[str] = None,
        experience: Optional[int] = None,
        skills: Optional[str] = None,
        search: Optional[str] = None,
    ) -> Page[JobResponse]:
        page = max(page, 1)
        page_size = max(page_size, 1)
        jobs, total = self.jobs.list_open(
            page=page,
            page_size=page_size,
            location=location.strip() if location else None,
            experience=experience,
            skill_names=split_skill_names(skills),
            search=search.strip() if search else None,
        )
        return Page[JobResponse](
            items=[to_job_response(job) for job in jobs],
            page=page,
            page_size=page_size,
            total=total,
        )

    def apply_for_job(
        self, candidate_id: int, job_id: int, source: str = DEFAULT_APPLICATION_SOURCE
    ) -> bool:
        """False when the candidate already applied for this job"""
        job = self.jobs.get_by_id(job_id)
        if not job:
            raise NotFoundError("Job", str(job_id))

        if self.candidates.get_application(candidate_id, job_id):
            logger.info("application_duplicate", candidate_id=candidate_id, job_id=job_id)
            return False

        if job.status != JobStatus.OPEN.value:
            raise JobNotOpenError(job_id, job.status)

        self.candidates.add_application(
            CandidateJob(
                candidate_id=candidate_id,
                job_id=job_id,
                applied_date=utcnow(),
                source=source or DEFAULT_APPLICATION_SOURCE,
            )
        )
        logger.info("application_created", candidate_id=candidate_id, job_id=job_id)
        return True

    def get_applied_jobs(self, candidate_id: int) -> List[ApplicationResponse]:
        return [
            to_application_response(application)
            for application in self.candidates.list_applications(candidate_id)
        ]

    # Documents

    def upload_document(
        self, candidate_id: int, document_type: str, file_name: str, file_path: str
    ) -> Document:
        """Every upload is a new row; earlier versions are kept"""
        document = self.candidates.add_document(
            Document(
                candidate_id=candidate_id,
                document_type=document_type,
                file_name=file_name,
                file_path=file_path,
                verified=False,
                uploaded_at=utcnow(),
            )
        )
        logger.info(
            "document_uploaded",
            document_id=document.id,
            candidate_id=candidate_id,
            document_type=document_type,
        )
        return document

    def store_upload(self, candidate_id: int, file: UploadFile, document_type: str) -> Document:
        """Write the file and record it; the file is removed again if the row is not saved"""
        file_path = storage.save_upload(file, candidate_id, document_type)
        try:
            return self.upload_document(candidate_id, document_type, file.filename, file_path)
        except Exception as e:
            self.db.rollback()
            storage.remove_file(file_path)
            logger.exception(
                "document_record_failed",
                candidate_id=candidate_id,
                path=file_path,
                error=str(e),
            )
            raise

    def get_documents(self, candidate_id: int) -> List[Document]:
        return self.candidates.list_documents(candidate_id)

    def delete_document(self, document_id: int, candidate_id: int) -> bool:
        """Removes the row and the stored file. False when the candidate owns no such document"""
        document = self.candidates.get_document(document_id)
        if not document or document.candidate_id != candidate_id:
            return False

        file_path = document.file_path
        self.candidates.delete_document(document)
        storage.remove_file(file_path)
        logger.info("document_deleted", document_id=document_id, candidate_id=candidate_id)
        return True

    def verify_document(self, document_id: int, verifier_user_id: int) -> Document:
        document = self.candidates.get_document(document_id)
        if not document:
            raise NotFoundError("Document", str(document_id))

        document.verified = True
        document.verified_at = utcnow()
        document.verified_by = verifier_user_id
        document = self.candidates.save_document(document)
        logger.info("document_verified", document_id=document_id, verified_by=verifier_user_id)
        return document

    # Staff views

    def list_candidates(self) -> List[CandidateResponse]:
        return [to_candidate_response(c) for c in self.candidates.list_all()]

    def update_status(
        self, candidate_id: int, status: CandidateStatus, principal: Principal
    ) -> CandidateResponse:
        candidate = self.get_by_id(candidate_id)
        previous = candidate.status

        candidate.status = CandidateStatus(status).value
        candidate.updated_by = principal.user_id
        candidate.updated_at = utcnow()
        candidate = self.candidates.save(candidate)

        logger.info(
            "candidate_status_updated",
            candidate_id=candidate_id,
            old_status=previous,
            new_status=candidate.status,
            updated_by=principal.user_id,
        )
        return to_candidate_response(candidate)
