"""
Candidate, application and document data access
"""
from typing import List, Optional
from sqlalchemy.orm import Session, joinedload, selectinload

from recruitment.models.candidate import Candidate, CandidateJob, Document


class CandidateRepository:
    def __init__(self, db: Session):
        self.db = db

    def _query(self):
        return self.db.query(Candidate).options(
            joinedload(Candidate.user),
            joinedload(Candidate.updated_by_user),
        )

    def get_by_id(self, candidate_id: int) -> Optional[Candidate]:
        return self._query().filter(Candidate.id == candidate_id).first()

    def get_by_user_id(self, user_id: int) -> Optional[Candidate]:
        return self._query().filter(Candidate.user_id == user_id).first()

    def list_all(self, limit: Optional[int] = None) -> List[Candidate]:
        query = self._query().order_by(Candidate.created_at.desc(), Candidate.id.desc())
        if limit:
            query = query.limit(limit)
        return query.all()

    def create(self, candidate: Candidate) -> Candidate:
        self.db.add(candidate)
        self.db.commit()
        self.db.refresh(candidate)
        return candidate

    def save(self, candidate: Candidate) -> Candidate:
        self.db.commit()
        self.db.refresh(candidate)
        return candidate

    # Applications

    def get_application(self, candidate_id: int, job_id: int) -> Optional[CandidateJob]:
        return (
            self.db.query(CandidateJob)
            .filter(CandidateJob.candidate_id == candidate_id, CandidateJob.job_id == job_id)
            .first()
        )

    def add_application(self, application: CandidateJob) -> CandidateJob:
        self.db.add(application)
        self.db.commit()
        self.db.refresh(application)
        return application

    def list_applications(self, candidate_id: int) -> List[CandidateJob]:
        return (
            self.db.query(CandidateJob)
            .options(joinedload(CandidateJob.job))
            .filter(CandidateJob.candidate_id == candidate_id)
            .order_by(CandidateJob.applied_date.desc(), CandidateJob.id.desc())
            .all()
        )

    # Documents

    def get_document(self, document_id: int) -> Optional[Document]:
        return self.db.query(Document).filter(Document.id == document_id).first()

    def list_documents(self, candidate_id: int) -> List[Document]:
        return (
            self.db.query(Document)
            .options(selectinload(Document.verified_by_user))
            .filter(Document.candidate_id == candidate_id)
            .order_by(Document.uploaded_at.desc(), Document.id.desc())
            .all()
        )

    def add_document(self, document: Document) -> Document:
        self.db.add(document)
        self.db.commit()
        self.db.refresh(document)
        return document

    def save_document(self, document: Document) -> Document:
        self.db.commit()
        self.db.refresh(document)
        return document

    def delete_document(self, document: Document) -> None:
        self.db.delete(document)
        self.db.commit()
