"""
Candidate models
"""
import enum

from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Boolean, UniqueConstraint
from sqlalchemy.orm import relationship

from recruitment.core.database import Base
from recruitment.core.timeutils import utcnow


class CandidateStatus(str, enum.Enum):
    APPLIED = "Applied"
    SHORTLISTED = "Shortlisted"
    INTERVIEW = "Interview"
    SELECTED = "Selected"
    REJECTED = "Rejected"
    ON_HOLD = "On Hold"


DEFAULT_APPLICATION_SOURCE = "Company Website"


class Candidate(Base):
    """Candidate profile, one per candidate user"""

    __tablename__ = "candidates"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), unique=True, nullable=False)
    experience_years = Column(Integer, nullable=False, default=0)

    # Pipeline status, independent of any single application
    status = Column(String(50), nullable=False, default=CandidateStatus.APPLIED.value, index=True)
    updated_by = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"))

    # Metadata
    created_at = Column(DateTime, nullable=False, default=utcnow, index=True)
    updated_at = Column(DateTime)

    # Relationships
    user = relationship("User", back_populates="candidate", foreign_keys=[user_id])
    updated_by_user = relationship("User", foreign_keys=[updated_by])
    candidate_skills = relationship(
        "CandidateSkill", back_populates="candidate", cascade="all, delete-orphan", lazy="selectin"
    )
    applications = relationship(
        "CandidateJob", back_populates="candidate", cascade="all, delete-orphan"
    )
    interviews = relationship("Interview", back_populates="candidate", cascade="all, delete-orphan")
    documents = relationship("Document", back_populates="candidate", cascade="all, delete-orphan")
    offers = relationship("Offer", back_populates="candidate", cascade="all, delete-orphan")

    @property
    def skill_names(self) -> list[str]:
        return [link.skill.name for link in self.candidate_skills]


class CandidateSkill(Base):
    """Skills claimed by a candidate"""

    __tablename__ = "candidate_skills"

    id = Column(Integer, primary_key=True, index=True)
    candidate_id = Column(Integer, ForeignKey("candidates.id", ondelete="CASCADE"), nullable=False, index=True)
    skill_id = Column(Integer, ForeignKey("skills.id", ondelete="CASCADE"), nullable=False, index=True)

    candidate = relationship("Candidate", back_populates="candidate_skills")
    skill = relationship("Skill", lazy="joined")

    __table_args__ = (
        UniqueConstraint("candidate_id", "skill_id", name="uq_candidate_skill"),
    )


class CandidateJob(Base):
    """Application of a candidate to a job. One per pair, checked before insert"""

    __tablename__ = "candidate_jobs"

    id = Column(Integer, primary_key=True, index=True)
    candidate_id = Column(Integer, ForeignKey("candidates.id", ondelete="CASCADE"), nullable=False, index=True)
    job_id = Column(Integer, ForeignKey("jobs.id", ondelete="CASCADE"), nullable=False, index=True)
    applied_date = Column(DateTime, nullable=False, default=utcnow, index=True)
    source = Column(String(50), nullable=False, default=DEFAULT_APPLICATION_SOURCE)

    candidate = relationship("Candidate", back_populates="applications")
    job = relationship("Job", back_populates="applications")


class Document(Base):
    """Uploaded candidate document (CV, certificates, ...)"""

    __tablename__ = "documents"

    id = Column(Integer, primary_key=True, index=True)
    candidate_id = Column(Integer, ForeignKey("candidates.id", ondelete="CASCADE"), nullable=False, index=True)
    document_type = Column(String(100), nullable=False)
    file_name = Column(String(255))  # name as uploaded by the client
    file_path = Column(String(500), nullable=False)

    verified = Column(Boolean, nullable=False, default=False)
    uploaded_at = Column(DateTime, nullable=False, default=utcnow)
    verified_at = Column(DateTime)
    verified_by = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"))

    candidate = relationship("Candidate", back_populates="documents")
    verified_by_user = relationship("User")
