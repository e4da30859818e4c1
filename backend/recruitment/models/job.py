"""
Job, skill and job-skill models
"""
import enum
import re

from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship, validates

from recruitment.core.database import Base
from recruitment.core.timeutils import utcnow

_FIRST_NUMBER = re.compile(r"\d+")

MAX_EXPERIENCE_YEARS = 100


def parse_min_experience(value) -> int:
    """
    First integer in a free-text requirement ('3-5 years' -> 3), 0 when there is none.
    Capped at MAX_EXPERIENCE_YEARS.
    """
    if not value:
        return 0
    match = _FIRST_NUMBER.search(str(value))
    return min(int(match.group()), MAX_EXPERIENCE_YEARS) if match else 0


def fold_case(value) -> str:
    """Unicode-aware case folding used for every case-insensitive lookup"""
    return (value or "").casefold()


class JobStatus(str, enum.Enum):
    OPEN = "Open"
    ON_HOLD = "OnHold"
    CLOSED = "Closed"


class Skill(Base):
    """Skill model. Names are unique case-insensitively through name_key"""

    __tablename__ = "skills"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False, index=True)
    name_key = Column(String(300), nullable=False, unique=True, index=True)

    @validates("name")
    def _sync_name_key(self, key, value):
        self.name_key = fold_case(value)
        return value


class Job(Base):
    """Job posting"""

    __tablename__ = "jobs"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(200), nullable=False, index=True)
    department = Column(String(50), nullable=False)
    description = Column(Text, nullable=False)
    min_experience = Column(String(20), nullable=False, default="")
    min_experience_years = Column(Integer, nullable=False, default=0, index=True)
    location = Column(String(100), nullable=False)
    # Case-folded copies for substring search
    location_key = Column(String(300), nullable=False, default="")
    search_text = Column(Text, nullable=False, default="")
    status = Column(String(20), nullable=False, default=JobStatus.OPEN.value, index=True)

    closed_reason = Column(Text)
    selected_candidate_id = Column(Integer, ForeignKey("candidates.id", ondelete="SET NULL"))

    # Metadata
    created_by = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"))
    created_at = Column(DateTime, nullable=False, default=utcnow, index=True)
    updated_at = Column(DateTime)

    # Relationships
    created_by_user = relationship("User", back_populates="created_jobs")
    job_skills = relationship(
        "JobSkill", back_populates="job", cascade="all, delete-orphan", lazy="selectin"
    )
    applications = relationship("CandidateJob", back_populates="job", cascade="all, delete-orphan")
    interviews = relationship("Interview", back_populates="job", cascade="all, delete-orphan")
    offers = relationship("Offer", back_populates="job", cascade="all, delete-orphan")

    @validates("min_experience")
    def _sync_min_experience_years(self, key, value):
        self.min_experience_years = parse_min_experience(value)
        return value

    @validates("location")
    def _sync_location_key(self, key, value):
        self.location_key = fold_case(value)
        return value

    @validates("title", "department", "description")
    def _sync_search_text(self, key, value):
        fields = {"title": self.title, "department": self.department, "description": self.description}
        fields[key] = value
        self.search_text = "\n".join(fold_case(text) for text in fields.values())
        return value

    @property
    def skills(self) -> list[Skill]:
        return [link.skill for link in self.job_skills]


class JobSkill(Base):
    """Skills required by a job"""

    __tablename__ = "job_skills"

    id = Column(Integer, primary_key=True, index=True)
    job_id = Column(Integer, ForeignKey("jobs.id", ondelete="CASCADE"), nullable=False, index=True)
    skill_id = Column(Integer, ForeignKey("skills.id", ondelete="CASCADE"), nullable=False, index=True)

    job = relationship("Job", back_populates="job_skills")
    skill = relationship("Skill", lazy="joined")

    __table_args__ = (
        UniqueConstraint("job_id", "skill_id", name="uq_job_skill"),
    )
