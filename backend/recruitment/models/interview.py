"""
Interview, interviewer and feedback models
"""
import enum

from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey
from sqlalchemy.orm import relationship

from recruitment.core.database import Base
from recruitment.core.timeutils import utcnow


class InterviewStatus(str, enum.Enum):
    SCHEDULED = "Scheduled"
    OTHER_INTERVIEW = "Other Interview"
    SELECTED = "Selected"
    REJECTED = "Rejected"
    CANCELLED = "Cancelled"


# Statuses that stamp completed_at
TERMINAL_INTERVIEW_STATUSES = frozenset({InterviewStatus.SELECTED.value, InterviewStatus.REJECTED.value})


class Interview(Base):
    """One interview round for a (candidate, job) pair"""

    __tablename__ = "interviews"

    id = Column(Integer, primary_key=True, index=True)
    candidate_id = Column(Integer, ForeignKey("candidates.id", ondelete="CASCADE"), nullable=False, index=True)
    job_id = Column(Integer, ForeignKey("jobs.id", ondelete="CASCADE"), nullable=False, index=True)

    scheduled_date = Column(DateTime, nullable=False, index=True)
    interview_type = Column(String(50), nullable=False)  # Technical, HR, Panel, Online Test
    round_no = Column(Integer, nullable=False, default=1)
    status = Column(String(20), nullable=False, default=InterviewStatus.SCHEDULED.value, index=True)

    completed_at = Column(DateTime)
    created_at = Column(DateTime, nullable=False, default=utcnow)

    # Relationships
    candidate = relationship("Candidate", back_populates="interviews")
    job = relationship("Job", back_populates="interviews")
    interviewers = relationship(
        "Interviewer", back_populates="interview", cascade="all, delete-orphan", lazy="selectin"
    )
    feedbacks = relationship(
        "Feedback",
        back_populates="interview",
        cascade="all, delete-orphan",
        order_by="Feedback.created_at.desc()",
        lazy="selectin",
    )


class Interviewer(Base):
    """Assignment of a user to an interview panel"""

    __tablename__ = "interviewers"

    id = Column(Integer, primary_key=True, index=True)
    interview_id = Column(Integer, ForeignKey("interviews.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    interview = relationship("Interview", back_populates="interviewers")
    user = relationship("User", lazy="joined")


class Feedback(Base):
    """Interviewer feedback; several rows per interview are allowed"""

    __tablename__ = "feedbacks"

    id = Column(Integer, primary_key=True, index=True)
    interview_id = Column(Integer, ForeignKey("interviews.id", ondelete="CASCADE"), nullable=False, index=True)
    interviewer_id = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"), index=True)
    rating = Column(Integer, nullable=False)  # 1-5
    comments = Column(Text)
    created_at = Column(DateTime, nullable=False, default=utcnow)

    interview = relationship("Interview", back_populates="feedbacks")
    interviewer = relationship("User", lazy="joined")
