"""
Offer model
"""
import enum

from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship

from recruitment.core.database import Base
from recruitment.core.timeutils import utcnow


class OfferStatus(str, enum.Enum):
    OFFERED = "Offered"
    ACCEPTED = "Accepted"
    REJECTED = "Rejected"
    JOINED = "Joined"


class Offer(Base):
    """Job offer extended to a candidate"""

    __tablename__ = "offers"

    id = Column(Integer, primary_key=True, index=True)
    candidate_id = Column(Integer, ForeignKey("candidates.id", ondelete="CASCADE"), nullable=False, index=True)
    job_id = Column(Integer, ForeignKey("jobs.id", ondelete="CASCADE"), nullable=False, index=True)

    offer_date = Column(DateTime, nullable=False, default=utcnow)
    joining_date = Column(DateTime)
    status = Column(String(20), nullable=False, default=OfferStatus.OFFERED.value, index=True)
    status_updated_at = Column(DateTime)

    candidate = relationship("Candidate", back_populates="offers")
    job = relationship("Job", back_populates="offers")
