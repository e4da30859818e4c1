"""
Offer Pydantic schemas
"""
from typing import Optional
from datetime import datetime

from recruitment.core.schemas import CamelModel
from recruitment.models.offer import OfferStatus


class OfferCreate(CamelModel):
    candidate_id: int
    job_id: int
    offer_date: Optional[datetime] = None  # defaults to now
    joining_date: Optional[datetime] = None


class OfferStatusUpdate(CamelModel):
    status: OfferStatus


class OfferResponse(CamelModel):
    id: int
    candidate_id: int
    candidate_name: str
    job_id: int
    job_title: str
    offer_date: datetime
    joining_date: Optional[datetime] = None
    status: str
    status_updated_at: Optional[datetime] = None
