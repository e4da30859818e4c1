"""
Offer routes
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from recruitment.core.database import get_db
from recruitment.auth.dependencies import STAFF_ROLES, require_any_role
from recruitment.auth.principal import Principal
from recruitment.models.user import RoleName
from recruitment.offers.schemas import OfferCreate, OfferResponse, OfferStatusUpdate
from recruitment.offers.service import OfferService

router = APIRouter(prefix="/api/offers", tags=["Offers"])

offer_managers = require_any_role(RoleName.ADMIN, RoleName.HR, RoleName.RECRUITER)


@router.get("", response_model=List[OfferResponse])
def list_offers(
    candidate_id: Optional[int] = Query(None, alias="candidateId"),
    principal: Principal = Depends(require_any_role(*STAFF_ROLES)),
    db: Session = Depends(get_db),
):
    return OfferService(db).list_offers(candidate_id)


@router.post("", response_model=OfferResponse, status_code=status.HTTP_201_CREATED)
def create_offer(
    offer_data: OfferCreate,
    principal: Principal = Depends(offer_managers),
    db: Session = Depends(get_db),
):
    """Extend an offer to a candidate"""
    return OfferService(db).create_offer(offer_data)


@router.put("/{offer_id}/status", response_model=OfferResponse)
def update_offer_status(
    offer_id: int,
    status_data: OfferStatusUpdate,
    principal: Principal = Depends(offer_managers),
    db: Session = Depends(get_db),
):
    return OfferService(db).update_status(offer_id, status_data.status)
