"""
Offer service
"""
from typing import List, Optional
from sqlalchemy.orm import Session, joinedload
import structlog

from recruitment.candidates.repository import CandidateRepository
from recruitment.core.exceptions import NotFoundError
from recruitment.core.timeutils import as_naive_utc, utcnow
from recruitment.jobs.repository import JobRepository
from recruitment.models.candidate import Candidate
from recruitment.models.offer import Offer, OfferStatus
from recruitment.offers.schemas import OfferCreate, OfferResponse

logger = structlog.get_logger()


def to_offer_response(offer: Offer) -> OfferResponse:
    candidate = offer.candidate
    return OfferResponse(
        id=offer.id,
        candidate_id=offer.candidate_id,
        candidate_name=candidate.user.full_name if candidate and candidate.user else "Unknown",
        job_id=offer.job_id,
        job_title=offer.job.title if offer.job else "Unknown",
        offer_date=offer.offer_date,
        joining_date=offer.joining_date,
        status=offer.status,
        status_updated_at=offer.status_updated_at,
    )


class OfferService:
    def __init__(self, db: Session):
        self.db = db

    def _query(self):
        return self.db.query(Offer).options(
            joinedload(Offer.candidate).joinedload(Candidate.user),
            joinedload(Offer.job),
        )

    def _get(self, offer_id: int) -> Offer:
        offer = self._query().filter(Offer.id == offer_id).first()
        if not offer:
            raise NotFoundError("Offer", str(offer_id))
        return offer

    def list_offers(self, candidate_id: Optional[int] = None) -> List[OfferResponse]:
        query = self._query()
        if candidate_id is not None:
            query = query.filter(Offer.candidate_id == candidate_id)
        offers = query.order_by(Offer.offer_date.desc(), Offer.id.desc()).all()
        return [to_offer_response(offer) for offer in offers]

    def create_offer(self, payload: OfferCreate) -> OfferResponse:
        if not CandidateRepository(self.db).get_by_id(payload.candidate_id):
            raise NotFoundError("Candidate", str(payload.candidate_id))
        if not JobRepository(self.db).get_by_id(payload.job_id):
            raise NotFoundError("Job", str(payload.job_id))

        offer = Offer(
            candidate_id=payload.candidate_id,
            job_id=payload.job_id,
            offer_date=as_naive_utc(payload.offer_date) if payload.offer_date else utcnow(),
            joining_date=as_naive_utc(payload.joining_date) if payload.joining_date else None,
            status=OfferStatus.OFFERED.value,
        )
        self.db.add(offer)
        self.db.commit()

        logger.info("offer_created", offer_id=offer.id, candidate_id=offer.candidate_id, job_id=offer.job_id)
        return to_offer_response(self._get(offer.id))

    def update_status(self, offer_id: int, status: OfferStatus) -> OfferResponse:
        offer = self._get(offer_id)
        previous = offer.status

        offer.status = OfferStatus(status).value
        offer.status_updated_at = utcnow()
        self.db.commit()

        logger.info("offer_status_updated", offer_id=offer_id, old_status=previous, new_status=offer.status)
        return to_offer_response(self._get(offer_id))
