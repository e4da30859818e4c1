"""
Notification service - in-app messages and the interview status emitter
"""
from typing import List, Optional
from sqlalchemy.orm import Session, joinedload
import structlog

from recruitment.auth.principal import Principal
from recruitment.core.exceptions import NotFoundError
from recruitment.core.timeutils import utcnow
from recruitment.models.candidate import Candidate
from recruitment.models.interview import Interview
from recruitment.models.notification import Notification
from recruitment.notifications.repository import NotificationRepository

logger = structlog.get_logger()


def interview_status_message(job_title: Optional[str], status: str) -> str:
    return f"Your interview status for '{job_title or 'Unknown Job'}' has been updated to '{status}'."


class NotificationService:
    def __init__(self, db: Session):
        self.db = db
        self.notifications = NotificationRepository(db)

    def notify_interview_status_change(self, interview_id: int, status: str) -> Optional[Notification]:
        """
        Tell the candidate their interview status changed.

        Runs after the status change is committed and never raises: a failure
        here is logged and the status change stands.
        """
        try:
            interview = (
                self.db.query(Interview)
                .options(
                    joinedload(Interview.candidate).joinedload(Candidate.user),
                    joinedload(Interview.job),
                )
                .filter(Interview.id == interview_id)
                .first()
            )
            if interview is None or interview.candidate is None:
                logger.warning("notification_skipped_no_candidate", interview_id=interview_id)
                return None

            notification = self.notifications.add(
                Notification(
                    user_id=interview.candidate.user_id,
                    message=interview_status_message(
                        interview.job.title if interview.job else None, status
                    ),
                    is_read=False,
                    created_at=utcnow(),
                )
            )
        except Exception as e:
            self.db.rollback()
            logger.exception(
                "notification_failed",
                interview_id=interview_id,
                status=status,
                error=str(e),
            )
            return None

        logger.info(
            "notification_created",
            notification_id=notification.id,
            user_id=notification.user_id,
            interview_id=interview_id,
        )
        return notification

    def list_for_user(self, user_id: int, limit: Optional[int] = None) -> List[Notification]:
        return self.notifications.list_for_user(user_id, limit)

    def mark_as_read(self, notification_id: int, principal: Principal) -> Notification:
        """Only the recipient may mark a notification; anyone else gets a not-found"""
        notification = self.notifications.get_by_id(notification_id)
        if notification is None or notification.user_id != principal.user_id:
            raise NotFoundError("Notification", str(notification_id))

        if not notification.is_read:
            notification.is_read = True
            notification = self.notifications.save(notification)
            logger.info("notification_read", notification_id=notification_id, user_id=principal.user_id)
        return notification
