"""
Admin service - account approval and removal
"""
from typing import List
from sqlalchemy.orm import Session
import structlog

from recruitment.auth.principal import Principal
from recruitment.auth.repository import UserRepository
from recruitment.core.exceptions import NotFoundError, ValidationError
from recruitment.core.timeutils import utcnow
from recruitment.models.user import RoleName, User, UserStatus

logger = structlog.get_logger()

APPROVAL_ACTIONS = {
    "approve": UserStatus.ACTIVE,
    "reject": UserStatus.REJECTED,
}


class AdminService:
    def __init__(self, db: Session):
        self.db = db
        self.users = UserRepository(db)

    def _get(self, user_id: int) -> User:
        user = self.users.get_by_id(user_id)
        if not user:
            raise NotFoundError("User", str(user_id))
        return user

    def pending_users(self) -> List[User]:
        return self.users.list_by_status(UserStatus.PENDING_APPROVAL)

    def all_users(self) -> List[User]:
        return self.users.list_all()

    def decide(self, user_id: int, action: str, principal: Principal) -> User:
        """Approve or reject an account waiting for approval"""
        new_status = APPROVAL_ACTIONS.get(action.strip().lower())
        if new_status is None:
            raise ValidationError("Invalid action. Use 'approve' or 'reject'")

        user = self._get(user_id)
        if user.status != UserStatus.PENDING_APPROVAL.value:
            raise ValidationError("User is not pending approval", details={"status": user.status})

        user.status = new_status.value
        user.updated_at = utcnow()
        self.db.commit()
        self.db.refresh(user)

        logger.info(
            "user_approval_decided",
            user_id=user_id,
            status=user.status,
            decided_by=principal.user_id,
        )
        return user

    def delete_user(self, user_id: int, principal: Principal) -> None:
        """Admins cannot be deleted"""
        user = self._get(user_id)
        if user.has_role(RoleName.ADMIN):
            logger.warning("admin_delete_blocked", user_id=user_id, requested_by=principal.user_id)
            raise ValidationError("Cannot delete admin users")

        self.users.delete(user)
        logger.info("user_deleted", user_id=user_id, deleted_by=principal.user_id)
