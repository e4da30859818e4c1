"""
User data access
"""
from typing import List, Optional
from sqlalchemy.orm import Session

from recruitment.models.user import User, UserRole, RoleName, UserStatus


class UserRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self.db.query(User).filter(User.id == user_id).first()

    def get_by_username(self, username: str) -> Optional[User]:
        return self.db.query(User).filter(User.username == username).first()

    def get_by_email(self, email: str) -> Optional[User]:
        return self.db.query(User).filter(User.email == email).first()

    def exists_by_username(self, username: str) -> bool:
        return self.db.query(User.id).filter(User.username == username).first() is not None

    def exists_by_email(self, email: str) -> bool:
        return self.db.query(User.id).filter(User.email == email).first() is not None

    def create(self, user: User) -> User:
        self.db.add(user)
        self.db.commit()
        self.db.refresh(user)
        return user

    def list_all(self) -> List[User]:
        return self.db.query(User).order_by(User.created_at.desc()).all()

    def list_by_status(self, status: UserStatus) -> List[User]:
        return (
            self.db.query(User)
            .filter(User.status == status.value)
            .order_by(User.created_at)
            .all()
        )

    def list_active_with_role(self, role: RoleName) -> List[User]:
        return (
            self.db.query(User)
            .join(UserRole)
            .filter(User.status == UserStatus.ACTIVE.value, UserRole.role == role)
            .order_by(User.full_name)
            .all()
        )

    def delete(self, user: User) -> None:
        self.db.delete(user)
        self.db.commit()
