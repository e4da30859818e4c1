"""
User and role models
"""
import enum

from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Enum, UniqueConstraint
from sqlalchemy.orm import relationship

from recruitment.core.database import Base
from recruitment.core.timeutils import utcnow


class RoleName(str, enum.Enum):
    ADMIN = "Admin"
    HR = "HR"
    RECRUITER = "Recruiter"
    INTERVIEWER = "Interviewer"
    REVIEWER = "Reviewer"
    CANDIDATE = "Candidate"


class UserStatus(str, enum.Enum):
    ACTIVE = "Active"
    PENDING_APPROVAL = "PendingApproval"
    REJECTED = "Rejected"
    SUSPENDED = "Suspended"


class User(Base):
    """User model"""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    full_name = Column(String(100), nullable=False)
    email = Column(String(255), unique=True, index=True, nullable=False)
    username = Column(String(50), unique=True, index=True, nullable=False)
    hashed_password = Column(String(255), nullable=False)
    status = Column(String(20), nullable=False, default=UserStatus.ACTIVE.value)

    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, onupdate=utcnow)

    # Relationships
    role_links = relationship(
        "UserRole",
        back_populates="user",
        cascade="all, delete-orphan",
        order_by="UserRole.id",
        lazy="selectin",
    )
    candidate = relationship(
        "Candidate",
        back_populates="user",
        uselist=False,
        cascade="all, delete-orphan",
        foreign_keys="Candidate.user_id",
    )
    notifications = relationship(
        "Notification", back_populates="user", cascade="all, delete-orphan"
    )
    created_jobs = relationship("Job", back_populates="created_by_user", passive_deletes=True)

    @property
    def roles(self) -> list[str]:
        return [link.role.value for link in self.role_links]

    def has_role(self, role: RoleName) -> bool:
        return any(link.role == role for link in self.role_links)

    def set_roles(self, roles) -> None:
        """Replace the role set, keeping the requested order and dropping repeats"""
        wanted = list(dict.fromkeys(RoleName(r) for r in roles))
        self.role_links = [UserRole(role=role) for role in wanted]


class UserRole(Base):
    """Role membership, one row per (user, role)"""

    __tablename__ = "user_roles"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    role = Column(
        Enum(RoleName, name="role_name", native_enum=False, length=20,
             values_callable=lambda enum_cls: [member.value for member in enum_cls]),
        nullable=False,
    )

    user = relationship("User", back_populates="role_links")

    __table_args__ = (
        UniqueConstraint("user_id", "role", name="uq_user_role"),
    )
