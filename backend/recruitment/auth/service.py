"""
Authentication service layer
"""
from datetime import timedelta
from typing import Optional, Sequence
from sqlalchemy.orm import Session
from jose import jwt
from passlib.context import CryptContext
import structlog

from recruitment.core.config import settings
from recruitment.core.exceptions import AuthenticationError, DuplicateAccountError
from recruitment.core.timeutils import utcnow
from recruitment.auth.repository import UserRepository
from recruitment.models.user import User, RoleName, UserStatus

logger = structlog.get_logger()

# Password hashing context
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash"""
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Hash a password"""
    return pwd_context.hash(password)


def create_access_token(user: User, expires_delta: Optional[timedelta] = None) -> str:
    """Create JWT access token carrying the user's id and role claims"""
    expire = utcnow() + (expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES))
    to_encode = {
        "sub": str(user.id),
        "username": user.username,
        "email": user.email,
        "full_name": user.full_name,
        "roles": user.roles,
        "exp": expire,
        "type": "access",
    }
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_access_token(token: str) -> dict:
    """Decode and validate an access token. Raises jose.JWTError"""
    return jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])


def status_for_roles(roles: Sequence[str]) -> UserStatus:
    """Anything beyond the Candidate role needs an admin to approve the account"""
    internal = [r for r in roles if RoleName(r) != RoleName.CANDIDATE]
    return UserStatus.PENDING_APPROVAL if internal else UserStatus.ACTIVE


def authenticate_user(db: Session, username: str, password: str) -> User:
    """Authenticate by username and password; only Active accounts may log in"""
    user = UserRepository(db).get_by_username(username)
    if not user or not verify_password(password, user.hashed_password):
        logger.warning("failed_login_attempt", username=username)
        raise AuthenticationError("Invalid username or password")

    if user.status != UserStatus.ACTIVE.value:
        logger.info("inactive_login_attempt", user_id=user.id, status=user.status)
        raise AuthenticationError(
            "Account is not active. Please contact administrator.",
            details={"status": user.status},
        )

    return user


def register_user(
    db: Session,
    full_name: str,
    email: str,
    username: str,
    password: str,
    roles: Sequence[str],
) -> User:
    """Create a new user with roles"""
    users = UserRepository(db)
    if users.exists_by_username(username):
        raise DuplicateAccountError("username")
    if users.exists_by_email(email):
        raise DuplicateAccountError("email")

    status = status_for_roles(roles)
    user = User(
        full_name=full_name,
        email=email,
        username=username,
        hashed_password=get_password_hash(password),
        status=status.value,
    )
    user.set_roles(roles)
    users.create(user)

    logger.info("user_registered", user_id=user.id, username=username, status=user.status)
    return user
