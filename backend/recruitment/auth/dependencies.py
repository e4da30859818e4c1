"""
Authentication dependencies for FastAPI routes
"""
from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session
from jose import JWTError
import structlog

from recruitment.core.database import get_db
from recruitment.core.exceptions import AuthenticationError, AuthorizationError
from recruitment.auth.principal import Principal
from recruitment.auth.repository import UserRepository
from recruitment.auth.service import decode_access_token
from recruitment.models.user import User, RoleName, UserStatus

logger = structlog.get_logger()

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="api/auth/login", auto_error=False)


def get_current_user(
    token: str = Depends(oauth2_scheme),
    db: Session = Depends(get_db),
) -> User:
    """
    Get current authenticated user from JWT token
    """
    if not token:
        raise AuthenticationError("Not authenticated")
    try:
        payload = decode_access_token(token)
        user_id = int(payload.get("sub"))
    except (JWTError, TypeError, ValueError):
        raise AuthenticationError("Invalid token")

    user = UserRepository(db).get_by_id(user_id)
    if user is None:
        raise AuthenticationError("User not found")

    if user.status != UserStatus.ACTIVE.value:
        raise AuthenticationError("User is inactive")

    return user


def get_current_principal(
    current_user: User = Depends(get_current_user),
) -> Principal:
    """The caller as an explicit principal (id + role set)"""
    return Principal.from_user(current_user)


def require_any_role(*role_names: RoleName):
    """
    Dependency factory for requiring any of the specified roles
    Usage: principal: Principal = Depends(require_any_role(RoleName.ADMIN, RoleName.HR))
    """
    def role_checker(principal: Principal = Depends(get_current_principal)) -> Principal:
        if not principal.has_role(*role_names):
            required = [RoleName(r).value for r in role_names]
            logger.warning(
                "unauthorized_access_attempt",
                user_id=principal.user_id,
                required_roles=required,
                user_roles=sorted(principal.roles),
            )
            raise AuthorizationError(
                f"Requires one of: {', '.join(required)}",
                details={"required_roles": required, "user_roles": sorted(principal.roles)},
            )
        return principal

    return role_checker


def require_role(role_name: RoleName):
    """Dependency factory for a single role"""
    return require_any_role(role_name)


# Role groups shared by several routers
STAFF_ROLES = (RoleName.ADMIN, RoleName.HR, RoleName.RECRUITER, RoleName.INTERVIEWER, RoleName.REVIEWER)
