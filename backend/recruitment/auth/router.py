"""
Authentication routes
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
import structlog

from recruitment.core.database import get_db
from recruitment.auth.dependencies import get_current_user
from recruitment.auth.service import authenticate_user, create_access_token, register_user
from recruitment.auth.schemas import AuthResponse, LoginRequest, RegisterRequest, UserResponse
from recruitment.models.user import User, UserStatus

router = APIRouter(prefix="/api/auth", tags=["Authentication"])
logger = structlog.get_logger()


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(
    user_data: RegisterRequest,
    db: Session = Depends(get_db),
):
    """Register a new user"""
    user = register_user(
        db=db,
        full_name=user_data.full_name,
        email=user_data.email,
        username=user_data.username,
        password=user_data.password,
        roles=user_data.roles,
    )

    if user.status == UserStatus.PENDING_APPROVAL.value:
        message = "Registration successful. Your account is pending admin approval."
    else:
        message = "Registration successful."

    return AuthResponse(success=True, message=message, user=UserResponse.model_validate(user))


@router.post("/login", response_model=AuthResponse)
def login(
    credentials: LoginRequest,
    db: Session = Depends(get_db),
):
    """Authenticate user and return an access token"""
    user = authenticate_user(db, credentials.username, credentials.password)
    token = create_access_token(user)

    logger.info("user_logged_in", user_id=user.id, username=user.username)

    return AuthResponse(
        success=True,
        message="Login successful",
        token=token,
        user=UserResponse.model_validate(user),
    )


@router.get("/me", response_model=UserResponse)
def get_current_user_info(
    current_user: User = Depends(get_current_user),
):
    """Get current user information"""
    return UserResponse.model_validate(current_user)
