"""
Admin routes
"""
from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from recruitment.core.database import get_db
from recruitment.admin.schemas import UserApprovalRequest
from recruitment.admin.service import AdminService
from recruitment.auth.dependencies import require_role
from recruitment.auth.principal import Principal
from recruitment.auth.schemas import AuthResponse, UserResponse
from recruitment.models.user import RoleName, UserStatus

router = APIRouter(prefix="/api/admin", tags=["Admin"])

admin_only = require_role(RoleName.ADMIN)


@router.get("/pending-users", response_model=List[UserResponse])
def get_pending_users(
    principal: Principal = Depends(admin_only),
    db: Session = Depends(get_db),
):
    """Accounts waiting for approval, oldest first"""
    return AdminService(db).pending_users()


@router.get("/all-users", response_model=List[UserResponse])
def get_all_users(
    principal: Principal = Depends(admin_only),
    db: Session = Depends(get_db),
):
    return AdminService(db).all_users()


@router.post("/approve-user", response_model=AuthResponse)
def approve_user(
    request: UserApprovalRequest,
    principal: Principal = Depends(admin_only),
    db: Session = Depends(get_db),
):
    user = AdminService(db).decide(request.user_id, request.action, principal)
    if user.status == UserStatus.ACTIVE.value:
        message = "User approved successfully"
    else:
        message = "User rejected"
    return AuthResponse(success=True, message=message, user=UserResponse.model_validate(user))


@router.delete("/user/{user_id}", response_model=AuthResponse)
def delete_user(
    user_id: int,
    principal: Principal = Depends(admin_only),
    db: Session = Depends(get_db),
):
    AdminService(db).delete_user(user_id, principal)
    return AuthResponse(success=True, message="User deleted successfully")
