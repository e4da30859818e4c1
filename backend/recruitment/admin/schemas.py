"""
Admin Pydantic schemas
"""
from pydantic import Field

from recruitment.core.schemas import CamelModel


class UserApprovalRequest(CamelModel):
    user_id: int
    action: str = Field(..., min_length=1, description="approve or reject")
