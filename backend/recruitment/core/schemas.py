"""
Shared Pydantic base schemas
"""
from typing import Generic, List, TypeVar
from pydantic import BaseModel
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    """Accepts snake_case or camelCase input, serializes camelCase"""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


class MessageResponse(CamelModel):
    """Plain acknowledgement"""
    success: bool = True
    message: str


class Page(CamelModel, Generic[T]):
    """One page of a listing (1-indexed)"""
    items: List[T]
    page: int
    page_size: int
    total: int
