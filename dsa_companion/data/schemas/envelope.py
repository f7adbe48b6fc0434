from typing import Generic, Optional, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class Pagination(BaseModel):
    limit: int
    offset: int
    count: int


class Envelope(BaseModel, Generic[T]):
    """Wrapper shared by every API response."""

    success: bool = True
    data: Optional[T] = None
    error: Optional[str] = None
    message: Optional[str] = None
    pagination: Optional[Pagination] = None
