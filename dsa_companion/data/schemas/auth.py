from datetime import datetime
from typing import Optional

from pydantic import EmailStr, Field

from dsa_companion.data.schemas.base import CamelModel


class UserBase(CamelModel):
    username: str = Field(..., min_length=1, max_length=50, examples=["algo_champ"])
    email: EmailStr = Field(..., examples=["user@example.com"])


class UserCreateModel(UserBase):
    password: str = Field(
        ...,
        min_length=8,
        max_length=64,
        examples=["Str0ngP@ss!"],
        description="Between 8 and 64 characters",
    )


class UserLoginModel(CamelModel):
    email: EmailStr = Field(..., examples=["user@example.com"])
    password: str = Field(..., min_length=1, max_length=64)


class UserUpdateModel(CamelModel):
    username: Optional[str] = Field(None, min_length=1, max_length=50)
    email: Optional[EmailStr] = None


class UserBaseResponse(CamelModel):
    id: str
    username: str
    email: str


class UserResponseModel(UserBaseResponse):
    created_at: datetime


class AuthResponse(CamelModel):
    user: UserBaseResponse
    token: str
