from sqlmodel import Field

from dsa_companion.data.schemas.base import BaseTable


class User(BaseTable, table=True):
    """A registered account. Only the bcrypt hash of the password is stored."""

    __tablename__ = "users"

    username: str = Field(max_length=50, unique=True, index=True, nullable=False)
    email: str = Field(unique=True, index=True, nullable=False)
    password_hash: str = Field(nullable=False)
