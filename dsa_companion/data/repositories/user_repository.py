from typing import Any, Dict, Optional

from sqlalchemy import delete, or_, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from dsa_companion.config import logger
from dsa_companion.data.schemas import User
from dsa_companion.data.schemas.base import utcnow
from dsa_companion.errors import ConflictException, DatabaseException

user_logger = logger.getChild("user_repository")


class UserRepository:
    """Storage access for the users table."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def _first(self, statement) -> Optional[User]:
        try:
            result = await self.session.exec(statement)
            return result.first()
        except SQLAlchemyError as e:
            user_logger.error(f"Error retrieving user: {str(e)}")
            raise DatabaseException(detail="Failed to retrieve user")

    async def get_by_id(self, user_id: str) -> Optional[User]:
        return await self._first(select(User).where(User.id == user_id))

    async def get_by_email(self, email: str) -> Optional[User]:
        return await self._first(select(User).where(User.email == email))

    async def find_conflict(
        self, username: Optional[str], email: Optional[str], exclude_id: Optional[str] = None
    ) -> Optional[User]:
        """Return a user, other than exclude_id, already holding the username or email."""
        clauses = []
        if username is not None:
            clauses.append(User.username == username)
        if email is not None:
            clauses.append(User.email == email)
        if not clauses:
            return None
        statement = select(User).where(or_(*clauses))
        if exclude_id is not None:
            statement = statement.where(User.id != exclude_id)
        return await self._first(statement)

    async def create(self, username: str, email: str, password_hash: str) -> User:
        user = User(username=username, email=email, password_hash=password_hash)
        try:
            self.session.add(user)
            await self.session.commit()
            await self.session.refresh(user)
        except IntegrityError:
            await self.session.rollback()
            raise ConflictException()
        except SQLAlchemyError as e:
            user_logger.error(f"Error creating user: {str(e)}")
            await self.session.rollback()
            raise DatabaseException(detail="Failed to create user")
        return user

    async def update(self, user_id: str, changes: Dict[str, Any]) -> int:
        values = dict(changes)
        values["updated_at"] = utcnow()
        try:
            result = await self.session.execute(
                update(User).where(User.id == user_id).values(**values)
            )
            await self.session.commit()
        except IntegrityError:
            await self.session.rollback()
            raise ConflictException()
        except SQLAlchemyError as e:
            user_logger.error(f"Error updating user {user_id}: {str(e)}")
            await self.session.rollback()
            raise DatabaseException(detail="Failed to update user")
        return result.rowcount

    async def delete(self, user_id: str) -> int:
        try:
            result = await self.session.execute(delete(User).where(User.id == user_id))
            await self.session.commit()
        except SQLAlchemyError as e:
            user_logger.error(f"Error deleting user {user_id}: {str(e)}")
            await self.session.rollback()
            raise DatabaseException(detail="Failed to delete user")
        return result.rowcount
