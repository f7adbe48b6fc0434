from fastapi import Depends
from sqlmodel.ext.asyncio.session import AsyncSession

from dsa_companion.business.services.auth_util import (
    create_access_token,
    generate_password_hash,
    verify_password,
)
from dsa_companion.config import logger
from dsa_companion.data.repositories import UserRepository, get_session
from dsa_companion.data.schemas import (
    AuthResponse,
    User,
    UserBaseResponse,
    UserCreateModel,
    UserLoginModel,
    UserResponseModel,
    UserUpdateModel,
)
from dsa_companion.errors import (
    AuthenticationException,
    BadRequestException,
    ConflictException,
    ResourceNotFoundException,
)

auth_logger = logger.getChild("auth")


class UserService:
    def __init__(self, users: UserRepository):
        self.users = users

    async def register(self, user_data: UserCreateModel) -> AuthResponse:
        existing = await self.users.find_conflict(user_data.username, user_data.email)
        if existing:
            auth_logger.warning(f"Registration rejected, user exists: {user_data.username}")
            raise ConflictException(detail="User already exists")

        new_user = await self.users.create(
            username=user_data.username,
            email=user_data.email,
            password_hash=generate_password_hash(user_data.password),
        )
        auth_logger.info(f"User registered: {new_user.username} (ID: {new_user.id})")
        return self._auth_response(new_user)

    async def login(self, login_data: UserLoginModel) -> AuthResponse:
        user = await self.users.get_by_email(login_data.email)
        # Same error for unknown email and wrong password
        if not user or not verify_password(login_data.password, user.password_hash):
            auth_logger.warning("Invalid credentials on login")
            raise AuthenticationException(detail="Invalid credentials")

        auth_logger.info(f"User logged in: {user.username} (ID: {user.id})")
        return self._auth_response(user)

    @staticmethod
    def get_profile(user: User) -> UserResponseModel:
        return UserResponseModel.model_validate(user)

    async def update_profile(self, user: User, update_data: UserUpdateModel) -> UserResponseModel:
        changes = update_data.model_dump(exclude_none=True)
        if not changes:
            raise BadRequestException(detail="No fields to update")

        conflict = await self.users.find_conflict(
            changes.get("username"), changes.get("email"), exclude_id=user.id
        )
        if conflict:
            raise ConflictException(detail="Username or email already in use")

        if await self.users.update(user.id, changes) == 0:
            raise ResourceNotFoundException(detail="User not found")

        auth_logger.info(f"Profile updated for user ID {user.id}: {sorted(changes)}")
        updated = await self.users.get_by_id(user.id)
        return UserResponseModel.model_validate(updated)

    async def delete_account(self, user: User) -> None:
        if await self.users.delete(user.id) == 0:
            raise ResourceNotFoundException(detail="User not found")
        auth_logger.info(f"Account deleted: ID {user.id}")

    @staticmethod
    def _auth_response(user: User) -> AuthResponse:
        return AuthResponse(
            user=UserBaseResponse.model_validate(user),
            token=create_access_token(user.id),
        )


def get_user_repository(session: AsyncSession = Depends(get_session)) -> UserRepository:
    return UserRepository(session)


def get_user_service(users: UserRepository = Depends(get_user_repository)) -> UserService:
    return UserService(users)
