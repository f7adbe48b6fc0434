from fastapi import Depends, Request

from dsa_companion.business.services.auth import get_user_repository
from dsa_companion.business.services.auth_util import decode_token
from dsa_companion.data.repositories import UserRepository
from dsa_companion.data.schemas import User
from dsa_companion.errors import AuthenticationException


class BearerToken:
    """Pulls a JWT out of the Authorization header and returns its claims."""

    def __init__(self, header_name: str = "Authorization"):
        self.header_name = header_name

    async def __call__(self, request: Request) -> dict:
        header = request.headers.get(self.header_name)
        if not header:
            raise AuthenticationException(detail="Unauthorized")

        scheme, _, token = header.partition(" ")
        if scheme.lower() != "bearer" or not token.strip():
            raise AuthenticationException(detail="Unauthorized")

        token_data = decode_token(token.strip())
        if not token_data or not token_data.get("user_id"):
            raise AuthenticationException(detail="Invalid or expired token")

        return token_data


async def get_current_user(
    token_data: dict = Depends(BearerToken()),
    users: UserRepository = Depends(get_user_repository),
) -> User:
    user = await users.get_by_id(token_data["user_id"])
    if user is None:
        raise AuthenticationException(detail="Unauthorized")
    return user
