from fastapi import APIRouter, Depends, status

from dsa_companion.business.services import UserService, get_current_user, get_user_service
from dsa_companion.data.schemas import (
    AuthResponse,
    Envelope,
    User,
    UserCreateModel,
    UserLoginModel,
    UserResponseModel,
    UserUpdateModel,
)

users_router = APIRouter(prefix="/users", tags=["users"])


@users_router.post(
    "/register",
    response_model=Envelope[AuthResponse],
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
    description="Creates a new account and returns it with a 7-day bearer token.",
)
async def register(
    user_data: UserCreateModel,
    user_service: UserService = Depends(get_user_service),
):
    return Envelope(data=await user_service.register(user_data))


@users_router.post(
    "/login",
    response_model=Envelope[AuthResponse],
    response_model_exclude_none=True,
    summary="Log in a user",
    description="Checks an email/password pair and returns the account with a bearer token.",
)
async def login(
    login_data: UserLoginModel,
    user_service: UserService = Depends(get_user_service),
):
    return Envelope(data=await user_service.login(login_data))


@users_router.get(
    "/profile",
    response_model=Envelope[UserResponseModel],
    response_model_exclude_none=True,
    summary="Get current user",
)
async def get_profile(current_user: User = Depends(get_current_user)):
    return Envelope(data=UserService.get_profile(current_user))


@users_router.put(
    "/profile",
    response_model=Envelope[UserResponseModel],
    response_model_exclude_none=True,
    summary="Update current user",
    description="Changes the username and/or email of the authenticated user.",
)
async def update_profile(
    update_data: UserUpdateModel,
    current_user: User = Depends(get_current_user),
    user_service: UserService = Depends(get_user_service),
):
    profile = await user_service.update_profile(current_user, update_data)
    return Envelope(data=profile, message="Profile updated successfully")


@users_router.delete(
    "/account",
    response_model=Envelope[None],
    response_model_exclude_none=True,
    summary="Delete current user",
)
async def delete_account(
    current_user: User = Depends(get_current_user),
    user_service: UserService = Depends(get_user_service),
):
    await user_service.delete_account(current_user)
    return Envelope(message="Account deleted successfully")
