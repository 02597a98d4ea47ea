"""
User endpoints.

Registration and login are public.  The profile routes operate on the
caller identified by the user id header.
"""

from fastapi import APIRouter, Depends, status

from breakway_api.app.core.security import get_current_user
from breakway_api.app.core.stores import UserRecord
from breakway_api.app.schemas.user import (
    LoginResponse,
    ProfileUpdate,
    ProfileUpdateResponse,
    RegisterResponse,
    UserLogin,
    UserProfile,
    UserRegister,
)
from breakway_api.app.services.user_service import UserService


router = APIRouter()


@router.post("/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED)
async def register_user(data: UserRegister) -> RegisterResponse:
    """Create a customer account from name, contact (e-mail or mobile) and password."""
    user = await UserService.register(data)
    return RegisterResponse(message="Account created successfully!", user=user)


@router.post("/login", response_model=LoginResponse)
async def login_user(data: UserLogin) -> LoginResponse:
    """Check credentials and return the id to send in the user id header."""
    user = await UserService.login(data)
    return LoginResponse(message="Login successful!", user=user)


@router.get("/profile", response_model=UserProfile)
async def get_profile(current_user: UserRecord = Depends(get_current_user)) -> UserProfile:
    return await UserService.get_profile(current_user)


@router.put("/profile", response_model=ProfileUpdateResponse)
async def update_profile(
    data: ProfileUpdate,
    current_user: UserRecord = Depends(get_current_user),
) -> ProfileUpdateResponse:
    """Replace name, email, address and profile picture of the caller.

    Fields missing from the body are cleared.
    """
    user = await UserService.update_profile(current_user, data)
    return ProfileUpdateResponse(message="Profile updated successfully!", user=user)
