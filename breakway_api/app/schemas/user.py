"""
Pydantic models for user data.

Request models declare every field as optional: missing values are
reported by the service layer as ``InvalidInput`` (HTTP 400) with the
storefront's own message instead of FastAPI's generic 422.  None of the
response models carries a password field.
"""

from typing import Optional

from pydantic import Field

from .base import ApiModel


class UserRegister(ApiModel):
    """Registration payload.

    ``contact`` is either an e-mail address (anything containing ``@``)
    or a mobile number.
    """

    name: Optional[str] = Field(None, examples=["Alice"])
    contact: Optional[str] = Field(None, examples=["alice@example.com"])
    password: Optional[str] = Field(None, examples=["secret"])


class UserLogin(ApiModel):
    contact: Optional[str] = Field(None, examples=["alice@example.com"])
    password: Optional[str] = Field(None, examples=["secret"])


class ProfileUpdate(ApiModel):
    """Profile update payload.

    All four fields are written on every update; an omitted field is
    stored as ``null``.
    """

    name: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None
    profile_pic: Optional[str] = Field(None, description="Encoded image (data URL) or image reference")


class UserSummary(ApiModel):
    id: str
    # Can be null after a profile update that omitted the name.
    name: Optional[str] = None


class LoginUser(UserSummary):
    is_admin: bool = False


class UserProfile(ApiModel):
    """Full user record as exposed by the API (never includes the password)."""

    id: str
    name: Optional[str] = None
    email: Optional[str] = None
    mobile: Optional[str] = None
    address: Optional[str] = None
    profile_pic: Optional[str] = None
    is_admin: bool = False


class RegisterResponse(ApiModel):
    message: str
    user: UserSummary


class LoginResponse(ApiModel):
    message: str
    user: LoginUser


class ProfileUpdateResponse(ApiModel):
    message: str
    user: UserProfile
