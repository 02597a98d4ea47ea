"""
Business logic for customer accounts.

Covers registration, login and the caller's own profile, plus the
user listing used by the admin dashboard.  Passwords are handled by
the configured ``CredentialVerifier`` (plain-text comparison unless
``PASSWORD_SCHEME`` says otherwise) and are never returned or logged.
"""

import logging
from typing import List

from ..core.db import get_database
from ..core.errors import Conflict, InvalidInput, NotFound, Unauthenticated
from ..core.security import get_credential_verifier
from ..core.stores import UserRecord, generate_id
from ..schemas.user import (
    LoginUser,
    ProfileUpdate,
    UserLogin,
    UserProfile,
    UserRegister,
    UserSummary,
)


def to_profile(user: UserRecord) -> UserProfile:
    """Public view of a user record: everything except the password."""
    return UserProfile(
        id=user.id,
        name=user.name,
        email=user.email,
        mobile=user.mobile,
        address=user.address,
        profile_pic=user.profile_pic,
        is_admin=bool(user.is_admin),
    )


def is_email(contact: str) -> bool:
    return "@" in contact


class UserService:
    """Service for registering, authenticating and updating users."""

    @classmethod
    async def register(cls, data: UserRegister) -> UserSummary:
        """Create a new customer account.

        The contact is stored as e-mail when it contains ``@`` and as a
        mobile number otherwise.  Raises ``InvalidInput`` if any field
        is missing and ``Conflict`` if another account already uses the
        same e-mail/mobile.  Returns only the new id and name.
        """
        logger = logging.getLogger(__name__)
        if not data.name or not data.contact or not data.password:
            raise InvalidInput("Please fill all fields.")

        email_contact = is_email(data.contact)
        db = get_database()
        # Uniqueness check and insert must not interleave with another
        # registration for the same contact.
        with db.transaction():
            kind = "email" if email_contact else "mobile"
            if db.users.find_by_contact(data.contact, kind) is not None:
                logger.info("Registration rejected: %s already in use", kind)
                raise Conflict("An account with this mobile/email already exists.")
            user = db.users.insert(
                UserRecord(
                    id=generate_id("U"),
                    name=data.name,
                    password=get_credential_verifier().hash(data.password),
                    email=data.contact if email_contact else None,
                    mobile=None if email_contact else data.contact,
                    address="",
                    profile_pic="",
                    is_admin=False,
                )
            )
        logger.info("Registered user %s", user.id)
        return UserSummary(id=user.id, name=user.name)

    @classmethod
    async def login(cls, data: UserLogin) -> LoginUser:
        """Check a contact/password pair.

        Succeeds only if a user's e-mail or mobile equals ``contact``
        exactly and the stored password verifies against ``password``.
        Any mismatch (or a missing field) raises ``Unauthenticated``.
        """
        logger = logging.getLogger(__name__)
        verifier = get_credential_verifier()
        if data.contact and data.password is not None:
            for user in get_database().users.list_all():
                if data.contact not in (user.email, user.mobile):
                    continue
                if verifier.verify(user.password, data.password):
                    logger.info("User %s logged in", user.id)
                    return LoginUser(id=user.id, name=user.name, is_admin=bool(user.is_admin))
        logger.info("Failed login attempt")
        raise Unauthenticated("Incorrect mobile number/email or password.")

    @classmethod
    async def get_profile(cls, current_user: UserRecord) -> UserProfile:
        return to_profile(current_user)

    @classmethod
    async def update_profile(cls, current_user: UserRecord, data: ProfileUpdate) -> UserProfile:
        """Overwrite name, email, address and profile picture.

        All four fields are replaced, including the ones the client left
        out (they become ``None``).  ``mobile``, the password and the
        admin flag are never touched here.  Raises ``NotFound`` if the
        user disappeared after authentication.
        """
        try:
            user = get_database().users.update(
                current_user.id,
                name=data.name,
                email=data.email,
                address=data.address,
                profile_pic=data.profile_pic,
            )
        except NotFound:
            raise NotFound("User not found.") from None
        logging.getLogger(__name__).info("User %s updated their profile", user.id)
        return to_profile(user)

    @classmethod
    async def list_users(cls) -> List[UserProfile]:
        """Return every user without passwords (admin dashboard)."""
        return [to_profile(u) for u in get_database().users.list_all()]
