"""
Request identity, admin gating and credential checks.

Identity is established from a single request header (``X-User-Id`` by
default) whose value must equal a stored user's identifier.  The value
is not verified beyond that lookup: the storefront assumes an upstream
gateway authenticates callers, and anybody who learns a user id can
act as that user.  The lookup sits behind the ``IdentityResolver``
protocol so that a token or session based resolver can be dropped in by
overriding the ``get_identity_resolver`` dependency, without touching
the services.

Credential comparison is likewise isolated behind
``CredentialVerifier``.  The default ``PlaintextCredentialVerifier``
stores passwords as given and compares them by exact equality; this is
NOT secure and exists for compatibility with the existing storefront
accounts.  Set ``PASSWORD_SCHEME=pbkdf2`` to store salted PBKDF2 hashes
instead.
"""

import hashlib
import hmac
import logging
import os
from typing import Protocol

from fastapi import Depends
from fastapi.security import APIKeyHeader

from .config import settings
from .db import get_database
from .errors import Forbidden, Unauthenticated
from .stores import UserRecord, UserStore


# ---------------------------------------------------------------------------
# Credential verification
# ---------------------------------------------------------------------------

class CredentialVerifier(Protocol):
    def hash(self, password: str) -> str:
        """Return the value to store for ``password``."""

    def verify(self, stored: str, supplied: str) -> bool:
        """Return True if ``supplied`` matches the ``stored`` value."""


class PlaintextCredentialVerifier:
    """Opaque string comparison.  Case sensitive, no normalisation."""

    def hash(self, password: str) -> str:
        return password

    def verify(self, stored: str, supplied: str) -> bool:
        if not isinstance(stored, str) or not isinstance(supplied, str):
            return False
        return stored == supplied


class PBKDF2CredentialVerifier:
    """Salted PBKDF2-HMAC-SHA256 hashes stored as ``salt$hash`` (hex)."""

    def __init__(self, iterations: int = 100_000) -> None:
        self.iterations = iterations

    def hash(self, password: str) -> str:
        salt = os.urandom(16)
        dk = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, self.iterations)
        return f"{salt.hex()}${dk.hex()}"

    def verify(self, stored: str, supplied: str) -> bool:
        if not isinstance(stored, str) or not isinstance(supplied, str):
            return False
        try:
            salt_hex, hash_hex = stored.split("$", 1)
            salt = bytes.fromhex(salt_hex)
            expected = bytes.fromhex(hash_hex)
        except ValueError:
            return False
        dk = hashlib.pbkdf2_hmac("sha256", supplied.encode("utf-8"), salt, self.iterations)
        return hmac.compare_digest(dk, expected)


_VERIFIERS = {
    "plain": PlaintextCredentialVerifier,
    "pbkdf2": PBKDF2CredentialVerifier,
}


def get_credential_verifier() -> CredentialVerifier:
    """Return the verifier selected by ``settings.password_scheme``."""
    try:
        return _VERIFIERS[settings.password_scheme.lower()]()
    except KeyError:
        raise ValueError(f"Unknown PASSWORD_SCHEME {settings.password_scheme!r}") from None


# ---------------------------------------------------------------------------
# Authentication
# ---------------------------------------------------------------------------

class IdentityResolver(Protocol):
    def resolve(self, claim: str | None) -> UserRecord:
        """Map a request's identity claim to a user or raise ``Unauthenticated``."""


class HeaderIdentityResolver:
    """Trust the claim as a user identifier and look it up."""

    def __init__(self, users: UserStore) -> None:
        self.users = users

    def resolve(self, claim: str | None) -> UserRecord:
        if not claim:
            raise Unauthenticated("Unauthorized: User ID is required.")
        user = self.users.find_by_id(claim)
        if user is None:
            logging.getLogger(__name__).info("Rejected request for unknown user id %s", claim)
            raise Unauthenticated("Unauthorized: User not found.")
        return user


user_id_header = APIKeyHeader(name=settings.user_id_header, auto_error=False)


def get_identity_resolver() -> IdentityResolver:
    return HeaderIdentityResolver(get_database().users)


def get_current_user(
    claim: str | None = Depends(user_id_header),
    resolver: IdentityResolver = Depends(get_identity_resolver),
) -> UserRecord:
    """Dependency that resolves the caller of the current request.

    The returned record is scoped to the request; it is resolved again
    for every request and never cached.
    """
    return resolver.resolve(claim)


# ---------------------------------------------------------------------------
# Authorization
# ---------------------------------------------------------------------------

def ensure_admin(user: UserRecord) -> UserRecord:
    """Raise ``Forbidden`` unless ``user`` carries the admin flag."""
    if not user.is_admin:
        raise Forbidden("Forbidden: Admin access required.")
    return user


def require_admin(current_user: UserRecord = Depends(get_current_user)) -> UserRecord:
    """Dependency for admin-only routes.

    Authentication always runs first, so a request without a resolvable
    identity is rejected with 401 before the admin flag is looked at.
    """
    return ensure_admin(current_user)
