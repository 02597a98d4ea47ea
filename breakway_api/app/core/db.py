"""
Process-wide in-memory database.

The storefront keeps all state in memory: users, orders and support
tickets live for the lifetime of the process and are rebuilt (with the
default administrator) on every start.  ``init_db`` creates the
``Database`` instance once at application start-up and
``get_database`` returns it to services and dependencies.

All three stores share one re-entrant lock.  Single store operations
are atomic on their own; services wrap check-then-act sequences (for
example the contact uniqueness check before registering a user) in
``Database.transaction()`` so that concurrent requests cannot
interleave between the check and the write.
"""

import logging
import threading
from contextlib import contextmanager
from typing import Iterator, Optional

from .config import settings
from .stores import OrderStore, TicketStore, UserRecord, UserStore


class Database:
    """Owner of the stores and of the lock guarding them."""

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self.users = UserStore(self._lock)
        self.orders = OrderStore(self._lock)
        self.tickets = TicketStore(self._lock)

    @contextmanager
    def transaction(self) -> Iterator["Database"]:
        """Hold the store lock for the duration of the ``with`` block."""
        with self._lock:
            yield self


_database: Optional[Database] = None


def init_db(seed_admin: Optional[bool] = None) -> Database:
    """Create a fresh database and make it the process-wide instance.

    When ``seed_admin`` is true (default taken from settings) the
    configured administrator account is inserted so that the admin
    routes are usable on a fresh start.
    """
    global _database
    logger = logging.getLogger(__name__)
    db = Database()
    if settings.seed_admin if seed_admin is None else seed_admin:
        from .security import get_credential_verifier

        db.users.insert(
            UserRecord(
                id=settings.admin_id,
                name=settings.admin_name,
                email=settings.admin_email,
                password=get_credential_verifier().hash(settings.admin_password),
                is_admin=True,
            )
        )
        logger.info("Seeded administrator account %s", settings.admin_id)
    _database = db
    return db


def get_database() -> Database:
    """Return the process-wide database, creating it on first use."""
    if _database is None:
        return init_db()
    return _database
