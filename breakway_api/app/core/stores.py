"""
In-memory stores for users, orders and support tickets.

Records are plain dataclasses.  The stores keep them in insertion
ordered dictionaries and only ever hand out deep copies, so callers
cannot mutate stored state except through the store methods.  Every
method acquires the lock shared by the owning ``Database``; compound
check-then-act sequences use ``Database.transaction()`` to hold the same
lock across several calls.

The stores do not enforce business rules (contact uniqueness, order
ownership, allowed status transitions).  Those are checked by the
services before writing.
"""

from __future__ import annotations

import copy
import threading
import uuid
from dataclasses import dataclass, field, fields
from typing import Any, Dict, Generic, Iterator, List, Optional, TypeVar

from .errors import NotFound


ORDER_PLACED = "placed"
ORDER_CANCELLED = "cancelled"

TICKET_OPEN = "open"

SENDER_CUSTOMER = "customer"
SENDER_AGENT = "agent"


@dataclass
class UserRecord:
    id: str
    name: str
    password: str
    email: Optional[str] = None
    mobile: Optional[str] = None
    address: Optional[str] = ""
    profile_pic: Optional[str] = ""
    is_admin: bool = False


@dataclass
class OrderRecord:
    id: str
    user_id: str
    status: str = ORDER_PLACED
    # Arbitrary fields supplied by the customer (cylinder type, quantity,
    # delivery slot, ...).  Never contains ``id``, ``userId`` or ``status``.
    payload: Dict[str, Any] = field(default_factory=dict)


@dataclass
class TicketMessage:
    sender: str
    text: str
    at: str


@dataclass
class SupportTicketRecord:
    id: str
    user_id: str
    name: str
    message: str
    created_at: str
    status: str = TICKET_OPEN
    thread: List[TicketMessage] = field(default_factory=list)


T = TypeVar("T")


class _RecordStore(Generic[T]):
    """Common storage for records keyed by their ``id`` attribute."""

    def __init__(self, lock: threading.RLock) -> None:
        self._lock = lock
        self._records: Dict[str, T] = {}

    def insert(self, record: T) -> T:
        with self._lock:
            self._records[record.id] = copy.deepcopy(record)
            return copy.deepcopy(record)

    def find_by_id(self, record_id: str) -> Optional[T]:
        with self._lock:
            record = self._records.get(record_id)
            return copy.deepcopy(record) if record is not None else None

    def list_all(self) -> List[T]:
        with self._lock:
            return [copy.deepcopy(r) for r in self._records.values()]

    def count(self) -> int:
        with self._lock:
            return len(self._records)

    def _get_or_raise(self, record_id: str, label: str) -> T:
        record = self._records.get(record_id)
        if record is None:
            raise NotFound(f"{label} {record_id} not found.")
        return record


class UserStore(_RecordStore[UserRecord]):
    """Identity store."""

    _updatable = {f.name for f in fields(UserRecord)} - {"id"}

    def find_by_contact(self, contact: Optional[str], kind: Optional[str] = None) -> Optional[UserRecord]:
        """Return the first user whose email or mobile equals ``contact``.

        ``kind`` (``"email"`` or ``"mobile"``) restricts the match to that
        field.  An empty contact never matches.
        """
        if not contact:
            return None
        attrs = (kind,) if kind else ("email", "mobile")
        with self._lock:
            for user in self._records.values():
                if any(getattr(user, attr) == contact for attr in attrs):
                    return copy.deepcopy(user)
            return None

    def update(self, user_id: str, **changes: Any) -> UserRecord:
        """Overwrite the given fields of a user.

        Raises ``NotFound`` if no such user exists and ``ValueError`` for
        unknown or immutable fields.
        """
        unknown = set(changes) - self._updatable
        if unknown:
            raise ValueError(f"Cannot update user fields: {', '.join(sorted(unknown))}")
        with self._lock:
            user = self._get_or_raise(user_id, "User")
            for key, value in changes.items():
                setattr(user, key, value)
            return copy.deepcopy(user)


class OrderStore(_RecordStore[OrderRecord]):
    def list_by_user(self, user_id: str) -> Iterator[OrderRecord]:
        with self._lock:
            snapshot = [copy.deepcopy(o) for o in self._records.values() if o.user_id == user_id]
        return iter(snapshot)

    def update_status(self, order_id: str, new_status: str) -> OrderRecord:
        with self._lock:
            order = self._get_or_raise(order_id, "Order")
            order.status = new_status
            return copy.deepcopy(order)


class TicketStore(_RecordStore[SupportTicketRecord]):
    def list_by_user(self, user_id: str) -> Iterator[SupportTicketRecord]:
        with self._lock:
            snapshot = [copy.deepcopy(t) for t in self._records.values() if t.user_id == user_id]
        return iter(snapshot)

    def update_status(self, ticket_id: str, new_status: str) -> SupportTicketRecord:
        with self._lock:
            ticket = self._get_or_raise(ticket_id, "Ticket")
            ticket.status = new_status
            return copy.deepcopy(ticket)

    def append_message(self, ticket_id: str, message: TicketMessage) -> SupportTicketRecord:
        """Append an entry to a ticket's thread.  Existing entries are never touched."""
        with self._lock:
            ticket = self._get_or_raise(ticket_id, "Ticket")
            ticket.thread.append(copy.deepcopy(message))
            return copy.deepcopy(ticket)


def generate_id(prefix: str) -> str:
    """Return a fresh opaque identifier such as ``ORD-3f2a...``."""
    return f"{prefix}-{uuid.uuid4().hex}"
