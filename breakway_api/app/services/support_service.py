"""
Business logic for support tickets.

A customer opens a ticket with a message; the ticket starts ``open``
with a thread holding exactly that message, sent by the ``customer``.
Threads are append-only.  Agent replies and status changes are not
exposed over HTTP yet, but the store supports appending entries and
changing the status so they can be added without reshaping tickets.
"""

import logging
from datetime import datetime, timezone
from typing import List

from ..core.db import get_database
from ..core.errors import InvalidInput
from ..core.stores import (
    SENDER_CUSTOMER,
    TICKET_OPEN,
    SupportTicketRecord,
    TicketMessage,
    UserRecord,
    generate_id,
)
from ..schemas.support import SupportTicketCreate, SupportTicketRead, TicketMessageRead


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def to_ticket_read(ticket: SupportTicketRecord) -> SupportTicketRead:
    return SupportTicketRead(
        id=ticket.id,
        user_id=ticket.user_id,
        name=ticket.name,
        message=ticket.message,
        status=ticket.status,
        created_at=ticket.created_at,
        thread=[TicketMessageRead(sender=m.sender, text=m.text, at=m.at) for m in ticket.thread],
    )


class SupportService:
    """Service for handling support tickets."""

    @classmethod
    async def create_ticket(cls, data: SupportTicketCreate, current_user: UserRecord) -> SupportTicketRead:
        """Open a new ticket for the caller.

        Parameters
        ----------
        data : SupportTicketCreate
            Payload with the customer's message.
        current_user : UserRecord
            The authenticated caller; their current name is copied onto
            the ticket.

        Raises
        ------
        InvalidInput
            If the message is missing or blank.
        """
        if not data.message or not data.message.strip():
            raise InvalidInput("Please enter a message.")
        created_at = _now_iso()
        ticket = get_database().tickets.insert(
            SupportTicketRecord(
                id=generate_id("T"),
                user_id=current_user.id,
                name=current_user.name,
                message=data.message,
                status=TICKET_OPEN,
                created_at=created_at,
                thread=[TicketMessage(sender=SENDER_CUSTOMER, text=data.message, at=created_at)],
            )
        )
        logging.getLogger(__name__).info("User %s opened support ticket %s", current_user.id, ticket.id)
        return to_ticket_read(ticket)

    @classmethod
    async def list_tickets(cls, current_user: UserRecord) -> List[SupportTicketRead]:
        """Return the caller's own tickets, oldest first."""
        return [to_ticket_read(t) for t in get_database().tickets.list_by_user(current_user.id)]
