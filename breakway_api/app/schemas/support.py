"""
Pydantic schemas for support tickets.

A ticket groups the messages exchanged between a customer and support
agents.  The thread is returned as a list of ``{from, text, at}``
entries; the first entry is always the customer's opening message.
"""

from typing import List, Optional

from pydantic import Field

from .base import ApiModel


class SupportTicketCreate(ApiModel):
    """Payload for opening a ticket.  ``message`` must be non-blank."""

    message: Optional[str] = Field(None, description="Initial message from the customer")


class TicketMessageRead(ApiModel):
    sender: str = Field(..., alias="from", examples=["customer"])
    text: str
    at: str


class SupportTicketRead(ApiModel):
    id: str
    user_id: str
    name: Optional[str] = None
    message: str
    status: str = Field(..., examples=["open"])
    created_at: str
    thread: List[TicketMessageRead]
