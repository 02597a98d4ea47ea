"""
API endpoints for support tickets.

Customers can list their own tickets and open new ones.  Agent replies
and status changes are handled outside this API for now.
"""

from typing import List

from fastapi import APIRouter, Depends, status

from breakway_api.app.core.security import get_current_user
from breakway_api.app.core.stores import UserRecord
from breakway_api.app.schemas.support import SupportTicketCreate, SupportTicketRead
from breakway_api.app.services.support_service import SupportService


router = APIRouter()


@router.get(
    "/tickets",
    response_model=List[SupportTicketRead],
    summary="List the caller's support tickets",
)
async def list_tickets(current_user: UserRecord = Depends(get_current_user)) -> List[SupportTicketRead]:
    return await SupportService.list_tickets(current_user)


@router.post(
    "/tickets",
    response_model=SupportTicketRead,
    status_code=status.HTTP_201_CREATED,
    summary="Open a new support ticket",
)
async def create_ticket(
    ticket_data: SupportTicketCreate,
    current_user: UserRecord = Depends(get_current_user),
) -> SupportTicketRead:
    """Open a ticket whose thread starts with the customer's message.

    A blank message is rejected with 400.
    """
    return await SupportService.create_ticket(ticket_data, current_user)
