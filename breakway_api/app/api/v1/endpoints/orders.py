"""
Order endpoints.

All routes act on the caller's own orders.  The request body of a new
order is stored as-is apart from the server-managed ``id``, ``userId``
and ``status`` fields.
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, status

from breakway_api.app.core.security import get_current_user
from breakway_api.app.core.stores import UserRecord
from breakway_api.app.schemas.order import OrderRead
from breakway_api.app.services.order_service import OrderService


router = APIRouter()


@router.post("", response_model=OrderRead, status_code=status.HTTP_201_CREATED)
async def create_order(
    payload: Optional[Dict[str, Any]] = Body(None, examples=[{"item": "cylinder", "quantity": 1}]),
    current_user: UserRecord = Depends(get_current_user),
) -> OrderRead:
    return await OrderService.create_order(current_user, payload)


@router.get("", response_model=List[OrderRead])
async def list_orders(current_user: UserRecord = Depends(get_current_user)) -> List[OrderRead]:
    return await OrderService.list_orders(current_user)


@router.put("/{order_id}/cancel", response_model=OrderRead)
async def cancel_order(
    order_id: str,
    current_user: UserRecord = Depends(get_current_user),
) -> OrderRead:
    """Cancel a ``placed`` order owned by the caller.

    Returns 404 for unknown orders and for orders of other customers,
    400 if the order is no longer ``placed``.
    """
    return await OrderService.cancel_order(current_user, order_id)
