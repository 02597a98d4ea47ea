"""
Business logic for gas cylinder orders.

Customers place orders with free-form details and may cancel an order
while it is still ``placed``.  Cancellation is a one-way transition:
a cancelled order can never be placed again or cancelled twice.  An
order belonging to somebody else is reported as not found so that ids
of foreign orders cannot be probed.
"""

import logging
from typing import Any, Dict, List, Optional

from ..core.db import get_database
from ..core.errors import InvalidState, NotFound
from ..core.stores import ORDER_CANCELLED, ORDER_PLACED, OrderRecord, UserRecord, generate_id
from ..schemas.order import OrderRead


# Keys set by the server; client-supplied values are dropped.
RESERVED_ORDER_FIELDS = {"id", "userId", "user_id", "status"}


def to_order_read(order: OrderRecord) -> OrderRead:
    return OrderRead.model_validate(
        {**order.payload, "id": order.id, "userId": order.user_id, "status": order.status}
    )


class OrderService:
    """Service for creating, listing and cancelling orders."""

    @classmethod
    async def create_order(cls, current_user: UserRecord, payload: Optional[Dict[str, Any]]) -> OrderRead:
        """Store a new order for the caller with status ``placed``."""
        details = {k: v for k, v in (payload or {}).items() if k not in RESERVED_ORDER_FIELDS}
        order = get_database().orders.insert(
            OrderRecord(
                id=generate_id("ORD"),
                user_id=current_user.id,
                status=ORDER_PLACED,
                payload=details,
            )
        )
        logging.getLogger(__name__).info("User %s placed order %s", current_user.id, order.id)
        return to_order_read(order)

    @classmethod
    async def list_orders(cls, current_user: UserRecord) -> List[OrderRead]:
        """Return the caller's orders in the order they were placed."""
        return [to_order_read(o) for o in get_database().orders.list_by_user(current_user.id)]

    @classmethod
    async def cancel_order(cls, current_user: UserRecord, order_id: str) -> OrderRead:
        """Cancel one of the caller's orders.

        Raises
        ------
        NotFound
            If there is no order with ``order_id`` owned by the caller.
        InvalidState
            If the order is not ``placed`` (e.g. already cancelled).
        """
        logger = logging.getLogger(__name__)
        db = get_database()
        with db.transaction():
            order = db.orders.find_by_id(order_id)
            if order is None or order.user_id != current_user.id:
                logger.info("User %s tried to cancel unknown or foreign order %s", current_user.id, order_id)
                raise NotFound("Order not found or you do not have permission to cancel it.")
            if order.status != ORDER_PLACED:
                raise InvalidState('Only orders with "placed" status can be cancelled.')
            order = db.orders.update_status(order_id, ORDER_CANCELLED)
        logger.info("User %s cancelled order %s", current_user.id, order_id)
        return to_order_read(order)

    @classmethod
    async def list_all_orders(cls) -> List[OrderRead]:
        """Return every order regardless of owner (admin dashboard)."""
        return [to_order_read(o) for o in get_database().orders.list_all()]
