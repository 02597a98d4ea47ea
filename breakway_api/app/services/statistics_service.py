"""
Service layer for admin statistics.

Counts are taken over the whole system, including the seeded
administrator and cancelled orders.
"""

from __future__ import annotations

import logging

from ..core.db import get_database
from ..schemas.admin import AdminStats


class StatisticsService:
    """Aggregated figures for the admin dashboard."""

    @classmethod
    async def overview(cls) -> AdminStats:
        db = get_database()
        with db.transaction():
            stats = AdminStats(user_count=db.users.count(), order_count=db.orders.count())
        logging.getLogger(__name__).debug(
            "Stats: %s users, %s orders", stats.user_count, stats.order_count
        )
        return stats
