"""Pydantic models for the admin dashboard."""

from .base import ApiModel


class AdminStats(ApiModel):
    """System-wide totals, serialised as ``{userCount, orderCount}``."""

    user_count: int
    order_count: int
