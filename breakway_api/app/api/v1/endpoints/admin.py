"""
Admin dashboard endpoints.

Every route depends on ``require_admin``: callers without a resolvable
identity get 401, authenticated non-admins get 403.
"""

from typing import List

from fastapi import APIRouter, Depends

from breakway_api.app.core.security import require_admin
from breakway_api.app.schemas.admin import AdminStats
from breakway_api.app.schemas.order import OrderRead
from breakway_api.app.schemas.user import UserProfile
from breakway_api.app.services.order_service import OrderService
from breakway_api.app.services.statistics_service import StatisticsService
from breakway_api.app.services.user_service import UserService


router = APIRouter(dependencies=[Depends(require_admin)])


@router.get("/stats", response_model=AdminStats)
async def get_stats() -> AdminStats:
    """Number of registered users and of orders (any status)."""
    return await StatisticsService.overview()


@router.get("/users", response_model=List[UserProfile])
async def list_users() -> List[UserProfile]:
    return await UserService.list_users()


@router.get("/orders", response_model=List[OrderRead])
async def list_orders() -> List[OrderRead]:
    return await OrderService.list_all_orders()
