"""
Top-level router for version 1 of the API.

This router aggregates the domain routers (users, orders, admin,
support).  When a new domain is introduced, include its router here.
"""

from fastapi import APIRouter

from .endpoints import admin, orders, support, users

# Create a router for version 1 and include sub-routers for each domain.
router = APIRouter()

router.include_router(users.router, prefix="/users", tags=["users"])
router.include_router(orders.router, prefix="/orders", tags=["orders"])
router.include_router(admin.router, prefix="/admin", tags=["admin"])
router.include_router(support.router, prefix="/support", tags=["support"])
