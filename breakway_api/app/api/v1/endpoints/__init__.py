"""
Endpoint subpackage for API v1.

Each module defines an APIRouter for one domain (users, orders, admin,
support).  The routers are aggregated in ``router.py``.
"""
