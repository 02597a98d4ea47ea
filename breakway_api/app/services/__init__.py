"""
Service layer.

Each service encapsulates the business rules for one domain (users,
orders, support, statistics) and works against the in-memory stores
from ``core.db``.  Services raise the typed errors from
``core.errors``; translating them to HTTP responses is left to the
application.
"""
