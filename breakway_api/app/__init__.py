"""
Application package initializer.

The API is split into ``core`` (configuration, logging, errors, the
in-memory stores and request security), ``schemas`` (request and
response models), ``services`` (business rules) and ``api`` (versioned
routers).  Each domain (users, orders, admin, support) exposes a
router defined in ``api/v1/endpoints``.
"""

from .main import app  # noqa: F401
