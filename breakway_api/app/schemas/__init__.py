"""
Pydantic schema definitions for API payloads.

Each domain (users, orders, support) defines its own Pydantic models
for request and response bodies.  Schemas are separated from the store
records in ``core.stores`` so that the API representation (camelCase
field names, password never included) is decoupled from storage.
"""
