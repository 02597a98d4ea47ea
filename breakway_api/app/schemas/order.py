"""
Pydantic models for orders.

Orders carry whatever fields the storefront sends (cylinder type,
quantity, delivery address, slot, ...).  ``OrderRead`` therefore allows
extra fields and returns them flattened next to ``id``, ``userId`` and
``status``.
"""

from pydantic import Field

from .base import ApiModel


class OrderRead(ApiModel):
    id: str
    user_id: str
    status: str = Field(..., examples=["placed"])

    # Merged with the camelCase config inherited from ApiModel.
    model_config = {"extra": "allow"}
