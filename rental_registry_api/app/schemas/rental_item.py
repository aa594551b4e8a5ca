"""
Pydantic models for rental items.

``items`` is a free-text description of what is rented and
``quantity`` is the stock still available.  Quantity is the only field
that changes after creation, and only when a lease is created.
"""

from pydantic import BaseModel, Field


class RentalItemCreate(BaseModel):
    """Schema for creating a rental item.

    The quantity is an unsigned count on the wire, so negative values
    are rejected here rather than in the service.
    """

    items: str = Field(..., examples=["Folding chairs"])
    quantity: int = Field(..., ge=0, examples=[10])


class RentalItem(BaseModel):
    """Stored rental item record."""

    id: str
    items: str
    quantity: int

    model_config = {
        "frozen": True,
    }
