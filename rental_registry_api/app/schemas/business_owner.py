"""
Pydantic models for business owners.

A business owner is the party that rents items out.  Only a name is
recorded; the identifier is assigned by the service on creation.
"""

from pydantic import BaseModel, Field


class BusinessOwnerCreate(BaseModel):
    """Schema for creating a business owner."""

    name: str = Field(..., examples=["Sunrise Rentals"])


class BusinessOwner(BaseModel):
    """Stored business owner record."""

    id: str
    name: str

    model_config = {
        "frozen": True,
    }
