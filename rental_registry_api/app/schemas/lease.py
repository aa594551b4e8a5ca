"""
Pydantic models for leases.

A lease links one business owner, one customer and one rental item
together with the number of items rented and a time range.  The
start time is set by the service when the lease is created; the end
time is supplied by the caller and stored as given.
"""

from pydantic import BaseModel, Field, field_validator

from rental_registry_api.app.core.ids import is_valid_id


class LeaseCreate(BaseModel):
    """Schema for creating a lease.

    The three references must be well-formed identifiers; whether they
    point at existing records is checked by ``LeaseService``.
    """

    business_owner: str = Field(..., alias="businessOwner")
    customer: str
    rental_item: str = Field(..., alias="rentalItem")
    number_of_item: int = Field(..., alias="numberOfItem", ge=1, examples=[4])
    end_time: str = Field(..., alias="endTime", examples=["2025-09-01T10:00:00.000Z"])

    model_config = {
        "populate_by_name": True,
    }

    @field_validator("business_owner", "customer", "rental_item")
    @classmethod
    def check_identifier(cls, value: str) -> str:
        if not is_valid_id(value):
            raise ValueError("not a valid identifier")
        return value


class Lease(BaseModel):
    """Stored lease record.

    ``business_owner``, ``customer`` and ``rental_item`` are references
    to records in the other stores, never copies of them.
    """

    id: str
    business_owner: str = Field(..., alias="businessOwner")
    customer: str
    rental_item: str = Field(..., alias="rentalItem")
    number_of_item: int = Field(..., alias="numberOfItem")
    start_time: str = Field(..., alias="startTime")
    end_time: str = Field(..., alias="endTime")

    model_config = {
        "populate_by_name": True,
        "frozen": True,
    }
