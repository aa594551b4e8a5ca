"""
Pydantic models for customers.
"""

from pydantic import BaseModel, Field


class CustomerCreate(BaseModel):
    name: str = Field(..., examples=["Jane Doe"])


class Customer(BaseModel):
    """Stored customer record."""

    id: str
    name: str

    model_config = {
        "frozen": True,
    }
