"""
Errors raised when a lease cannot be created.

Each error names the reference that failed.  ``to_variant`` renders
the error in the tagged form used on the wire, e.g.
``{"CustomerNotFound": "<id>"}``.
"""

from typing import Any, Dict


class LeaseError(Exception):
    """Base class for rejected lease requests."""

    variant = "LeaseError"

    def __init__(self, record_id: str, message: str) -> None:
        super().__init__(message)
        self.record_id = record_id

    def to_variant(self) -> Dict[str, Any]:
        return {self.variant: self.record_id}


class BusinessOwnerNotFound(LeaseError):
    variant = "BusinessOwnerNotFound"

    def __init__(self, record_id: str) -> None:
        super().__init__(record_id, f"Business owner {record_id} not found")


class CustomerNotFound(LeaseError):
    variant = "CustomerNotFound"

    def __init__(self, record_id: str) -> None:
        super().__init__(record_id, f"Customer {record_id} not found")


class RentalItemNotFound(LeaseError):
    variant = "RentalItemNotFound"

    def __init__(self, record_id: str) -> None:
        super().__init__(record_id, f"Rental item {record_id} not found")


class InsufficientStock(LeaseError):
    """The rental item has fewer units left than the lease asks for."""

    variant = "InsufficientStock"

    def __init__(self, record_id: str, requested: int, available: int) -> None:
        super().__init__(
            record_id,
            f"Rental item {record_id} has {available} left, {requested} requested",
        )
        self.requested = requested
        self.available = available

    @property
    def shortfall(self) -> int:
        return self.requested - self.available

    def to_variant(self) -> Dict[str, Any]:
        return {
            self.variant: {
                "rentalItem": self.record_id,
                "requested": self.requested,
                "available": self.available,
            }
        }


class InvalidNumberOfItem(LeaseError):
    """A lease must take at least one unit of the rental item."""

    variant = "InvalidNumberOfItem"

    def __init__(self, record_id: str, requested: int) -> None:
        super().__init__(record_id, f"Cannot lease {requested} of rental item {record_id}")
        self.requested = requested

    def to_variant(self) -> Dict[str, Any]:
        return {self.variant: {"rentalItem": self.record_id, "requested": self.requested}}
