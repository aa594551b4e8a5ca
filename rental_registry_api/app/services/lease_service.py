"""
Business logic for leases.

``LeaseService.create_lease`` is the one operation that spans stores:
it checks that the referenced business owner, customer and rental
item exist, takes the leased units out of the item's stock and records
the lease.  All of it runs under the registry lock and inside one
SQLite transaction, so the stock decrement and the lease row are
written together or not at all, and two concurrent requests can never
both spend the same stock.
"""

import logging
from datetime import datetime, timezone
from typing import Optional

from rental_registry_api.app.core.ids import generate_id
from rental_registry_api.app.core.state import RentalRegistry
from rental_registry_api.app.schemas.lease import Lease

from .errors import (
    BusinessOwnerNotFound,
    CustomerNotFound,
    InsufficientStock,
    InvalidNumberOfItem,
    RentalItemNotFound,
)

logger = logging.getLogger(__name__)


def utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with milliseconds and a ``Z`` suffix."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class LeaseService:
    """Create and fetch leases."""

    def __init__(self, registry: RentalRegistry) -> None:
        self.registry = registry

    async def create_lease(
        self,
        business_owner_id: str,
        customer_id: str,
        rental_item_id: str,
        number_of_item: int,
        end_time: str,
    ) -> Lease:
        """Create a lease and take ``number_of_item`` units out of stock.

        Checks run in order and stop at the first failure; nothing is
        written when one fails.

        Raises
        ------
        BusinessOwnerNotFound, CustomerNotFound, RentalItemNotFound
            If the corresponding reference does not exist.
        InvalidNumberOfItem
            If ``number_of_item`` is less than one.
        InsufficientStock
            If the rental item has fewer than ``number_of_item`` units.
        """
        registry = self.registry
        with registry.lock, registry.database.transaction() as cursor:
            if not registry.business_owners.contains(business_owner_id, cursor=cursor):
                raise self._rejected(BusinessOwnerNotFound(business_owner_id))
            if not registry.customers.contains(customer_id, cursor=cursor):
                raise self._rejected(CustomerNotFound(customer_id))
            rental_item = registry.rental_items.get(rental_item_id, cursor=cursor)
            if rental_item is None:
                raise self._rejected(RentalItemNotFound(rental_item_id))
            if number_of_item < 1:
                raise self._rejected(InvalidNumberOfItem(rental_item_id, number_of_item))

            new_quantity = rental_item.quantity - number_of_item
            if new_quantity < 0:
                raise self._rejected(
                    InsufficientStock(rental_item_id, number_of_item, rental_item.quantity)
                )

            registry.rental_items.insert(
                rental_item_id,
                rental_item.model_copy(update={"quantity": new_quantity}),
                cursor=cursor,
            )
            lease = Lease(
                id=generate_id(),
                business_owner=business_owner_id,
                customer=customer_id,
                rental_item=rental_item_id,
                number_of_item=number_of_item,
                start_time=utc_timestamp(),
                end_time=end_time,
            )
            if registry.leases.insert(lease.id, lease, cursor=cursor) is not None:
                logger.warning("Lease %s overwrote an existing record", lease.id)

        logger.info(
            "Created lease %s: %s x %s, %s left",
            lease.id,
            number_of_item,
            rental_item_id,
            new_quantity,
        )
        return lease

    async def get_lease_by_id(self, lease_id: str) -> Optional[Lease]:
        """Return the lease with ``lease_id`` or ``None``."""
        return self.registry.leases.get(lease_id)

    @staticmethod
    def _rejected(error: Exception) -> Exception:
        logger.warning("Lease rejected: %s", error)
        return error
