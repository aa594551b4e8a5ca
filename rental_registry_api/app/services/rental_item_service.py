"""
Service layer for rental items.

Rental items are created with an initial stock.  The stock is only
changed afterwards by ``LeaseService.create_lease``.
"""

from rental_registry_api.app.core.ids import generate_id
from rental_registry_api.app.core.store import EntityStore
from rental_registry_api.app.schemas.rental_item import RentalItem

from .base import RecordService


class RentalItemService(RecordService[RentalItem]):
    """Create and fetch rental items."""

    kind = "rental item"

    @property
    def store(self) -> EntityStore[RentalItem]:
        return self.registry.rental_items

    async def create(self, items: str, quantity: int) -> RentalItem:
        """Register a rental item.

        ``quantity`` is stored as given; the API schema is responsible
        for rejecting negative values.
        """
        return self._insert_new(RentalItem(id=generate_id(), items=items, quantity=quantity))
