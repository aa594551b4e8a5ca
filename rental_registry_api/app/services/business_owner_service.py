"""
Service layer for business owners.
"""

from rental_registry_api.app.core.ids import generate_id
from rental_registry_api.app.core.store import EntityStore
from rental_registry_api.app.schemas.business_owner import BusinessOwner

from .base import RecordService


class BusinessOwnerService(RecordService[BusinessOwner]):
    """Create and fetch business owners."""

    kind = "business owner"

    @property
    def store(self) -> EntityStore[BusinessOwner]:
        return self.registry.business_owners

    async def create(self, name: str) -> BusinessOwner:
        """Register a business owner.  Any name, including an empty one, is accepted."""
        return self._insert_new(BusinessOwner(id=generate_id(), name=name))
