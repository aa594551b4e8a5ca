"""
Service layer for customers.
"""

from rental_registry_api.app.core.ids import generate_id
from rental_registry_api.app.core.store import EntityStore
from rental_registry_api.app.schemas.customer import Customer

from .base import RecordService


class CustomerService(RecordService[Customer]):
    kind = "customer"

    @property
    def store(self) -> EntityStore[Customer]:
        return self.registry.customers

    async def create(self, name: str) -> Customer:
        return self._insert_new(Customer(id=generate_id(), name=name))
