"""
Process-wide application state.

``RentalRegistry`` bundles the database handle, the four record
stores and the lock that serializes writes.  One instance is built at
startup and handed to every service; tests build their own instances
against temporary files.
"""

import threading
from typing import Optional

from fastapi import Request

from rental_registry_api.app.schemas.business_owner import BusinessOwner
from rental_registry_api.app.schemas.customer import Customer
from rental_registry_api.app.schemas.lease import Lease
from rental_registry_api.app.schemas.rental_item import RentalItem

from .config import Settings, settings as default_settings
from .db import Database, resolve_database_path
from .store import EntityStore


class RentalRegistry:
    """Database, stores and write lock shared by all services."""

    def __init__(self, database: Database) -> None:
        self.database = database
        self.business_owners: EntityStore[BusinessOwner] = EntityStore(database, "business_owners", BusinessOwner)
        self.customers: EntityStore[Customer] = EntityStore(database, "customers", Customer)
        self.rental_items: EntityStore[RentalItem] = EntityStore(database, "rental_items", RentalItem)
        self.leases: EntityStore[Lease] = EntityStore(database, "leases", Lease)
        # Held for the whole of every mutating operation so no two
        # requests interleave their reads and writes.
        self.lock = threading.RLock()

    @classmethod
    def open(cls, path: str) -> "RentalRegistry":
        """Open (creating and migrating if needed) the registry at ``path``."""
        database = Database(path)
        database.init_db()
        return cls(database)

    @classmethod
    def from_settings(cls, config: Optional[Settings] = None) -> "RentalRegistry":
        config = config or default_settings
        return cls.open(resolve_database_path(config.database_url))


def get_registry(request: Request) -> RentalRegistry:
    """FastAPI dependency returning the registry attached to the app."""
    return request.app.state.registry
