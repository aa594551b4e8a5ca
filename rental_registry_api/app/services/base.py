"""
Shared behaviour of the record services.
"""

import logging
from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel

from rental_registry_api.app.core.state import RentalRegistry
from rental_registry_api.app.core.store import EntityStore

T = TypeVar("T", bound=BaseModel)

logger = logging.getLogger(__name__)


class RecordService(ABC, Generic[T]):
    """Create and look up records of one kind.

    Subclasses name their store and build the record in ``create``;
    this class handles persisting it and point lookups.
    """

    kind: str = "record"

    def __init__(self, registry: RentalRegistry) -> None:
        self.registry = registry

    @property
    @abstractmethod
    def store(self) -> EntityStore[T]:
        """The registry store holding this kind of record."""

    def _insert_new(self, record: T) -> T:
        with self.registry.lock:
            previous = self.store.insert(record.id, record)
        if previous is not None:
            # Identifiers are random; reaching this means a collision.
            logger.warning("%s %s overwrote an existing record", self.kind, record.id)
        logger.info("Created %s %s", self.kind, record.id)
        return record

    async def get_by_id(self, record_id: str) -> Optional[T]:
        """Return the record with ``record_id`` or ``None`` if there is none."""
        return self.store.get(record_id)
