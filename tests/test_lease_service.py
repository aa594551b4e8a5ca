"""LeaseService tests: reference checks, stock handling and atomicity."""

import asyncio
import threading
from dataclasses import dataclass

import pytest

from rental_registry_api.app.core.ids import generate_id
from rental_registry_api.app.core.state import RentalRegistry
from rental_registry_api.app.schemas.business_owner import BusinessOwner
from rental_registry_api.app.schemas.customer import Customer
from rental_registry_api.app.schemas.rental_item import RentalItem
from rental_registry_api.app.services.business_owner_service import BusinessOwnerService
from rental_registry_api.app.services.customer_service import CustomerService
from rental_registry_api.app.services.errors import (
    BusinessOwnerNotFound,
    CustomerNotFound,
    InsufficientStock,
    InvalidNumberOfItem,
    LeaseError,
    RentalItemNotFound,
)
from rental_registry_api.app.services.lease_service import LeaseService, utc_timestamp
from rental_registry_api.app.services.rental_item_service import RentalItemService

END_TIME = "2025-12-31T18:00:00.000Z"


@dataclass
class Parties:
    owner: BusinessOwner
    customer: Customer
    item: RentalItem


@pytest.fixture
def parties(registry: RentalRegistry) -> Parties:
    return Parties(
        owner=asyncio.run(BusinessOwnerService(registry).create("Sunrise Rentals")),
        customer=asyncio.run(CustomerService(registry).create("Jane Doe")),
        item=asyncio.run(RentalItemService(registry).create("Folding chairs", 10)),
    )


@pytest.fixture
def service(registry: RentalRegistry) -> LeaseService:
    return LeaseService(registry)


def lease(service: LeaseService, parties: Parties, number: int, **overrides):
    args = {
        "business_owner_id": parties.owner.id,
        "customer_id": parties.customer.id,
        "rental_item_id": parties.item.id,
        "number_of_item": number,
        "end_time": END_TIME,
    }
    args.update(overrides)
    return asyncio.run(service.create_lease(**args))


def quantity(registry: RentalRegistry, parties: Parties) -> int:
    return registry.rental_items.get(parties.item.id).quantity


class TestCreateLease:

    def test_successful_lease(self, registry: RentalRegistry, service: LeaseService, parties: Parties) -> None:
        created = lease(service, parties, 4)
        assert created.business_owner == parties.owner.id
        assert created.customer == parties.customer.id
        assert created.rental_item == parties.item.id
        assert created.number_of_item == 4
        assert created.start_time
        assert created.end_time == END_TIME
        assert quantity(registry, parties) == 6
        assert asyncio.run(service.get_lease_by_id(created.id)) == created

    def test_lease_can_take_all_stock(self, registry: RentalRegistry, service: LeaseService, parties: Parties) -> None:
        lease(service, parties, 10)
        assert quantity(registry, parties) == 0

    def test_second_lease_over_remaining_stock_fails(
        self, registry: RentalRegistry, service: LeaseService, parties: Parties
    ) -> None:
        lease(service, parties, 4)
        with pytest.raises(InsufficientStock) as excinfo:
            lease(service, parties, 7)
        assert excinfo.value.record_id == parties.item.id
        assert excinfo.value.requested == 7
        assert excinfo.value.available == 6
        assert excinfo.value.shortfall == 1
        assert quantity(registry, parties) == 6
        assert registry.leases.count() == 1

    def test_start_time_format(self, service: LeaseService, parties: Parties) -> None:
        created = lease(service, parties, 1)
        assert created.start_time.endswith("Z")
        assert len(created.start_time) == len("2025-01-01T00:00:00.000Z")

    def test_lease_ids_are_fresh(self, service: LeaseService, parties: Parties) -> None:
        first = lease(service, parties, 1)
        second = lease(service, parties, 1)
        assert first.id != second.id
        assert first.id not in {parties.owner.id, parties.customer.id, parties.item.id}


class TestRejectedLeases:

    @pytest.mark.parametrize(
        "field, error",
        [
            ("business_owner_id", BusinessOwnerNotFound),
            ("customer_id", CustomerNotFound),
            ("rental_item_id", RentalItemNotFound),
        ],
    )
    def test_missing_reference(
        self, registry: RentalRegistry, service: LeaseService, parties: Parties, field: str, error: type
    ) -> None:
        missing = generate_id()
        with pytest.raises(error) as excinfo:
            lease(service, parties, 1, **{field: missing})
        assert excinfo.value.record_id == missing
        assert excinfo.value.to_variant() == {error.variant: missing}
        assert quantity(registry, parties) == 10
        assert registry.leases.count() == 0
        assert registry.business_owners.count() == 1
        assert registry.customers.count() == 1
        assert registry.rental_items.count() == 1

    def test_owner_is_checked_first(self, service: LeaseService, parties: Parties) -> None:
        with pytest.raises(BusinessOwnerNotFound):
            lease(
                service,
                parties,
                1,
                business_owner_id=generate_id(),
                customer_id=generate_id(),
                rental_item_id=generate_id(),
            )

    def test_customer_checked_before_item(self, service: LeaseService, parties: Parties) -> None:
        with pytest.raises(CustomerNotFound):
            lease(service, parties, 1, customer_id=generate_id(), rental_item_id=generate_id())

    def test_references_are_store_specific(self, service: LeaseService, parties: Parties) -> None:
        """A customer id does not satisfy the business owner reference."""
        with pytest.raises(BusinessOwnerNotFound):
            lease(service, parties, 1, business_owner_id=parties.customer.id)

    def test_stock_check_leaves_quantity(self, registry: RentalRegistry, service: LeaseService, parties: Parties) -> None:
        with pytest.raises(InsufficientStock) as excinfo:
            lease(service, parties, 11)
        assert excinfo.value.to_variant() == {
            "InsufficientStock": {"rentalItem": parties.item.id, "requested": 11, "available": 10}
        }
        assert quantity(registry, parties) == 10
        assert registry.leases.count() == 0

    @pytest.mark.parametrize("number", [0, -5])
    def test_non_positive_number_of_item(
        self, registry: RentalRegistry, service: LeaseService, parties: Parties, number: int
    ) -> None:
        with pytest.raises(InvalidNumberOfItem) as excinfo:
            lease(service, parties, number)
        assert excinfo.value.to_variant() == {
            "InvalidNumberOfItem": {"rentalItem": parties.item.id, "requested": number}
        }
        assert quantity(registry, parties) == 10
        assert registry.leases.count() == 0

    def test_missing_item_checked_before_number_of_item(self, service: LeaseService, parties: Parties) -> None:
        with pytest.raises(RentalItemNotFound):
            lease(service, parties, 0, rental_item_id=generate_id())

    def test_all_errors_share_a_base(self) -> None:
        for error in (
            BusinessOwnerNotFound,
            CustomerNotFound,
            RentalItemNotFound,
            InsufficientStock,
            InvalidNumberOfItem,
        ):
            assert issubclass(error, LeaseError)


class TestAtomicity:

    def test_failed_lease_insert_rolls_back_decrement(
        self, registry: RentalRegistry, service: LeaseService, parties: Parties, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        def broken_insert(*args, **kwargs):
            raise OSError("disk full")

        monkeypatch.setattr(registry.leases, "insert", broken_insert)
        with pytest.raises(OSError):
            lease(service, parties, 3)
        assert quantity(registry, parties) == 10

    def test_concurrent_leases_do_not_oversell(
        self, registry: RentalRegistry, service: LeaseService, parties: Parties
    ) -> None:
        results: list = []

        def worker() -> None:
            try:
                results.append(lease(service, parties, 3))
            except InsufficientStock as exc:
                results.append(exc)

        threads = [threading.Thread(target=worker) for _ in range(6)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        successes = [r for r in results if not isinstance(r, Exception)]
        assert len(successes) == 3
        assert quantity(registry, parties) == 1
        assert registry.leases.count() == 3


def test_utc_timestamp_is_iso() -> None:
    stamp = utc_timestamp()
    assert stamp[10] == "T"
    assert stamp.endswith("Z")
