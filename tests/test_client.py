"""RentalRegistryClient tests against a stubbed requests session."""

import json
from typing import Any
from unittest.mock import MagicMock

import requests

from rental_registry_client import RentalRegistryClient


def make_response(status_code: int, payload: Any) -> requests.Response:
    response = requests.Response()
    response.status_code = status_code
    response._content = json.dumps(payload).encode("utf-8")
    response.url = "http://registry.test"
    return response


def make_client(response: requests.Response) -> tuple[RentalRegistryClient, MagicMock]:
    session = MagicMock(spec=requests.Session)
    session.request.return_value = response
    return RentalRegistryClient(base_url="http://registry.test/", session=session), session


class TestRentalRegistryClient:

    def test_create_business_owner(self) -> None:
        client, session = make_client(make_response(201, {"id": "abc", "name": "Owner"}))
        data, error = client.create_business_owner("Owner")
        assert error is None
        assert data == {"id": "abc", "name": "Owner"}
        session.request.assert_called_once_with(
            method="POST",
            url="http://registry.test/api/v1/business-owners/",
            json={"name": "Owner"},
            timeout=15,
        )

    def test_get_rental_item_uses_path(self) -> None:
        client, session = make_client(make_response(200, {"id": "x", "items": "Tent", "quantity": 2}))
        client.get_rental_item("x")
        assert session.request.call_args.kwargs["url"] == "http://registry.test/api/v1/rental-items/x"

    def test_create_lease_payload(self) -> None:
        client, session = make_client(make_response(201, {"id": "lease"}))
        client.create_lease("o", "c", "i", 2, "2025-12-31T18:00:00.000Z")
        assert session.request.call_args.kwargs["json"] == {
            "businessOwner": "o",
            "customer": "c",
            "rentalItem": "i",
            "numberOfItem": 2,
            "endTime": "2025-12-31T18:00:00.000Z",
        }

    def test_lease_error_variant_is_returned(self) -> None:
        variant = {"InsufficientStock": {"rentalItem": "i", "requested": 7, "available": 6}}
        client, _ = make_client(make_response(409, {"detail": variant}))
        data, error = client.create_lease("o", "c", "i", 7, "2025-12-31T18:00:00.000Z")
        assert data is None
        assert error == {"status_code": 409, "message": variant}

    def test_not_found(self) -> None:
        client, _ = make_client(make_response(404, {"detail": "Customer not found"}))
        data, error = client.get_customer("missing")
        assert data is None
        assert error == {"status_code": 404, "message": "Customer not found"}

    def test_connection_error(self) -> None:
        session = MagicMock(spec=requests.Session)
        session.request.side_effect = requests.ConnectionError("refused")
        client = RentalRegistryClient(base_url="http://registry.test", session=session)
        data, error = client.get_lease("x")
        assert data is None
        assert error["status_code"] is None
        assert "refused" in error["message"]
