"""Rental Registry API client.

A small blocking client for the Rental Registry HTTP API built on the
``requests`` library.  It exposes one method per public operation:

* :meth:`create_business_owner` / :meth:`get_business_owner`
* :meth:`create_customer` / :meth:`get_customer`
* :meth:`create_rental_item` / :meth:`get_rental_item`
* :meth:`create_lease` / :meth:`get_lease`

Every method returns a tuple ``(data, error)``.  On success ``data``
holds the decoded JSON record and ``error`` is ``None``.  On failure
``data`` is ``None`` and ``error`` is a dictionary with the keys
``status_code`` and ``message``.  For rejected leases ``message`` is
the tagged error, e.g. ``{"RentalItemNotFound": "<id>"}``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Result = Tuple[Optional[Dict[str, Any]], Optional[Dict[str, Any]]]


class RentalRegistryClient:
    """Client for the Rental Registry API."""

    API_PREFIX = "/api/v1"

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the service, e.g. ``http://localhost:8000``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Seconds to wait for each response.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(self, method: str, path: str, *, json_body: Any | None = None) -> Result:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET`` or ``POST``).
            path: Path below the versioned prefix (e.g. ``/leases/``).
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``.
        """
        url = f"{self.base_url}{self.API_PREFIX}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message: Any = ""
            if exc.response is not None:
                try:
                    message = exc.response.json().get("detail")
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # Business owners and customers
    # ------------------------------------------------------------------
    def create_business_owner(self, name: str) -> Result:
        return self._request("POST", "/business-owners/", json_body={"name": name})

    def get_business_owner(self, owner_id: str) -> Result:
        return self._request("GET", f"/business-owners/{owner_id}")

    def create_customer(self, name: str) -> Result:
        return self._request("POST", "/customers/", json_body={"name": name})

    def get_customer(self, customer_id: str) -> Result:
        return self._request("GET", f"/customers/{customer_id}")

    # ------------------------------------------------------------------
    # Rental items
    # ------------------------------------------------------------------
    def create_rental_item(self, items: str, quantity: int) -> Result:
        """Register a rental item with its initial stock."""
        return self._request(
            "POST", "/rental-items/", json_body={"items": items, "quantity": quantity}
        )

    def get_rental_item(self, item_id: str) -> Result:
        return self._request("GET", f"/rental-items/{item_id}")

    # ------------------------------------------------------------------
    # Leases
    # ------------------------------------------------------------------
    def create_lease(
        self,
        business_owner_id: str,
        customer_id: str,
        rental_item_id: str,
        number_of_item: int,
        end_time: str,
    ) -> Result:
        """Create a lease.

        Returns:
            A tuple ``(lease, error)``.  ``error["status_code"]`` is 404
            when a reference is missing and 409 when the item does not
            have enough stock left.
        """
        payload = {
            "businessOwner": business_owner_id,
            "customer": customer_id,
            "rentalItem": rental_item_id,
            "numberOfItem": number_of_item,
            "endTime": end_time,
        }
        return self._request("POST", "/leases/", json_body=payload)

    def get_lease(self, lease_id: str) -> Result:
        return self._request("GET", f"/leases/{lease_id}")
