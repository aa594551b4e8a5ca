"""
Lease endpoints for API v1.

Creating a lease validates the three references and the remaining
stock through ``LeaseService``.  Rejections are returned with the
failing variant in ``detail``:

* ``404`` with ``{"BusinessOwnerNotFound": id}``, ``{"CustomerNotFound": id}``
  or ``{"RentalItemNotFound": id}``;
* ``409`` with ``{"InsufficientStock": {...}}`` when there is not
  enough stock left;
* ``422`` with ``{"InvalidNumberOfItem": {...}}`` when fewer than one
  unit is requested.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from rental_registry_api.app.core.state import RentalRegistry, get_registry
from rental_registry_api.app.schemas.lease import Lease, LeaseCreate
from rental_registry_api.app.services.errors import InsufficientStock, InvalidNumberOfItem, LeaseError
from rental_registry_api.app.services.lease_service import LeaseService

router = APIRouter()


@router.post("/", response_model=Lease, status_code=status.HTTP_201_CREATED)
async def create_lease(
    lease_in: LeaseCreate,
    registry: RentalRegistry = Depends(get_registry),
) -> Lease:
    """Create a lease and decrement the rental item's stock."""
    try:
        return await LeaseService(registry).create_lease(
            lease_in.business_owner,
            lease_in.customer,
            lease_in.rental_item,
            lease_in.number_of_item,
            lease_in.end_time,
        )
    except InvalidNumberOfItem as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=e.to_variant())
    except InsufficientStock as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=e.to_variant())
    except LeaseError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.to_variant())


@router.get("/{lease_id}", response_model=Lease)
async def get_lease(
    lease_id: str,
    registry: RentalRegistry = Depends(get_registry),
) -> Lease:
    lease = await LeaseService(registry).get_lease_by_id(lease_id)
    if lease is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Lease not found")
    return lease
