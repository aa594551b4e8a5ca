"""
Rental item endpoints for API v1.

Items are created with their initial stock.  There is no endpoint to
change the stock; it only goes down when a lease is created.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from rental_registry_api.app.core.state import RentalRegistry, get_registry
from rental_registry_api.app.schemas.rental_item import RentalItem, RentalItemCreate
from rental_registry_api.app.services.rental_item_service import RentalItemService

router = APIRouter()


@router.post("/", response_model=RentalItem, status_code=status.HTTP_201_CREATED)
async def create_rental_item(
    item_in: RentalItemCreate,
    registry: RentalRegistry = Depends(get_registry),
) -> RentalItem:
    """Create a rental item with its initial quantity."""
    return await RentalItemService(registry).create(item_in.items, item_in.quantity)


@router.get("/{item_id}", response_model=RentalItem)
async def get_rental_item(
    item_id: str,
    registry: RentalRegistry = Depends(get_registry),
) -> RentalItem:
    """Retrieve a rental item, including its remaining quantity."""
    item = await RentalItemService(registry).get_by_id(item_id)
    if item is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Rental item not found")
    return item
