"""
Business owner endpoints for API v1.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from rental_registry_api.app.core.state import RentalRegistry, get_registry
from rental_registry_api.app.schemas.business_owner import BusinessOwner, BusinessOwnerCreate
from rental_registry_api.app.services.business_owner_service import BusinessOwnerService

router = APIRouter()


@router.post("/", response_model=BusinessOwner, status_code=status.HTTP_201_CREATED)
async def create_business_owner(
    owner_in: BusinessOwnerCreate,
    registry: RentalRegistry = Depends(get_registry),
) -> BusinessOwner:
    """Create a business owner and return it with its new identifier."""
    return await BusinessOwnerService(registry).create(owner_in.name)


@router.get("/{owner_id}", response_model=BusinessOwner)
async def get_business_owner(
    owner_id: str,
    registry: RentalRegistry = Depends(get_registry),
) -> BusinessOwner:
    """Retrieve a business owner by ID.  Returns HTTP 404 if it does not exist."""
    owner = await BusinessOwnerService(registry).get_by_id(owner_id)
    if owner is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Business owner not found")
    return owner
