"""
Customer endpoints for API v1.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from rental_registry_api.app.core.state import RentalRegistry, get_registry
from rental_registry_api.app.schemas.customer import Customer, CustomerCreate
from rental_registry_api.app.services.customer_service import CustomerService

router = APIRouter()


@router.post("/", response_model=Customer, status_code=status.HTTP_201_CREATED)
async def create_customer(
    customer_in: CustomerCreate,
    registry: RentalRegistry = Depends(get_registry),
) -> Customer:
    return await CustomerService(registry).create(customer_in.name)


@router.get("/{customer_id}", response_model=Customer)
async def get_customer(
    customer_id: str,
    registry: RentalRegistry = Depends(get_registry),
) -> Customer:
    customer = await CustomerService(registry).get_by_id(customer_id)
    if customer is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Customer not found")
    return customer
