"""
Top-level router for version 1 of the API.

This router aggregates the per-record routers under a unified prefix.
"""

from fastapi import APIRouter

from .endpoints import business_owners, customers, leases, rental_items

router = APIRouter()

router.include_router(business_owners.router, prefix="/business-owners", tags=["business owners"])
router.include_router(customers.router, prefix="/customers", tags=["customers"])
router.include_router(rental_items.router, prefix="/rental-items", tags=["rental items"])
router.include_router(leases.router, prefix="/leases", tags=["leases"])
