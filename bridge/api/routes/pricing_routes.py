"""
Pricing Routes

GET /pricing - Static service tiers
POST /pricing/orders - Order a tier for a user
GET /pricing/orders/{user_id} - A user's orders, newest first
PUT /pricing/orders/{order_id}/status - Record a payment outcome
"""

from fastapi import APIRouter, HTTPException, Depends
from typing import List

from bridge.api.deps import get_pricing_service
from bridge.core.errors import RecordNotFoundError
from bridge.services.pricing_service import PricingService, get_pricing_tiers
from bridge.schemas.schemas import (
    PricingTier, ServiceOrder, ServiceOrderCreate, ServiceOrderStatusUpdate
)

router = APIRouter(prefix="/pricing", tags=["Pricing"])


@router.get("", response_model=List[PricingTier])
async def list_pricing():
    """Service tiers. Prices are in cents."""
    return get_pricing_tiers()


@router.post("/orders", response_model=ServiceOrder, status_code=201)
async def create_order(order: ServiceOrderCreate, service: PricingService = Depends(get_pricing_service)):
    try:
        return service.create_order(order.user_id, order.tier_id)
    except RecordNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/orders/{user_id}", response_model=List[ServiceOrder])
async def list_orders(user_id: str, service: PricingService = Depends(get_pricing_service)):
    return service.list_orders(user_id)


@router.put("/orders/{order_id}/status", response_model=ServiceOrder)
async def update_order_status(
    order_id: str,
    update: ServiceOrderStatusUpdate,
    service: PricingService = Depends(get_pricing_service)
):
    try:
        return service.update_status(order_id, update.status, update.payment_id)
    except RecordNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
