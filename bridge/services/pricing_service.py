"""
Pricing Service - static tier catalog and service orders.

Prices are in cents. The catalog never changes at runtime; an order
copies the tier's price and features at purchase time.
"""

from typing import List, Optional

from bridge.core.errors import RecordNotFoundError
from bridge.db.memory import MemoryStore
from bridge.schemas.schemas import (
    PricingTier, ServiceType, ServiceOrder, PaymentStatus,
)


PRICING_TIERS = [
    PricingTier(
        id="basic",
        name="Basic Match",
        price=2900,
        currency="usd",
        features=[
            "AI job matching analysis",
            "Top 5 job recommendations",
            "Basic success probability assessment",
            "General application guidance"
        ],
        description="Perfect for exploring your options",
        service_type=ServiceType.basic_match
    ),
    PricingTier(
        id="detailed",
        name="Detailed Analysis",
        price=7900,
        currency="usd",
        features=[
            "Comprehensive AI job matching",
            "Top 15 job recommendations",
            "Detailed step-by-step action plans",
            "Country-specific visa guidance",
            "Resume optimization suggestions",
            "Interview preparation tips"
        ],
        description="Complete analysis and actionable guidance",
        service_type=ServiceType.detailed_analysis
    ),
    PricingTier(
        id="premium",
        name="Premium Support",
        price=19900,
        currency="usd",
        features=[
            "Everything in Detailed Analysis",
            "Unlimited job matching updates",
            "Priority customer support",
            "Custom application templates",
            "Salary negotiation strategies",
            "30-day application tracking"
        ],
        description="Full-service job placement support",
        service_type=ServiceType.premium_support
    ),
]


def get_pricing_tiers() -> List[PricingTier]:
    return list(PRICING_TIERS)


def get_pricing_tier(tier_id: str) -> Optional[PricingTier]:
    for tier in PRICING_TIERS:
        if tier.id == tier_id:
            return tier
    return None


class PricingService:
    def __init__(self, store: MemoryStore):
        self.store = store

    def create_order(self, user_id: str, tier_id: str) -> ServiceOrder:
        """
        Record a pending purchase of a tier.

        Raises:
            RecordNotFoundError: unknown user or tier
        """
        if self.store.get_user_profile(user_id) is None:
            raise RecordNotFoundError("User profile", user_id)
        tier = get_pricing_tier(tier_id)
        if tier is None:
            raise RecordNotFoundError("Pricing tier", tier_id)

        return self.store.create_service_order({
            "user_id": user_id,
            "service_type": tier.service_type,
            "price": tier.price,
            "currency": tier.currency,
            "features": list(tier.features),
            "status": PaymentStatus.pending,
        })

    def list_orders(self, user_id: str) -> List[ServiceOrder]:
        return self.store.get_service_orders(user_id)

    def update_status(self, order_id: str, status: PaymentStatus, payment_id: Optional[str] = None) -> ServiceOrder:
        order = self.store.update_service_order_status(order_id, status, payment_id)
        if order is None:
            raise RecordNotFoundError("Service order", order_id)
        return order
