"""
In-Memory Record Store

Holds the four record types in plain dicts keyed by id:
- user_profiles     - applicants
- job_opportunities - open positions
- job_matches       - AI (or fallback) match results
- service_orders    - purchases of pricing tiers

Records are pydantic models. Updates build a new model and swap it in,
so callers never mutate stored objects in place.
"""

import logging
import threading
import uuid
from datetime import datetime, timezone
from typing import Dict, List, Optional

from bridge.core.config import get_settings
from bridge.db.sample_data import load_sample_data
from bridge.schemas.schemas import (
    UserProfile, UserProfileCreate,
    JobOpportunity, JobOpportunityCreate,
    JobMatch, JobMatchCreate,
    ServiceOrder, PaymentStatus,
)

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def new_id() -> str:
    return str(uuid.uuid4())


def _newest_first(records: list) -> list:
    return sorted(records, key=lambda r: r.created_at, reverse=True)


class MemoryStore:
    """
    Dictionary-backed store for a single process.

    The lock keeps writes from interleaving when the plain `def` route
    handlers (the AI-calling ones) run in the threadpool.
    Reads return snapshots (lists) of the current values.
    """

    def __init__(self, seed: bool = True):
        self.user_profiles: Dict[str, UserProfile] = {}
        self.job_opportunities: Dict[str, JobOpportunity] = {}
        self.job_matches: Dict[str, JobMatch] = {}
        self.service_orders: Dict[str, ServiceOrder] = {}
        self._lock = threading.RLock()

        if seed:
            load_sample_data(self)

    # ------------------------------------------------------------
    # User profiles
    # ------------------------------------------------------------

    def get_user_profile(self, profile_id: str) -> Optional[UserProfile]:
        return self.user_profiles.get(profile_id)

    def get_user_profile_by_email(self, email: str) -> Optional[UserProfile]:
        for profile in self.user_profiles.values():
            if profile.email == email:
                return profile
        return None

    def create_user_profile(self, data: UserProfileCreate) -> UserProfile:
        profile = UserProfile(id=new_id(), created_at=utc_now(), **data.model_dump())
        with self._lock:
            self.user_profiles[profile.id] = profile
        logger.info("Created user profile %s", profile.id)
        return profile

    def update_user_profile(self, profile_id: str, updates: dict) -> Optional[UserProfile]:
        """Merge non-null updates into an existing profile. None if missing."""
        with self._lock:
            profile = self.user_profiles.get(profile_id)
            if profile is None:
                return None
            merged = UserProfile.model_validate({**profile.model_dump(), **updates})
            self.user_profiles[profile_id] = merged
        return merged

    # ------------------------------------------------------------
    # Job opportunities
    # ------------------------------------------------------------

    def get_job_opportunities(
        self,
        country: Optional[str] = None,
        industry: Optional[str] = None,
        active: Optional[bool] = None
    ) -> List[JobOpportunity]:
        """
        List jobs, newest first.

        country/industry are case-insensitive substring filters,
        active is an exact match on is_active.
        """
        jobs = list(self.job_opportunities.values())

        if country:
            jobs = [j for j in jobs if country.lower() in j.country.lower()]
        if industry:
            jobs = [j for j in jobs if industry.lower() in j.industry.lower()]
        if active is not None:
            jobs = [j for j in jobs if j.is_active == active]

        return _newest_first(jobs)

    def get_job_opportunity(self, job_id: str) -> Optional[JobOpportunity]:
        return self.job_opportunities.get(job_id)

    def create_job_opportunity(self, data: JobOpportunityCreate) -> JobOpportunity:
        job = JobOpportunity(id=new_id(), created_at=utc_now(), **data.model_dump())
        with self._lock:
            self.job_opportunities[job.id] = job
        logger.info("Created job opportunity %s (%s)", job.id, job.title)
        return job

    def update_job_opportunity(self, job_id: str, updates: dict) -> Optional[JobOpportunity]:
        with self._lock:
            job = self.job_opportunities.get(job_id)
            if job is None:
                return None
            merged = JobOpportunity.model_validate({**job.model_dump(), **updates})
            self.job_opportunities[job_id] = merged
        return merged

    def search_job_opportunities(self, query: str) -> List[JobOpportunity]:
        """Substring search over title, company, industry, country and description."""
        q = query.lower()
        return [
            job for job in self.job_opportunities.values()
            if q in job.title.lower()
            or q in job.company.lower()
            or q in job.industry.lower()
            or q in job.country.lower()
            or q in job.description.lower()
        ]

    # ------------------------------------------------------------
    # Job matches
    # ------------------------------------------------------------

    def get_job_matches(self, user_id: str) -> List[JobMatch]:
        return _newest_first([m for m in self.job_matches.values() if m.user_id == user_id])

    def create_job_match(self, data: JobMatchCreate) -> JobMatch:
        match = JobMatch(id=new_id(), created_at=utc_now(), **data.model_dump())
        with self._lock:
            self.job_matches[match.id] = match
        return match

    def get_job_match(self, match_id: str) -> Optional[JobMatch]:
        return self.job_matches.get(match_id)

    # ------------------------------------------------------------
    # Service orders
    # ------------------------------------------------------------

    def get_service_orders(self, user_id: str) -> List[ServiceOrder]:
        return _newest_first([o for o in self.service_orders.values() if o.user_id == user_id])

    def create_service_order(self, data: dict) -> ServiceOrder:
        order = ServiceOrder(id=new_id(), created_at=utc_now(), **data)
        with self._lock:
            self.service_orders[order.id] = order
        logger.info("Created service order %s for user %s", order.id, order.user_id)
        return order

    def update_service_order_status(
        self,
        order_id: str,
        status: PaymentStatus,
        payment_id: Optional[str] = None
    ) -> Optional[ServiceOrder]:
        """Set the payment status; payment_id is only overwritten when given."""
        with self._lock:
            order = self.service_orders.get(order_id)
            if order is None:
                return None
            changes = {"status": status}
            if payment_id:
                changes["payment_id"] = payment_id
            updated = order.model_copy(update=changes)
            self.service_orders[order_id] = updated
        return updated

    # ------------------------------------------------------------
    # Health
    # ------------------------------------------------------------

    def stats(self) -> Dict[str, int]:
        return {
            "user_profiles": len(self.user_profiles),
            "job_opportunities": len(self.job_opportunities),
            "job_matches": len(self.job_matches),
            "service_orders": len(self.service_orders),
        }


# Singleton instance
_store: MemoryStore = None


def get_store() -> MemoryStore:
    """Get or create the process-wide store (singleton pattern)"""
    global _store
    if _store is None:
        _store = MemoryStore(seed=get_settings().seed_sample_data)
    return _store


def reset_store(seed: bool = True) -> MemoryStore:
    """Replace the process-wide store with a fresh one."""
    global _store
    _store = MemoryStore(seed=seed)
    return _store
