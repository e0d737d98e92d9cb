"""
Analytics Service - global statistics over active job opportunities.
"""

import math
from collections import Counter
from typing import List

from bridge.db.memory import MemoryStore
from bridge.schemas.schemas import CountEntry, JobStatsResponse

TOP_N = 5


def top_counts(values: List[str], limit: int = TOP_N) -> List[CountEntry]:
    """
    Most frequent values, highest count first.
    Ties keep the order in which values were first seen.
    """
    counts = Counter(values)
    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    return [CountEntry(name=name, count=count) for name, count in ranked[:limit]]


def job_stats(store: MemoryStore) -> JobStatsResponse:
    jobs = store.get_job_opportunities(active=True)

    total = len(jobs)
    sponsored = sum(1 for job in jobs if job.visa_sponsorship)
    percentage = int(math.floor(sponsored * 100 / total + 0.5)) if total else 0

    return JobStatsResponse(
        total_jobs=total,
        visa_sponsorship_jobs=sponsored,
        visa_sponsorship_percentage=percentage,
        top_countries=top_counts([job.country for job in jobs]),
        top_industries=top_counts([job.industry for job in jobs])
    )
