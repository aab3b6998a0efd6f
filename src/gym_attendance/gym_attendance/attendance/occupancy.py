"""Occupancy rate and crowd level, derived from live count and capacity.

Nothing here is stored or cached: capacity can change between two reads.
"""
from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from ..core.constants import FULL_CROWD_MIN_RATE, LOW_CROWD_MAX_RATE, MODERATE_CROWD_MAX_RATE
from ..core.enums import CrowdStatus
from .model import Occupancy


def occupancy_rate(live_count: int, capacity: int) -> int:
    """Integer percentage of capacity in use, rounded half up (12.5 -> 13)."""

    if capacity <= 0:
        raise ValueError(f"capacity must be positive, got {capacity}")
    if live_count < 0:
        raise ValueError(f"live_count cannot be negative, got {live_count}")

    rate = Decimal(live_count) * 100 / Decimal(capacity)
    return int(rate.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def classify_crowd(rate: int) -> CrowdStatus:
    status = CrowdStatus.LOW
    if rate > LOW_CROWD_MAX_RATE:
        status = CrowdStatus.MODERATE
    if rate > MODERATE_CROWD_MAX_RATE:
        status = CrowdStatus.HIGH
    if rate >= FULL_CROWD_MIN_RATE:
        status = CrowdStatus.FULL
    return status


def compute_occupancy(live_count: int, capacity: int) -> Occupancy:
    rate = occupancy_rate(live_count, capacity)
    return Occupancy(
        count=live_count,
        capacity=capacity,
        occupancy_rate=rate,
        crowd_status=classify_crowd(rate),
    )
