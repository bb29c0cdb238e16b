#!/usr/bin/env python3
"""
Availability Scoring - schedule fit against the job's preferred date.
"""

from datetime import date, timedelta
from typing import List, Optional

from core.matching.dto import AvailabilitySlotDTO

NO_SLOTS_SCORE = 20.0
OPEN_WITHOUT_DATE_SCORE = 70.0
PREFERRED_DATE_POINTS = 60.0
POINTS_PER_OPEN_SLOT = 5.0
MAX_OPEN_SLOT_POINTS = 30.0
FLEXIBILITY_POINTS = 10.0
FLEXIBILITY_WINDOW = timedelta(days=7)


def _open_slots(slots: List[AvailabilitySlotDTO]) -> List[AvailabilitySlotDTO]:
    return [s for s in slots if not s.is_booked]


def calculate_availability_score(slots: List[AvailabilitySlotDTO], preferred_date: Optional[date]) -> float:
    if not slots:
        return NO_SLOTS_SCORE

    open_slots = _open_slots(slots)

    if preferred_date is None:
        return OPEN_WITHOUT_DATE_SCORE if open_slots else NO_SLOTS_SCORE

    score = 0.0
    on_preferred_date = any(s.date == preferred_date for s in open_slots)
    if on_preferred_date:
        score += PREFERRED_DATE_POINTS

    score += min(MAX_OPEN_SLOT_POINTS, len(open_slots) * POINTS_PER_OPEN_SLOT)

    if not on_preferred_date:
        start = preferred_date - FLEXIBILITY_WINDOW
        end = preferred_date + FLEXIBILITY_WINDOW
        if any(start <= s.date <= end for s in open_slots):
            score += FLEXIBILITY_POINTS

    return min(100.0, score)


def generate_availability_reason(slots: List[AvailabilitySlotDTO], preferred_date: Optional[date]) -> str:
    if not slots:
        return "No availability declared"

    open_slots = _open_slots(slots)
    if not open_slots:
        return "No open slots"

    if preferred_date is None:
        return "Available for scheduling"

    if any(s.date == preferred_date for s in open_slots):
        return f"Available on preferred date ({preferred_date.isoformat()})"

    if any(abs(s.date - preferred_date) <= FLEXIBILITY_WINDOW for s in open_slots):
        return "Available for alternative dates"
    return "No open slots near preferred date"
