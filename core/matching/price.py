#!/usr/bin/env python3
"""
Price Scoring - cost competitiveness of the hourly rate.

The job cost is estimated as rate x 20 hours; job duration is not
modelled.
"""

from typing import Optional

ASSUMED_JOB_HOURS = 20
NO_RATE_SCORE = 50.0

# (exclusive upper bound on estimated cost, score) when the job has no budget
ABSOLUTE_COST_TIERS = (
    (1000.0, 100.0),
    (2000.0, 80.0),
    (3000.0, 60.0),
)
ABSOLUTE_COST_FLOOR = 40.0

# (inclusive upper bound as a fraction of budget_max, score)
BUDGET_RATIO_TIERS = (
    (0.7, 100.0),
    (1.0, 80.0),
    (1.2, 60.0),
    (1.5, 40.0),
)
BUDGET_RATIO_FLOOR = 20.0


def estimate_cost(hourly_rate: float) -> float:
    return float(hourly_rate) * ASSUMED_JOB_HOURS


def calculate_price_score(hourly_rate: Optional[float], budget_max: Optional[float]) -> float:
    if hourly_rate is None:
        return NO_RATE_SCORE

    estimated_cost = estimate_cost(hourly_rate)

    if budget_max is None:
        for bound, score in ABSOLUTE_COST_TIERS:
            if estimated_cost < bound:
                return score
        return ABSOLUTE_COST_FLOOR

    budget = float(budget_max)
    for ratio, score in BUDGET_RATIO_TIERS:
        if estimated_cost <= budget * ratio:
            return score
    return BUDGET_RATIO_FLOOR


def generate_price_reason(hourly_rate: Optional[float], budget_max: Optional[float]) -> str:
    if hourly_rate is None:
        return "Rate to be negotiated"

    if budget_max is None:
        return f"${float(hourly_rate):.2f} per hour"

    estimated_cost = estimate_cost(hourly_rate)
    budget = float(budget_max)
    if estimated_cost <= budget * 0.7:
        return "Well within budget"
    if estimated_cost <= budget:
        return "Within budget"
    return "Above budget estimate"
