#!/usr/bin/env python3
"""
Matching Models - Data structures for scoring and match results.
"""

import math
from decimal import Decimal, ROUND_HALF_UP
from dataclasses import dataclass
from typing import Optional, Any

from core.matching.dto import MatchDTO, ProfessionalDTO


def round_score(value: float) -> float:
    """Round half-up to two decimals, the precision scores are stored at."""
    return float(Decimal(str(value)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


@dataclass(frozen=True)
class MatchScoreBreakdown:
    """Per-dimension scores, weighted total and a reason for each dimension."""
    distance_km: Optional[float]
    distance_score: float
    expertise_score: float
    availability_score: float
    rating_score: float
    price_score: float
    total_score: float

    distance_reason: str = ""
    expertise_reason: str = ""
    availability_reason: str = ""
    rating_reason: str = ""
    price_reason: str = ""

    @classmethod
    def create(
        cls,
        distance_km: float,
        distance_score: float,
        expertise_score: float,
        availability_score: float,
        rating_score: float,
        price_score: float,
        total_score: float,
        **reasons: str
    ) -> "MatchScoreBreakdown":
        """Build a breakdown with every number rounded to two decimals.

        An infinite (unknown) distance is stored as None.
        """
        return cls(
            distance_km=None if math.isinf(distance_km) else round_score(distance_km),
            distance_score=round_score(distance_score),
            expertise_score=round_score(expertise_score),
            availability_score=round_score(availability_score),
            rating_score=round_score(rating_score),
            price_score=round_score(price_score),
            total_score=round_score(total_score),
            **reasons
        )

    @classmethod
    def from_match(cls, match: MatchDTO) -> "MatchScoreBreakdown":
        """Rebuild a breakdown from a stored match; reasons are not stored."""
        return cls(
            distance_km=match.distance_km,
            distance_score=match.distance_score or 0.0,
            expertise_score=match.expertise_score or 0.0,
            availability_score=match.availability_score or 0.0,
            rating_score=match.rating_score or 0.0,
            price_score=match.price_score or 0.0,
            total_score=match.match_score,
        )


@dataclass(frozen=True)
class ScoringOutcome:
    """Either a breakdown or the error that prevented scoring one candidate."""
    professional: ProfessionalDTO
    breakdown: Optional[MatchScoreBreakdown] = None
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.breakdown is not None and self.error is None


@dataclass(frozen=True)
class RankedCandidate:
    professional: ProfessionalDTO
    breakdown: MatchScoreBreakdown

    @property
    def total_score(self) -> float:
        return self.breakdown.total_score


@dataclass
class MatchResult:
    """A match as returned to callers."""
    match: MatchDTO
    breakdown: MatchScoreBreakdown
    professional_name: str = ""
    professional_email: Optional[str] = None
    professional_phone: Optional[str] = None
    professional_rating: Optional[float] = None
    professional_jobs_completed: Optional[int] = None

    @property
    def id(self) -> Any:
        return self.match.id

    @classmethod
    def from_match(
        cls,
        match: MatchDTO,
        professional: Optional[ProfessionalDTO] = None,
        breakdown: Optional[MatchScoreBreakdown] = None
    ) -> "MatchResult":
        result = cls(match=match, breakdown=breakdown or MatchScoreBreakdown.from_match(match))
        if professional is not None:
            result.professional_name = professional.company_name
            result.professional_email = professional.email
            result.professional_phone = professional.phone
            result.professional_rating = professional.rating
            result.professional_jobs_completed = professional.total_jobs_completed
        return result
