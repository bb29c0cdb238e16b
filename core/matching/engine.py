#!/usr/bin/env python3
"""
Matching Engine - scores professionals against a job and ranks them.

Scoring a candidate only reads the job and that professional, so a batch
can be fanned out across a bounded thread pool. Ranking happens after all
candidates are scored:

1. Drop candidates whose scoring failed (logged, never raised)
2. Keep totals >= minimum_match_score
3. Stable sort by total, highest first
4. Truncate to max_matches
"""

from concurrent.futures import ThreadPoolExecutor
from typing import List
import logging

from core.matching.criteria import MatchCriteria
from core.matching.dto import JobDTO, ProfessionalDTO
from core.matching.models import MatchScoreBreakdown, ScoringOutcome, RankedCandidate
from core.matching import geo, expertise, availability, rating, price

logger = logging.getLogger(__name__)


def weighted_total(
    distance_score: float,
    expertise_score: float,
    availability_score: float,
    rating_score: float,
    price_score: float,
    criteria: MatchCriteria
) -> float:
    return (distance_score * criteria.distance_weight / 100.0
            + expertise_score * criteria.expertise_weight / 100.0
            + availability_score * criteria.availability_weight / 100.0
            + rating_score * criteria.rating_weight / 100.0
            + price_score * criteria.price_weight / 100.0)


class MatchingEngine:
    """
    Weighted multi-dimension scorer.

    Stateless apart from the pool size, so one instance can serve
    concurrent requests.
    """

    def __init__(self, max_workers: int = 4):
        self.max_workers = max(1, max_workers)

    def calculate_match_score(
        self,
        professional: ProfessionalDTO,
        job: JobDTO,
        criteria: MatchCriteria
    ) -> MatchScoreBreakdown:
        """Score one professional for one job across all five dimensions."""
        radius = professional.service_radius_km
        if radius is None:
            radius = 50

        distance_km = geo.haversine_km(
            professional.latitude, professional.longitude,
            job.latitude, job.longitude
        )
        distance_score = geo.calculate_distance_score(distance_km, radius)
        expertise_score = expertise.calculate_expertise_score(professional.expertise, job.job_type)
        availability_score = availability.calculate_availability_score(
            professional.availability_slots, job.preferred_date
        )
        rating_score = rating.calculate_rating_score(professional.rating, professional.total_jobs_completed)
        price_score = price.calculate_price_score(professional.hourly_rate, job.budget_max)

        total = weighted_total(
            distance_score, expertise_score, availability_score, rating_score, price_score, criteria
        )

        logger.debug(
            f"Professional {professional.id} for job {job.id}: total={total:.2f} "
            f"(distance={distance_score:.1f}, expertise={expertise_score:.1f}, "
            f"availability={availability_score:.1f}, rating={rating_score:.1f}, price={price_score:.1f})"
        )

        return MatchScoreBreakdown.create(
            distance_km=distance_km,
            distance_score=distance_score,
            expertise_score=expertise_score,
            availability_score=availability_score,
            rating_score=rating_score,
            price_score=price_score,
            total_score=total,
            distance_reason=geo.generate_distance_reason(distance_km, radius),
            expertise_reason=expertise.generate_expertise_reason(professional.expertise, job.job_type),
            availability_reason=availability.generate_availability_reason(
                professional.availability_slots, job.preferred_date
            ),
            rating_reason=rating.generate_rating_reason(professional.rating, professional.total_jobs_completed),
            price_reason=price.generate_price_reason(professional.hourly_rate, job.budget_max),
        )

    def score_candidate(
        self,
        professional: ProfessionalDTO,
        job: JobDTO,
        criteria: MatchCriteria
    ) -> ScoringOutcome:
        """Score one candidate, capturing any failure in the outcome."""
        try:
            breakdown = self.calculate_match_score(professional, job, criteria)
        except Exception as e:
            return ScoringOutcome(professional=professional, error=e)
        return ScoringOutcome(professional=professional, breakdown=breakdown)

    def score_candidates(
        self,
        professionals: List[ProfessionalDTO],
        job: JobDTO,
        criteria: MatchCriteria
    ) -> List[ScoringOutcome]:
        """Score a candidate pool; outcomes keep the pool's order."""
        if self.max_workers == 1 or len(professionals) <= 1:
            return [self.score_candidate(p, job, criteria) for p in professionals]

        workers = min(self.max_workers, len(professionals))
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="match-scorer") as executor:
            return list(executor.map(lambda p: self.score_candidate(p, job, criteria), professionals))

    def rank(
        self,
        outcomes: List[ScoringOutcome],
        criteria: MatchCriteria
    ) -> List[RankedCandidate]:
        """Filter, sort and cap scored candidates.

        Ties keep the pool order because list.sort is stable.
        """
        qualifying = []
        for outcome in outcomes:
            if not outcome.ok:
                logger.warning(
                    f"Error calculating match score for professional {outcome.professional.id}: {outcome.error}"
                )
                continue
            if outcome.breakdown.total_score >= criteria.minimum_match_score:
                qualifying.append(RankedCandidate(outcome.professional, outcome.breakdown))

        qualifying.sort(key=lambda c: c.total_score, reverse=True)
        return qualifying[:criteria.max_matches]
