#!/usr/bin/env python3
"""
Unit tests for MatchingEngine - scoring, ranking and failure isolation.
"""

import unittest
from datetime import timedelta

from core.matching.criteria import MatchCriteria
from core.matching.dto import AvailabilitySlotDTO, ExpertiseEntry
from core.matching.engine import MatchingEngine, weighted_total
from core.matching.models import MatchScoreBreakdown, ScoringOutcome, round_score
from tests.fixtures.matching_fixtures import (
    BASE_LAT, PREFERRED_DATE, job_dto, professional_dto, north_of
)


def _outcome(professional_id, total):
    breakdown = MatchScoreBreakdown.create(
        distance_km=1.0, distance_score=total, expertise_score=total,
        availability_score=total, rating_score=total, price_score=total,
        total_score=total
    )
    return ScoringOutcome(professional=professional_dto(id=professional_id), breakdown=breakdown)


class TestMatchScore(unittest.TestCase):
    """Scoring one professional against one job."""

    def setUp(self):
        self.engine = MatchingEngine(max_workers=1)
        self.criteria = MatchCriteria()

    def test_01_strong_nearby_installer(self):
        breakdown = self.engine.calculate_match_score(professional_dto(), job_dto(), self.criteria)

        self.assertAlmostEqual(breakdown.distance_km, 5.0, places=1)
        self.assertEqual(breakdown.distance_score, 100.0)
        self.assertEqual(breakdown.expertise_score, 85.0)
        self.assertEqual(breakdown.availability_score, 90.0)
        self.assertEqual(breakdown.rating_score, 100.0)
        self.assertEqual(breakdown.price_score, 100.0)
        self.assertEqual(breakdown.total_score, 94.25)

        self.assertTrue(breakdown.distance_reason.startswith("Very close - 5.0km"))
        self.assertEqual(breakdown.expertise_reason, "Direct expertise match for INSTALLATION")
        self.assertEqual(breakdown.rating_reason, "4.5 star rating based on 20 completed jobs")
        self.assertEqual(breakdown.price_reason, "Well within budget")

    def test_02_outside_radius_scores_zero_distance_but_can_qualify(self):
        professional = professional_dto(
            latitude=north_of(BASE_LAT, 80),
            expertise=[ExpertiseEntry("PANEL_INSTALLATION", 10, "NABCEP")],
        )
        breakdown = self.engine.calculate_match_score(professional, job_dto(), self.criteria)

        self.assertEqual(breakdown.distance_score, 0.0)
        self.assertEqual(breakdown.total_score, 68.0)
        self.assertTrue(breakdown.distance_reason.startswith("Outside service area"))

        ranked = self.engine.rank([ScoringOutcome(professional, breakdown)], self.criteria)
        self.assertEqual(len(ranked), 1)

    def test_03_single_slot_near_preferred_date(self):
        professional = professional_dto(
            availability_slots=[AvailabilitySlotDTO(date=PREFERRED_DATE + timedelta(days=3))]
        )
        breakdown = self.engine.calculate_match_score(professional, job_dto(), self.criteria)
        self.assertEqual(breakdown.availability_score, 15.0)
        self.assertEqual(breakdown.availability_reason, "Available for alternative dates")

    def test_04_unknown_professional_location(self):
        professional = professional_dto(latitude=None, longitude=None)
        breakdown = self.engine.calculate_match_score(professional, job_dto(), self.criteria)
        self.assertIsNone(breakdown.distance_km)
        self.assertEqual(breakdown.distance_score, 0.0)
        self.assertEqual(breakdown.distance_reason, "Outside service area - location unknown")

    def test_05_missing_radius_uses_default(self):
        professional = professional_dto(latitude=north_of(BASE_LAT, 30), service_radius_km=None)
        breakdown = self.engine.calculate_match_score(professional, job_dto(), self.criteria)
        self.assertAlmostEqual(breakdown.distance_score, 50.0, delta=0.05)

    def test_06_total_is_weighted_sum(self):
        criteria = MatchCriteria(distance_weight=10, expertise_weight=20, availability_weight=30,
                                 rating_weight=25, price_weight=15)
        breakdown = self.engine.calculate_match_score(professional_dto(), job_dto(), criteria)
        expected = weighted_total(
            breakdown.distance_score, breakdown.expertise_score, breakdown.availability_score,
            breakdown.rating_score, breakdown.price_score, criteria
        )
        self.assertEqual(breakdown.total_score, round_score(expected))

    def test_07_weights_summing_past_hundred_scale_total(self):
        criteria = MatchCriteria(distance_weight=60)
        breakdown = self.engine.calculate_match_score(professional_dto(), job_dto(), criteria)
        self.assertEqual(breakdown.total_score, 124.25)


class TestRounding(unittest.TestCase):

    def test_round_half_up(self):
        self.assertEqual(round_score(2.675), 2.68)
        self.assertEqual(round_score(94.245), 94.25)
        self.assertEqual(round_score(10.0), 10.0)

    def test_breakdown_rounds_every_number(self):
        breakdown = MatchScoreBreakdown.create(
            distance_km=5.004999, distance_score=33.335, expertise_score=0.0,
            availability_score=0.0, rating_score=0.0, price_score=0.0, total_score=10.0049
        )
        self.assertEqual(breakdown.distance_km, 5.0)
        self.assertEqual(breakdown.distance_score, 33.34)
        self.assertEqual(breakdown.total_score, 10.0)


class TestRanking(unittest.TestCase):
    """Threshold, ordering and cap."""

    def setUp(self):
        self.engine = MatchingEngine(max_workers=1)

    def test_01_threshold_is_inclusive(self):
        outcomes = [_outcome(1, 49.99), _outcome(2, 50.0), _outcome(3, 75.0)]
        ranked = self.engine.rank(outcomes, MatchCriteria())
        self.assertEqual([c.professional.id for c in ranked], [3, 2])

    def test_02_sorted_highest_first(self):
        outcomes = [_outcome(1, 60.0), _outcome(2, 90.0), _outcome(3, 75.0)]
        ranked = self.engine.rank(outcomes, MatchCriteria())
        self.assertEqual([c.total_score for c in ranked], [90.0, 75.0, 60.0])

    def test_03_ties_keep_pool_order(self):
        ranked = self.engine.rank([_outcome(1, 80.0), _outcome(2, 80.0), _outcome(3, 80.0)], MatchCriteria())
        self.assertEqual([c.professional.id for c in ranked], [1, 2, 3])

        ranked = self.engine.rank([_outcome(3, 80.0), _outcome(2, 80.0), _outcome(1, 80.0)], MatchCriteria())
        self.assertEqual([c.professional.id for c in ranked], [3, 2, 1])

    def test_04_capped_at_max_matches(self):
        outcomes = [_outcome(i, 50.0 + i) for i in range(1, 16)]
        ranked = self.engine.rank(outcomes, MatchCriteria(max_matches=5))
        self.assertEqual([c.professional.id for c in ranked], [15, 14, 13, 12, 11])

    def test_05_threshold_zero_keeps_everyone(self):
        outcomes = [_outcome(1, 0.0), _outcome(2, 3.5)]
        ranked = self.engine.rank(outcomes, MatchCriteria(minimum_match_score=0))
        self.assertEqual(len(ranked), 2)

    def test_06_empty_pool(self):
        self.assertEqual(self.engine.rank([], MatchCriteria()), [])
        self.assertEqual(self.engine.score_candidates([], job_dto(), MatchCriteria()), [])


class TestFailureIsolation(unittest.TestCase):

    def setUp(self):
        self.engine = MatchingEngine(max_workers=1)
        self.criteria = MatchCriteria()

    def test_01_failure_captured_in_outcome(self):
        broken = professional_dto(id=2, hourly_rate="not-a-number")
        outcome = self.engine.score_candidate(broken, job_dto(), self.criteria)
        self.assertFalse(outcome.ok)
        self.assertIsInstance(outcome.error, ValueError)
        self.assertIsNone(outcome.breakdown)

    def test_02_failed_candidate_skipped_and_logged(self):
        pool = [professional_dto(id=1), professional_dto(id=2, hourly_rate="not-a-number"), professional_dto(id=3)]
        outcomes = self.engine.score_candidates(pool, job_dto(), self.criteria)

        with self.assertLogs('core.matching.engine', level='WARNING') as logs:
            ranked = self.engine.rank(outcomes, self.criteria)

        self.assertEqual([c.professional.id for c in ranked], [1, 3])
        self.assertIn("professional 2", logs.output[0])


class TestParallelScoring(unittest.TestCase):

    def _pool(self):
        return [
            professional_dto(id=i, latitude=north_of(BASE_LAT, 4 * i), rating=3.0 + (i % 3) * 0.5)
            for i in range(1, 13)
        ]

    def test_parallel_matches_sequential(self):
        job = job_dto()
        criteria = MatchCriteria(minimum_match_score=0)

        sequential = MatchingEngine(max_workers=1).score_candidates(self._pool(), job, criteria)
        parallel = MatchingEngine(max_workers=4).score_candidates(self._pool(), job, criteria)

        self.assertEqual([o.professional.id for o in parallel], list(range(1, 13)))
        self.assertEqual([o.breakdown for o in parallel], [o.breakdown for o in sequential])

    def test_worker_count_floor(self):
        self.assertEqual(MatchingEngine(max_workers=0).max_workers, 1)


if __name__ == '__main__':
    unittest.main()
