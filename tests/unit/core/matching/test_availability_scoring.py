#!/usr/bin/env python3
"""
Test suite for availability scoring.
"""

import unittest
from datetime import timedelta

from core.matching.availability import calculate_availability_score, generate_availability_reason
from core.matching.dto import AvailabilitySlotDTO
from tests.fixtures.matching_fixtures import PREFERRED_DATE, open_slots


class TestAvailabilityScore(unittest.TestCase):

    def test_no_slots_declared(self):
        self.assertEqual(calculate_availability_score([], PREFERRED_DATE), 20.0)
        self.assertEqual(calculate_availability_score([], None), 20.0)

    def test_no_preferred_date(self):
        self.assertEqual(calculate_availability_score(open_slots(1), None), 70.0)
        self.assertEqual(calculate_availability_score(open_slots(3, booked=True), None), 20.0)

    def test_exact_date_plus_slot_points(self):
        self.assertEqual(calculate_availability_score(open_slots(1), PREFERRED_DATE), 65.0)
        self.assertEqual(calculate_availability_score(open_slots(4), PREFERRED_DATE), 80.0)

    def test_slot_points_cap_at_thirty(self):
        self.assertEqual(calculate_availability_score(open_slots(6), PREFERRED_DATE), 90.0)
        self.assertEqual(calculate_availability_score(open_slots(12), PREFERRED_DATE), 90.0)

    def test_one_slot_three_days_later(self):
        slots = [AvailabilitySlotDTO(date=PREFERRED_DATE + timedelta(days=3))]
        self.assertEqual(calculate_availability_score(slots, PREFERRED_DATE), 15.0)

    def test_flexibility_window_is_inclusive(self):
        before = [AvailabilitySlotDTO(date=PREFERRED_DATE - timedelta(days=7))]
        after = [AvailabilitySlotDTO(date=PREFERRED_DATE + timedelta(days=7))]
        outside = [AvailabilitySlotDTO(date=PREFERRED_DATE + timedelta(days=8))]
        self.assertEqual(calculate_availability_score(before, PREFERRED_DATE), 15.0)
        self.assertEqual(calculate_availability_score(after, PREFERRED_DATE), 15.0)
        self.assertEqual(calculate_availability_score(outside, PREFERRED_DATE), 5.0)

    def test_no_flexibility_bonus_with_exact_match(self):
        slots = open_slots(2, start=PREFERRED_DATE)
        self.assertEqual(calculate_availability_score(slots, PREFERRED_DATE), 70.0)

    def test_booked_slots_do_not_count(self):
        slots = [
            AvailabilitySlotDTO(date=PREFERRED_DATE, is_booked=True),
            AvailabilitySlotDTO(date=PREFERRED_DATE + timedelta(days=20)),
        ]
        self.assertEqual(calculate_availability_score(slots, PREFERRED_DATE), 5.0)

    def test_only_booked_slots_with_preferred_date(self):
        self.assertEqual(calculate_availability_score(open_slots(3, booked=True), PREFERRED_DATE), 0.0)


class TestAvailabilityReason(unittest.TestCase):

    def test_reasons(self):
        self.assertEqual(generate_availability_reason([], PREFERRED_DATE), "No availability declared")
        self.assertEqual(
            generate_availability_reason(open_slots(2, booked=True), PREFERRED_DATE), "No open slots"
        )
        self.assertEqual(generate_availability_reason(open_slots(1), None), "Available for scheduling")
        self.assertEqual(
            generate_availability_reason(open_slots(1), PREFERRED_DATE),
            "Available on preferred date (2026-11-02)"
        )
        self.assertEqual(
            generate_availability_reason(open_slots(1, start=PREFERRED_DATE - timedelta(days=2)),
                                         PREFERRED_DATE + timedelta(days=3)),
            "Available for alternative dates"
        )
        self.assertEqual(
            generate_availability_reason(open_slots(1, start=PREFERRED_DATE + timedelta(days=30)),
                                         PREFERRED_DATE),
            "No open slots near preferred date"
        )


if __name__ == '__main__':
    unittest.main()
