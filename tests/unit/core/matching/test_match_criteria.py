#!/usr/bin/env python3
"""
Test suite for MatchCriteria construction.
"""

import unittest

from pydantic import ValidationError

from core.config_loader import MatchingConfig
from core.exceptions import MatchValidationError
from core.matching.criteria import MatchCriteria


class TestMatchCriteria(unittest.TestCase):

    def test_01_defaults(self):
        criteria = MatchCriteria()
        self.assertEqual(criteria.distance_weight, 30.0)
        self.assertEqual(criteria.expertise_weight, 25.0)
        self.assertEqual(criteria.availability_weight, 20.0)
        self.assertEqual(criteria.rating_weight, 15.0)
        self.assertEqual(criteria.price_weight, 10.0)
        self.assertEqual(criteria.minimum_match_score, 50.0)
        self.assertEqual(criteria.max_matches, 10)
        self.assertTrue(criteria.verified_only)
        self.assertEqual(criteria.total_weight, 100.0)

    def test_02_build_from_configured_defaults(self):
        config = MatchingConfig(distance_weight=50, price_weight=0, max_matches=3, scoring_workers=8)
        criteria = MatchCriteria.build(config)
        self.assertEqual(criteria.distance_weight, 50.0)
        self.assertEqual(criteria.price_weight, 0.0)
        self.assertEqual(criteria.max_matches, 3)
        self.assertFalse(hasattr(criteria, 'scoring_workers'))

    def test_03_overrides_any_subset(self):
        criteria = MatchCriteria.build(MatchingConfig(), {
            'expertise_weight': 40,
            'verified_only': False,
        })
        self.assertEqual(criteria.expertise_weight, 40.0)
        self.assertFalse(criteria.verified_only)
        self.assertEqual(criteria.distance_weight, 30.0)

    def test_04_none_overrides_keep_defaults(self):
        criteria = MatchCriteria.build(MatchingConfig(), {
            'minimum_match_score': None,
            'max_matches': None,
        })
        self.assertEqual(criteria.minimum_match_score, 50.0)
        self.assertEqual(criteria.max_matches, 10)

    def test_05_weights_not_required_to_sum_to_hundred(self):
        criteria = MatchCriteria.build(None, {'distance_weight': 60})
        self.assertEqual(criteria.total_weight, 130.0)

    def test_06_unknown_field_rejected(self):
        with self.assertRaises(MatchValidationError):
            MatchCriteria.build(MatchingConfig(), {'travel_weight': 10})

    def test_07_out_of_range_values_rejected(self):
        for overrides in (
            {'distance_weight': -1},
            {'minimum_match_score': 101},
            {'minimum_match_score': -0.5},
            {'max_matches': 0},
        ):
            with self.subTest(overrides=overrides):
                with self.assertRaises(MatchValidationError):
                    MatchCriteria.build(MatchingConfig(), overrides)

    def test_08_immutable(self):
        criteria = MatchCriteria()
        with self.assertRaises(ValidationError):
            criteria.max_matches = 99

    def test_09_build_does_not_mutate_defaults(self):
        config = MatchingConfig()
        MatchCriteria.build(config, {'distance_weight': 90})
        self.assertEqual(config.distance_weight, 30.0)


if __name__ == '__main__':
    unittest.main()
