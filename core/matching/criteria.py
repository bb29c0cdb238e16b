#!/usr/bin/env python3
"""
Match Criteria - weights, threshold and cap for one matching request.

Criteria are built fresh per request from the configured defaults plus any
caller overrides, and are immutable afterwards. Weights are expected to sum
to 100 but this is not enforced: the total is computed from the weights as
given, so other sums scale the total accordingly.
"""

from typing import Optional, Dict, Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from core.config_loader import MatchingConfig
from core.exceptions import MatchValidationError

CRITERIA_FIELDS = (
    'distance_weight',
    'expertise_weight',
    'availability_weight',
    'rating_weight',
    'price_weight',
    'minimum_match_score',
    'max_matches',
    'verified_only',
)


class MatchCriteria(BaseModel):
    model_config = ConfigDict(frozen=True)

    distance_weight: float = Field(default=30.0, ge=0)
    expertise_weight: float = Field(default=25.0, ge=0)
    availability_weight: float = Field(default=20.0, ge=0)
    rating_weight: float = Field(default=15.0, ge=0)
    price_weight: float = Field(default=10.0, ge=0)

    minimum_match_score: float = Field(default=50.0, ge=0, le=100)
    max_matches: int = Field(default=10, ge=1)
    verified_only: bool = True

    @property
    def total_weight(self) -> float:
        return (self.distance_weight + self.expertise_weight + self.availability_weight
                + self.rating_weight + self.price_weight)

    @classmethod
    def build(
        cls,
        defaults: Optional[MatchingConfig] = None,
        overrides: Optional[Dict[str, Any]] = None
    ) -> "MatchCriteria":
        """Merge configured defaults with caller overrides.

        Override keys that are missing or None keep the default.

        Raises:
            MatchValidationError: if the merged values are out of range
        """
        values: Dict[str, Any] = {}
        if defaults is not None:
            values.update(defaults.model_dump(include=set(CRITERIA_FIELDS)))

        for key, value in (overrides or {}).items():
            if key not in CRITERIA_FIELDS:
                raise MatchValidationError(f"Unknown match criteria field: {key}")
            if value is not None:
                values[key] = value

        try:
            return cls(**values)
        except ValidationError as e:
            raise MatchValidationError(f"Invalid match criteria: {e}") from e
