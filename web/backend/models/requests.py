#!/usr/bin/env python3
"""
Request models for API endpoints.
"""

from pydantic import BaseModel, Field
from typing import Optional, Dict, Any

from core.matching.criteria import CRITERIA_FIELDS


class MatchRequest(BaseModel):
    """Request to find matches for a job, optionally overriding the default criteria."""
    job_id: int = Field(..., ge=1, description="Job to find matches for")

    distance_weight: Optional[float] = Field(None, ge=0, description="Weight of the distance score (default 30)")
    expertise_weight: Optional[float] = Field(None, ge=0, description="Weight of the expertise score (default 25)")
    availability_weight: Optional[float] = Field(None, ge=0, description="Weight of the availability score (default 20)")
    rating_weight: Optional[float] = Field(None, ge=0, description="Weight of the rating score (default 15)")
    price_weight: Optional[float] = Field(None, ge=0, description="Weight of the price score (default 10)")
    minimum_match_score: Optional[float] = Field(None, ge=0, le=100, description="Minimum total score (default 50)")
    max_matches: Optional[int] = Field(None, ge=1, le=500, description="Maximum matches to create (default 10)")
    verified_only: Optional[bool] = Field(None, description="Only consider verified professionals (default true)")

    def criteria_overrides(self) -> Dict[str, Any]:
        """Overrides the caller actually supplied."""
        return self.model_dump(include=set(CRITERIA_FIELDS), exclude_none=True)
