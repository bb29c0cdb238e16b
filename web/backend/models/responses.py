#!/usr/bin/env python3
"""
Response models for API endpoints.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional

from core.matching.models import MatchResult


class ScoreBreakdown(BaseModel):
    """Per-dimension scores behind a match."""
    distance_km: Optional[float] = None
    distance_score: float = Field(ge=0, le=100)
    expertise_score: float = Field(ge=0, le=100)
    availability_score: float = Field(ge=0, le=100)
    rating_score: float = Field(ge=0, le=100)
    price_score: float = Field(ge=0, le=100)
    total_score: float = Field(ge=0)

    distance_reason: Optional[str] = None
    expertise_reason: Optional[str] = None
    availability_reason: Optional[str] = None
    rating_reason: Optional[str] = None
    price_reason: Optional[str] = None


class MatchSummary(BaseModel):
    """A match between a job and a professional."""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": 12,
                "job_id": 3,
                "professional_id": 7,
                "professional_name": "Sunrise Solar Ltd",
                "professional_email": "ops@sunrise.example",
                "professional_phone": "+15550100",
                "professional_rating": 4.5,
                "professional_jobs_completed": 20,
                "match_score": 96.0,
                "score_breakdown": {
                    "distance_km": 5.12,
                    "distance_score": 100.0,
                    "expertise_score": 100.0,
                    "availability_score": 80.0,
                    "rating_score": 100.0,
                    "price_score": 100.0,
                    "total_score": 96.0,
                    "distance_reason": "Very close - 5.1km away",
                    "expertise_reason": "Direct expertise match for INSTALLATION",
                    "availability_reason": "Available on preferred date (2026-11-02)",
                    "rating_reason": "4.5 star rating based on 20 completed jobs",
                    "price_reason": "Well within budget"
                },
                "status": "SUGGESTED",
                "created_at": "2026-10-18T12:00:00"
            }
        }
    )

    id: int
    job_id: int
    professional_id: int
    professional_name: Optional[str] = None
    professional_email: Optional[str] = None
    professional_phone: Optional[str] = None
    professional_rating: Optional[float] = None
    professional_jobs_completed: Optional[int] = None
    match_score: float
    score_breakdown: ScoreBreakdown
    status: str
    created_at: Optional[str] = None

    @classmethod
    def from_result(cls, result: MatchResult) -> "MatchSummary":
        match = result.match
        breakdown = result.breakdown
        return cls(
            id=match.id,
            job_id=match.job_id,
            professional_id=match.professional_id,
            professional_name=result.professional_name or None,
            professional_email=result.professional_email,
            professional_phone=result.professional_phone,
            professional_rating=result.professional_rating,
            professional_jobs_completed=result.professional_jobs_completed,
            match_score=match.match_score,
            score_breakdown=ScoreBreakdown(
                distance_km=breakdown.distance_km,
                distance_score=breakdown.distance_score,
                expertise_score=breakdown.expertise_score,
                availability_score=breakdown.availability_score,
                rating_score=breakdown.rating_score,
                price_score=breakdown.price_score,
                total_score=breakdown.total_score,
                distance_reason=breakdown.distance_reason or None,
                expertise_reason=breakdown.expertise_reason or None,
                availability_reason=breakdown.availability_reason or None,
                rating_reason=breakdown.rating_reason or None,
                price_reason=breakdown.price_reason or None,
            ),
            status=match.status.value,
            created_at=match.created_at.isoformat() if match.created_at else None,
        )


class MatchesResponse(BaseModel):
    """Response containing a list of matches."""
    success: bool
    message: Optional[str] = None
    count: int
    data: List[MatchSummary]


class MatchResponse(BaseModel):
    """Response containing a single match."""
    success: bool
    message: Optional[str] = None
    data: MatchSummary


class DeleteMatchResponse(BaseModel):
    success: bool
    message: str
