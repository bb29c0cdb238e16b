"""Data Transfer Objects for the matching engine.

DTOs are used to transfer data outside of the Unit of Work context,
allowing ORM objects to be converted to plain Python objects that
can be safely scored on worker threads after the session has moved on.
Entities refer to each other by id only.
"""

from dataclasses import dataclass, field
from datetime import date, time, datetime
from typing import List, Optional, Any

from database.models import JobType, JobStatus, MatchStatus


@dataclass(frozen=True)
class ExpertiseEntry:
    """One declared skill of a professional."""
    expertise_type: str
    years_experience: Optional[int] = None
    certification_name: Optional[str] = None


@dataclass(frozen=True)
class AvailabilitySlotDTO:
    date: date
    start_time: Optional[time] = None
    end_time: Optional[time] = None
    is_booked: bool = False


@dataclass
class JobDTO:
    id: Any
    job_type: JobType
    latitude: Optional[float]
    longitude: Optional[float]
    status: JobStatus = JobStatus.PENDING
    preferred_date: Optional[date] = None
    budget_min: Optional[float] = None
    budget_max: Optional[float] = None
    title: str = ""


@dataclass
class ProfessionalDTO:
    id: Any
    latitude: Optional[float]
    longitude: Optional[float]
    service_radius_km: int = 50
    hourly_rate: Optional[float] = None
    rating: Optional[float] = 0.0
    total_jobs_completed: Optional[int] = 0
    is_verified: bool = False
    company_name: str = ""
    email: Optional[str] = None
    phone: Optional[str] = None
    expertise: List[ExpertiseEntry] = field(default_factory=list)
    availability_slots: List[AvailabilitySlotDTO] = field(default_factory=list)


@dataclass
class MatchDTO:
    """Detached copy of a stored Match row."""
    id: Any
    job_id: Any
    professional_id: Any
    match_score: float
    status: MatchStatus
    distance_km: Optional[float] = None
    distance_score: Optional[float] = None
    expertise_score: Optional[float] = None
    availability_score: Optional[float] = None
    rating_score: Optional[float] = None
    price_score: Optional[float] = None
    created_at: Optional[datetime] = None


def _to_float(value) -> Optional[float]:
    """Convert Decimal/Numeric columns to float, keeping None."""
    if value is None:
        return None
    return float(value)


def job_from_orm(job) -> JobDTO:
    return JobDTO(
        id=job.id,
        job_type=JobType(job.job_type),
        latitude=_to_float(job.latitude),
        longitude=_to_float(job.longitude),
        status=JobStatus(job.status),
        preferred_date=job.preferred_date,
        budget_min=_to_float(job.budget_min),
        budget_max=_to_float(job.budget_max),
        title=job.title or "",
    )


def professional_from_orm(professional) -> ProfessionalDTO:
    return ProfessionalDTO(
        id=professional.id,
        latitude=_to_float(professional.latitude),
        longitude=_to_float(professional.longitude),
        service_radius_km=professional.service_radius_km if professional.service_radius_km is not None else 50,
        hourly_rate=_to_float(professional.hourly_rate),
        rating=_to_float(professional.rating),
        total_jobs_completed=professional.total_jobs_completed,
        is_verified=bool(professional.is_verified),
        company_name=professional.company_name or "",
        email=professional.email,
        phone=professional.phone,
        expertise=[
            ExpertiseEntry(
                expertise_type=e.expertise_type,
                years_experience=e.years_experience,
                certification_name=e.certification_name,
            )
            for e in professional.expertise
        ],
        availability_slots=[
            AvailabilitySlotDTO(
                date=s.date,
                start_time=s.start_time,
                end_time=s.end_time,
                is_booked=bool(s.is_booked),
            )
            for s in professional.availability_slots
        ],
    )


def match_from_orm(match) -> MatchDTO:
    return MatchDTO(
        id=match.id,
        job_id=match.job_id,
        professional_id=match.professional_id,
        match_score=_to_float(match.match_score) or 0.0,
        status=MatchStatus(match.status),
        distance_km=_to_float(match.distance_km),
        distance_score=_to_float(match.distance_score),
        expertise_score=_to_float(match.expertise_score),
        availability_score=_to_float(match.availability_score),
        rating_score=_to_float(match.rating_score),
        price_score=_to_float(match.price_score),
        created_at=match.created_at,
    )
