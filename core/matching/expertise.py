#!/usr/bin/env python3
"""
Expertise Scoring - skill and certification fit for a job category.

Points:
- Exact expertise match: 50 (related expertise instead: 25)
- Years of experience on matching entries: 3/year, up to 30
- Certification on a matching entry: 20
"""

from types import MappingProxyType
from typing import Iterable, List, Mapping, FrozenSet

from database.models import JobType
from core.matching.dto import ExpertiseEntry

EXACT_MATCH_POINTS = 50.0
RELATED_MATCH_POINTS = 25.0
POINTS_PER_YEAR = 3.0
MAX_EXPERIENCE_POINTS = 30.0
CERTIFICATION_POINTS = 20.0

REQUIRED_EXPERTISE: Mapping[JobType, str] = MappingProxyType({
    JobType.INSTALLATION: "PANEL_INSTALLATION",
    JobType.BATTERY_SETUP: "BATTERY_SETUP",
    JobType.MAINTENANCE: "MAINTENANCE",
    JobType.REPAIR: "REPAIR",
    JobType.INSPECTION: "INSPECTION",
    JobType.UPGRADE: "UPGRADE",
})

# Keyed by the required tag; a REPAIR expert is related to MAINTENANCE work
# but not the other way round.
RELATED_EXPERTISE: Mapping[str, FrozenSet[str]] = MappingProxyType({
    "PANEL_INSTALLATION": frozenset({"UPGRADE", "INSPECTION"}),
    "MAINTENANCE": frozenset({"REPAIR", "INSPECTION"}),
    "REPAIR": frozenset({"MAINTENANCE"}),
})


def required_expertise_for(job_type: JobType) -> str:
    return REQUIRED_EXPERTISE[JobType(job_type)]


def _normalize(tag: str) -> str:
    return (tag or "").strip().upper()


def _exact_matches(expertise: Iterable[ExpertiseEntry], required: str) -> List[ExpertiseEntry]:
    return [e for e in expertise if _normalize(e.expertise_type) == required]


def has_related_expertise(expertise: Iterable[ExpertiseEntry], required: str) -> bool:
    related = RELATED_EXPERTISE.get(required, frozenset())
    return any(_normalize(e.expertise_type) in related for e in expertise)


def calculate_expertise_score(expertise: List[ExpertiseEntry], job_type: JobType) -> float:
    if not expertise:
        return 0.0

    required = required_expertise_for(job_type)
    matching = _exact_matches(expertise, required)

    score = 0.0
    if matching:
        score += EXACT_MATCH_POINTS
    elif has_related_expertise(expertise, required):
        score += RELATED_MATCH_POINTS

    max_years = max((e.years_experience or 0 for e in matching), default=0)
    if max_years > 0:
        score += min(MAX_EXPERIENCE_POINTS, max_years * POINTS_PER_YEAR)

    if any(e.certification_name and e.certification_name.strip() for e in matching):
        score += CERTIFICATION_POINTS

    return min(100.0, score)


def generate_expertise_reason(expertise: List[ExpertiseEntry], job_type: JobType) -> str:
    if not expertise:
        return "No declared expertise"

    required = required_expertise_for(job_type)
    if _exact_matches(expertise, required):
        return f"Direct expertise match for {JobType(job_type).value}"
    if has_related_expertise(expertise, required):
        return "Related expertise in solar systems"
    return "General solar experience"
