#!/usr/bin/env python3
"""
Matching Module - weighted professional/job matching.

Public API:
- MatchOrchestrator: finds, stores and manages matches for a job
- MatchingEngine: per-candidate scoring and ranking
- MatchCriteria: weights, threshold and cap for one request
- MatchScoreBreakdown / MatchResult: result structures

Scoring is split into one module per dimension:

- geo.py: haversine distance and proximity score
- expertise.py: skill and certification fit
- availability.py: schedule fit
- rating.py: star rating and track record
- price.py: rate against budget
"""

from core.matching.criteria import MatchCriteria
from core.matching.engine import MatchingEngine
from core.matching.models import MatchScoreBreakdown, MatchResult, ScoringOutcome, RankedCandidate
from core.matching.service import MatchOrchestrator

__all__ = [
    'MatchOrchestrator',
    'MatchingEngine',
    'MatchCriteria',
    'MatchScoreBreakdown',
    'MatchResult',
    'ScoringOutcome',
    'RankedCandidate',
]
