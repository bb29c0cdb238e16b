#!/usr/bin/env python3
"""
Match service - request-scoped wrapper around the MatchOrchestrator.

Owns the transaction boundary for the web layer: writes are committed
here, failures roll back the whole request.
"""

import logging
from typing import List
from sqlalchemy.orm import Session

from core.config_loader import MatchingConfig
from core.matching import MatchOrchestrator, MatchingEngine
from database.uow import MatchingRepositories
from ..models.requests import MatchRequest
from ..models.responses import MatchSummary

logger = logging.getLogger(__name__)


class MatchService:
    """Service for finding and managing matches."""

    def __init__(self, db: Session, config: MatchingConfig, engine: MatchingEngine):
        self.db = db
        self.orchestrator = MatchOrchestrator.from_repositories(
            MatchingRepositories.for_session(db), engine=engine, config=config
        )

    def _commit(self) -> None:
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

    def find_matches(self, request: MatchRequest) -> List[MatchSummary]:
        try:
            results = self.orchestrator.find_matches(request.job_id, request.criteria_overrides())
        except Exception:
            self.db.rollback()
            raise
        self._commit()
        return [MatchSummary.from_result(r) for r in results]

    def get_matches_for_job(self, job_id: int) -> List[MatchSummary]:
        return [MatchSummary.from_result(r) for r in self.orchestrator.get_matches_for_job(job_id)]

    def get_matches_for_professional(self, professional_id: int) -> List[MatchSummary]:
        return [
            MatchSummary.from_result(r)
            for r in self.orchestrator.get_matches_for_professional(professional_id)
        ]

    def update_match_status(self, match_id: int, status: str) -> MatchSummary:
        result = self.orchestrator.update_match_status(match_id, status)
        self._commit()
        return MatchSummary.from_result(result)

    def delete_match(self, match_id: int) -> None:
        self.orchestrator.delete_match(match_id)
        self._commit()
