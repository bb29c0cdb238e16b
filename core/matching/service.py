#!/usr/bin/env python3
"""
Match Orchestrator - turns a job and a candidate pool into stored matches.

Flow for find_matches():
1. Load the job; only PENDING or MATCHED jobs can be matched
2. Build MatchCriteria from configured defaults + request overrides
3. Load the candidate pool (verified professionals only, by default)
4. Score and rank candidates with the MatchingEngine
5. Store each survivor as a SUGGESTED match, skipping pairs already matched
6. Move the job from PENDING to MATCHED if anything new was stored

Holds no session of its own: the repositories passed in share the caller's
unit of work, which commits or rolls back the whole request.
"""

from typing import List, Optional, Dict, Any, Union
import logging

from database.models import Match, JobStatus, MatchStatus
from core.config_loader import MatchingConfig
from core.exceptions import MatchValidationError, InvalidJobStateError
from core.matching import geo
from core.matching.criteria import MatchCriteria
from core.matching.dto import JobDTO, job_from_orm, professional_from_orm, match_from_orm
from core.matching.engine import MatchingEngine
from core.matching.models import MatchResult, RankedCandidate

logger = logging.getLogger(__name__)

MATCHABLE_JOB_STATUSES = frozenset({JobStatus.PENDING, JobStatus.MATCHED})


class MatchOrchestrator:
    """
    Service for finding, storing and managing matches.

    Collaborators are reached only through the repositories:
    - job_repo: get_job, set_job_status
    - professional_repo: get_professional_pool, professional_exists, get_professionals
    - match_repo: match_exists, save_match, find_matches_*, get_match, update_status, delete_match
    """

    def __init__(
        self,
        job_repo,
        professional_repo,
        match_repo,
        engine: Optional[MatchingEngine] = None,
        config: Optional[MatchingConfig] = None
    ):
        self.jobs = job_repo
        self.professionals = professional_repo
        self.matches = match_repo
        self.config = config or MatchingConfig()
        self.engine = engine or MatchingEngine(max_workers=self.config.scoring_workers)

    @classmethod
    def from_repositories(
        cls,
        repos,
        engine: Optional[MatchingEngine] = None,
        config: Optional[MatchingConfig] = None
    ) -> "MatchOrchestrator":
        """Build from a MatchingRepositories bundle (see database.uow)."""
        return cls(repos.jobs, repos.professionals, repos.matches, engine=engine, config=config)

    def find_matches(
        self,
        job_id: Any,
        overrides: Optional[Dict[str, Any]] = None
    ) -> List[MatchResult]:
        """
        Find, rank and store matches for a job.

        Args:
            job_id: Job to match
            overrides: Any subset of MatchCriteria fields; None values keep the default

        Returns:
            Newly created matches in ranked order. Pairs matched by an earlier
            (or concurrent) request are not included.

        Raises:
            JobNotFoundError: job does not exist
            InvalidJobStateError: job is not PENDING or MATCHED
            MatchValidationError: job location or overrides are invalid
        """
        logger.info(f"Finding matches for job ID: {job_id}")

        job = job_from_orm(self.jobs.get_job(job_id))
        self._validate_job(job)

        criteria = MatchCriteria.build(self.config, overrides)
        if criteria.total_weight != 100.0:
            logger.info(f"Match criteria weights sum to {criteria.total_weight:g}, not 100")

        pool = [
            professional_from_orm(p)
            for p in self.professionals.get_professional_pool(criteria.verified_only)
        ]
        logger.info(f"Evaluating {len(pool)} professionals for job {job.id}")

        outcomes = self.engine.score_candidates(pool, job, criteria)
        ranked = self.engine.rank(outcomes, criteria)
        logger.info(f"Found {len(ranked)} matches above threshold for job {job.id}")

        created = self._persist(job, ranked)

        if created and job.status == JobStatus.PENDING:
            self.jobs.set_job_status(job.id, JobStatus.MATCHED, expected_status=JobStatus.PENDING)

        logger.info(f"Created {len(created)} new matches for job {job.id}")
        return created

    def _validate_job(self, job: JobDTO) -> None:
        if job.status not in MATCHABLE_JOB_STATUSES:
            raise InvalidJobStateError(job.status)
        if not geo.is_valid_location(job.latitude, job.longitude):
            raise MatchValidationError(
                f"Job {job.id} has an invalid location: ({job.latitude}, {job.longitude})"
            )

    def _persist(self, job: JobDTO, ranked: List[RankedCandidate]) -> List[MatchResult]:
        created = []
        for candidate in ranked:
            professional = candidate.professional
            if self.matches.match_exists(job.id, professional.id):
                logger.debug(f"Match already exists for job {job.id} and professional {professional.id}")
                continue

            saved = self.matches.save_match(self._build_match(job, candidate))
            if saved is None:
                # Stored by a concurrent request between the check and the insert
                continue

            created.append(MatchResult.from_match(
                match_from_orm(saved), professional=professional, breakdown=candidate.breakdown
            ))
        return created

    @staticmethod
    def _build_match(job: JobDTO, candidate: RankedCandidate) -> Match:
        breakdown = candidate.breakdown
        return Match(
            job_id=job.id,
            professional_id=candidate.professional.id,
            match_score=breakdown.total_score,
            distance_km=breakdown.distance_km,
            distance_score=breakdown.distance_score,
            expertise_score=breakdown.expertise_score,
            availability_score=breakdown.availability_score,
            rating_score=breakdown.rating_score,
            price_score=breakdown.price_score,
            status=MatchStatus.SUGGESTED,
        )

    def _with_professionals(self, matches: List[Match]) -> List[MatchResult]:
        ids = list({m.professional_id for m in matches})
        professionals = {
            p.id: professional_from_orm(p)
            for p in self.professionals.get_professionals(ids)
        }
        return [
            MatchResult.from_match(match_from_orm(m), professional=professionals.get(m.professional_id))
            for m in matches
        ]

    def get_matches_for_job(self, job_id: Any) -> List[MatchResult]:
        """Stored matches for a job, highest score first."""
        logger.info(f"Fetching matches for job ID: {job_id}")
        self.jobs.get_job(job_id)
        return self._with_professionals(self.matches.find_matches_for_job(job_id, order_by_score_desc=True))

    def get_matches_for_professional(self, professional_id: Any) -> List[MatchResult]:
        logger.info(f"Fetching matches for professional ID: {professional_id}")
        self.professionals.get_professional(professional_id)
        return self._with_professionals(self.matches.find_matches_for_professional(professional_id))

    def update_match_status(self, match_id: Any, new_status: Union[MatchStatus, str]) -> MatchResult:
        """Set a match's status. Any status may follow any other."""
        try:
            status = MatchStatus(str(getattr(new_status, "value", new_status)).upper())
        except ValueError:
            raise MatchValidationError(f"Invalid match status: {new_status}")

        logger.info(f"Updating match {match_id} status to {status.value}")
        match = self.matches.update_status(match_id, status)
        return self._with_professionals([match])[0]

    def delete_match(self, match_id: Any) -> None:
        logger.info(f"Deleting match with ID: {match_id}")
        self.matches.delete_match(match_id)
