import logging
from typing import List, Optional, Any
from sqlalchemy import select, exists
from sqlalchemy.exc import IntegrityError

from database.models import Match, MatchStatus
from database.repositories.base import BaseRepository
from core.exceptions import MatchNotFoundError

logger = logging.getLogger(__name__)

_CONFLICT_COLUMNS = ['job_id', 'professional_id']


def _dialect_insert(dialect_name: str):
    """Return the ON CONFLICT capable insert() for the dialect, if any."""
    if dialect_name == 'postgresql':
        from sqlalchemy.dialects.postgresql import insert
        return insert
    if dialect_name == 'sqlite':
        from sqlalchemy.dialects.sqlite import insert
        return insert
    return None


class MatchRepository(BaseRepository):
    def match_exists(self, job_id: Any, professional_id: Any) -> bool:
        stmt = select(exists().where(
            Match.job_id == job_id,
            Match.professional_id == professional_id
        ))
        return bool(self.db.execute(stmt).scalar())

    def get_existing_match(self, job_id: Any, professional_id: Any) -> Optional[Match]:
        stmt = select(Match).where(
            Match.job_id == job_id,
            Match.professional_id == professional_id
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def save_match(self, match: Match) -> Optional[Match]:
        """Insert a new match unless the (job, professional) pair is already stored.

        The uniqueness constraint decides, not a prior existence check, so two
        requests racing on the same pair store exactly one row.

        Returns:
            The stored Match, or None if the pair was already matched
        """
        values = {
            'job_id': match.job_id,
            'professional_id': match.professional_id,
            'match_score': match.match_score,
            'distance_km': match.distance_km,
            'distance_score': match.distance_score,
            'expertise_score': match.expertise_score,
            'availability_score': match.availability_score,
            'rating_score': match.rating_score,
            'price_score': match.price_score,
            'status': match.status or MatchStatus.SUGGESTED,
        }

        insert = _dialect_insert(self.db.get_bind().dialect.name)
        if insert is None:
            return self._save_with_savepoint(Match(**values))

        stmt = insert(Match).values(**values).on_conflict_do_nothing(
            index_elements=_CONFLICT_COLUMNS
        ).returning(Match.id)
        new_id = self.db.execute(stmt).scalar_one_or_none()

        if new_id is None:
            logger.debug(f"Match already exists for job {match.job_id} and professional {match.professional_id}")
            return None

        return self.db.get(Match, new_id)

    def _save_with_savepoint(self, match: Match) -> Optional[Match]:
        try:
            with self.db.begin_nested():
                self.db.add(match)
                self.db.flush()
        except IntegrityError:
            logger.debug(f"Match already exists for job {match.job_id} and professional {match.professional_id}")
            return None
        return match

    def get_match(self, match_id: Any) -> Match:
        match = self.db.get(Match, match_id)
        if match is None:
            raise MatchNotFoundError(match_id)
        return match

    def find_matches_for_job(self, job_id: Any, order_by_score_desc: bool = True) -> List[Match]:
        stmt = select(Match).where(Match.job_id == job_id)
        if order_by_score_desc:
            stmt = stmt.order_by(Match.match_score.desc(), Match.id)
        else:
            stmt = stmt.order_by(Match.id)
        return self.db.execute(stmt).scalars().all()

    def find_matches_for_professional(self, professional_id: Any) -> List[Match]:
        stmt = select(Match).where(
            Match.professional_id == professional_id
        ).order_by(Match.created_at.desc(), Match.id.desc())
        return self.db.execute(stmt).scalars().all()

    def update_status(self, match_id: Any, status: MatchStatus) -> Match:
        match = self.get_match(match_id)
        match.status = status
        self.db.flush()
        return match

    def delete_match(self, match_id: Any) -> None:
        match = self.get_match(match_id)
        self.db.delete(match)
        self.db.flush()
        logger.info(f"Deleted match {match_id}")
