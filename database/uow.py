import contextlib
import logging
from dataclasses import dataclass

from sqlalchemy.orm import Session

from database.database import SessionLocal
from database.repositories import JobRepository, ProfessionalRepository, MatchRepository

logger = logging.getLogger(__name__)


@dataclass
class MatchingRepositories:
    """Repositories bound to one Session, committed together."""
    session: Session
    jobs: JobRepository
    professionals: ProfessionalRepository
    matches: MatchRepository

    @classmethod
    def for_session(cls, session: Session) -> "MatchingRepositories":
        return cls(
            session=session,
            jobs=JobRepository(session),
            professionals=ProfessionalRepository(session),
            matches=MatchRepository(session),
        )


@contextlib.contextmanager
def matching_uow(session_factory=SessionLocal):
    """Per-unit-of-work transaction scope.

    Yields MatchingRepositories bound to a fresh Session. Commits on success,
    rolls back on exception, always closes.

    Usage:
        with matching_uow() as repos:
            orchestrator = MatchOrchestrator(repos, engine)
            orchestrator.find_matches(job_id)
        # commit happens automatically on successful exit
    """
    session = session_factory()
    try:
        yield MatchingRepositories.for_session(session)
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
