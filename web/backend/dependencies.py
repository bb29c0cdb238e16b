#!/usr/bin/env python3
"""
FastAPI dependencies for dependency injection.
"""

from functools import lru_cache
from typing import Generator

from fastapi import Depends
from sqlalchemy.orm import Session

from core.config_loader import get_config
from core.matching import MatchingEngine
from database.database import SessionLocal
from .services.match_service import MatchService


def get_db() -> Generator[Session, None, None]:
    """
    FastAPI dependency that yields a database session.

    Usage:
        @app.get("/endpoint")
        def my_endpoint(db: Session = Depends(get_db)):
            ...

    Yields:
        Session: Database session that will be automatically closed.
    """
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@lru_cache()
def get_matching_engine() -> MatchingEngine:
    """Shared engine; it holds no per-request state."""
    return MatchingEngine(max_workers=get_config().matching.scoring_workers)


def get_match_service(
    db: Session = Depends(get_db),
    engine: MatchingEngine = Depends(get_matching_engine)
) -> MatchService:
    return MatchService(db, config=get_config().matching, engine=engine)
