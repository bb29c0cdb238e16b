from sqlalchemy import Column, Integer, TIMESTAMP, ForeignKey, Numeric, Enum, UniqueConstraint, Index
from sqlalchemy.sql import func

from .base import Base
from .enums import MatchStatus


class Match(Base):
    """
    A persisted suggestion pairing a professional with a job.

    Stores:
    - Weighted total score
    - Per-dimension scores from the breakdown
    - Lifecycle status (SUGGESTED until the customer acts on it)

    The (job_id, professional_id) unique constraint is what keeps
    concurrent matching runs from storing the same pair twice.
    """
    __tablename__ = 'match'

    id = Column(Integer, primary_key=True, autoincrement=True)
    job_id = Column(Integer, ForeignKey('job.id', ondelete='CASCADE'), nullable=False)
    professional_id = Column(Integer, ForeignKey('professional.id', ondelete='CASCADE'), nullable=False)

    match_score = Column(Numeric(5, 2), nullable=False)

    distance_km = Column(Numeric(8, 2))
    distance_score = Column(Numeric(5, 2))
    expertise_score = Column(Numeric(5, 2))
    availability_score = Column(Numeric(5, 2))
    rating_score = Column(Numeric(5, 2))
    price_score = Column(Numeric(5, 2))

    status = Column(Enum(MatchStatus, native_enum=False, length=50), nullable=False, default=MatchStatus.SUGGESTED)
    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())

    __table_args__ = (
        UniqueConstraint('job_id', 'professional_id', name='uq_match_job_professional'),
        Index('idx_match_job_score', 'job_id', 'match_score'),
        Index('idx_match_professional', 'professional_id'),
        Index('idx_match_status', 'status'),
    )
