from sqlalchemy import Column, Integer, Text, TIMESTAMP, Date, Numeric, Enum, Index, CheckConstraint
from sqlalchemy.sql import func

from .base import Base
from .enums import JobStatus, JobType


class Job(Base):
    """
    A customer's service request.

    Owned by job management; the matching engine reads it and may move
    status from PENDING to MATCHED.
    """
    __tablename__ = 'job'

    id = Column(Integer, primary_key=True, autoincrement=True)

    job_type = Column(Enum(JobType, native_enum=False, length=50), nullable=False)
    title = Column(Text, nullable=False)
    description = Column(Text)

    status = Column(Enum(JobStatus, native_enum=False, length=50), nullable=False, default=JobStatus.PENDING)

    latitude = Column(Numeric(10, 8), nullable=False)
    longitude = Column(Numeric(11, 8), nullable=False)

    preferred_date = Column(Date)
    budget_min = Column(Numeric(10, 2))
    budget_max = Column(Numeric(10, 2))

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())

    __table_args__ = (
        CheckConstraint(
            'budget_min IS NULL OR budget_max IS NULL OR budget_min <= budget_max',
            name='ck_job_budget_range'
        ),
        Index('idx_job_status', 'status'),
    )
