from sqlalchemy import Column, Integer, Text, TIMESTAMP, ForeignKey, Boolean, Date, Time, Numeric, Index
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship

from .base import Base


class Professional(Base):
    __tablename__ = 'professional'

    id = Column(Integer, primary_key=True, autoincrement=True)

    company_name = Column(Text, nullable=False)
    email = Column(Text, nullable=False, unique=True)
    phone = Column(Text)

    latitude = Column(Numeric(10, 8))
    longitude = Column(Numeric(11, 8))
    service_radius_km = Column(Integer, nullable=False, default=50)

    hourly_rate = Column(Numeric(10, 2))
    rating = Column(Numeric(3, 2), nullable=False, default=0)
    total_jobs_completed = Column(Integer, nullable=False, default=0)
    is_verified = Column(Boolean, nullable=False, default=False)

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())

    expertise = relationship("ProfessionalExpertise", cascade="all, delete-orphan", lazy="selectin")
    availability_slots = relationship("AvailabilitySlot", cascade="all, delete-orphan", lazy="selectin")

    __table_args__ = (
        Index('idx_professional_verified', 'is_verified'),
    )


class ProfessionalExpertise(Base):
    __tablename__ = 'professional_expertise'

    id = Column(Integer, primary_key=True, autoincrement=True)
    professional_id = Column(Integer, ForeignKey('professional.id', ondelete='CASCADE'), nullable=False)

    expertise_type = Column(Text, nullable=False)  # PANEL_INSTALLATION, BATTERY_SETUP, MAINTENANCE, ...
    years_experience = Column(Integer)
    certification_name = Column(Text)

    __table_args__ = (
        Index('idx_expertise_professional', 'professional_id'),
    )


class AvailabilitySlot(Base):
    __tablename__ = 'availability_slot'

    id = Column(Integer, primary_key=True, autoincrement=True)
    professional_id = Column(Integer, ForeignKey('professional.id', ondelete='CASCADE'), nullable=False)

    date = Column(Date, nullable=False)
    start_time = Column(Time, nullable=False)
    end_time = Column(Time, nullable=False)
    is_booked = Column(Boolean, nullable=False, default=False)

    __table_args__ = (
        Index('idx_slot_professional_date', 'professional_id', 'date'),
    )
