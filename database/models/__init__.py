from .base import Base
from .enums import JobType, JobStatus, MatchStatus
from .job import Job
from .professional import Professional, ProfessionalExpertise, AvailabilitySlot
from .match import Match

__all__ = [
    'Base',
    'JobType',
    'JobStatus',
    'MatchStatus',
    'Job',
    'Professional',
    'ProfessionalExpertise',
    'AvailabilitySlot',
    'Match',
]
