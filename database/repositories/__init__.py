from database.repositories.base import BaseRepository
from database.repositories.job import JobRepository
from database.repositories.professional import ProfessionalRepository
from database.repositories.match import MatchRepository

__all__ = [
    'BaseRepository',
    'JobRepository',
    'ProfessionalRepository',
    'MatchRepository',
]
