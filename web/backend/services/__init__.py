"""Service layer for the web API."""

from .match_service import MatchService

__all__ = ['MatchService']
