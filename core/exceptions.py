#!/usr/bin/env python3
"""
Domain exceptions for the matching service.

The web layer maps NotFoundError subclasses to 404 and
MatchValidationError subclasses to 400.
"""

from typing import Any


class ServiceException(Exception):
    """Base exception for service layer errors."""
    pass


class NotFoundError(ServiceException):
    """Raised when a looked-up identifier does not exist."""
    resource = "Resource"

    def __init__(self, resource_id: Any):
        self.resource_id = resource_id
        super().__init__(f"{self.resource} not found with id: {resource_id}")


class JobNotFoundError(NotFoundError):
    resource = "Job"


class ProfessionalNotFoundError(NotFoundError):
    resource = "Professional"


class MatchNotFoundError(NotFoundError):
    resource = "Match"


class MatchValidationError(ServiceException):
    """Raised when a matching request cannot be honoured as given."""
    pass


class InvalidJobStateError(MatchValidationError):
    """Raised when matching is requested for a job outside PENDING/MATCHED."""

    def __init__(self, status: Any):
        self.status = status
        status_name = getattr(status, 'value', status)
        super().__init__(f"Cannot find matches for job with status: {status_name}")
