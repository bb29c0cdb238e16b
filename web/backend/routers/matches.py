#!/usr/bin/env python3
"""
Match endpoints - find, view and manage matches.
"""

import logging
from fastapi import APIRouter, Depends, Path, Query

from ..dependencies import get_match_service
from ..services.match_service import MatchService
from ..models.requests import MatchRequest
from ..models.responses import MatchesResponse, MatchResponse, DeleteMatchResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/matches", tags=["matches"])


@router.post("/find", response_model=MatchesResponse)
def find_matches(
    request: MatchRequest,
    service: MatchService = Depends(get_match_service)
):
    """
    Score professionals against a job and store the best as new matches.

    Only matches created by this call are returned; pairs matched earlier
    are skipped. Unspecified criteria take the configured defaults.
    """
    matches = service.find_matches(request)
    return MatchesResponse(
        success=True,
        message="Matches found successfully",
        count=len(matches),
        data=matches
    )


@router.get("/job/{job_id}", response_model=MatchesResponse)
def get_matches_for_job(
    job_id: int = Path(..., ge=1),
    service: MatchService = Depends(get_match_service)
):
    """Stored matches for a job, highest score first."""
    matches = service.get_matches_for_job(job_id)
    return MatchesResponse(success=True, count=len(matches), data=matches)


@router.get("/professional/{professional_id}", response_model=MatchesResponse)
def get_matches_for_professional(
    professional_id: int = Path(..., ge=1),
    service: MatchService = Depends(get_match_service)
):
    matches = service.get_matches_for_professional(professional_id)
    return MatchesResponse(success=True, count=len(matches), data=matches)


@router.patch("/{match_id}/status", response_model=MatchResponse)
def update_match_status(
    match_id: int = Path(..., ge=1),
    status: str = Query(..., description="New status: SUGGESTED, ACCEPTED, REJECTED or WITHDRAWN (any case)"),
    service: MatchService = Depends(get_match_service)
):
    match = service.update_match_status(match_id, status)
    return MatchResponse(success=True, message="Match status updated successfully", data=match)


@router.delete("/{match_id}", response_model=DeleteMatchResponse)
def delete_match(
    match_id: int = Path(..., ge=1),
    service: MatchService = Depends(get_match_service)
):
    service.delete_match(match_id)
    return DeleteMatchResponse(success=True, message="Match deleted successfully")
