#!/usr/bin/env python3
"""
Error handlers for the web application.

Domain exceptions live in core.exceptions; this module maps them to
HTTP responses with a consistent JSON body.
"""

import logging
from fastapi import Request, HTTPException
from fastapi.responses import JSONResponse

from core.exceptions import ServiceException, NotFoundError, MatchValidationError

logger = logging.getLogger(__name__)


async def service_exception_handler(
    request: Request,
    exc: ServiceException
) -> JSONResponse:
    """
    Handle service layer exceptions.

    Args:
        request: The FastAPI request.
        exc: The service exception.

    Returns:
        JSONResponse with error details.
    """
    status_code = 500
    if isinstance(exc, NotFoundError):
        status_code = 404
    elif isinstance(exc, MatchValidationError):
        status_code = 400

    if status_code >= 500:
        logger.error(f"Service error in {request.url.path}: {exc}", exc_info=True)
    else:
        logger.info(f"Rejected request to {request.url.path}: {exc}")

    return JSONResponse(
        status_code=status_code,
        content={
            "success": False,
            "error": str(exc),
            "type": exc.__class__.__name__
        }
    )


async def http_exception_handler(
    request: Request,
    exc: HTTPException
) -> JSONResponse:
    """
    Handle FastAPI HTTP exceptions with consistent format.
    """
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "success": False,
            "error": exc.detail,
            "type": "HTTPException"
        }
    )


async def general_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """
    Handle unexpected exceptions.
    """
    logger.exception(f"Unexpected error in {request.url.path}")

    return JSONResponse(
        status_code=500,
        content={
            "success": False,
            "error": "Internal server error",
            "type": "InternalError"
        }
    )
