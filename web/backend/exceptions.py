#!/usr/bin/env python3
"""
Error handlers for the web application.

Service exceptions live in core.exceptions and are re-exported here.
"""

import logging
from fastapi import Request, HTTPException
from fastapi.responses import JSONResponse

from core.exceptions import (
    ServiceException,
    JobNotFoundException,
    NoJobsFoundException,
    SessionNotFoundException,
    InvalidMessageException,
    InvalidSessionIdException,
    InvalidPolicyException,
    SessionStoreException
)

logger = logging.getLogger(__name__)

__all__ = [
    'ServiceException',
    'JobNotFoundException',
    'NoJobsFoundException',
    'SessionNotFoundException',
    'InvalidMessageException',
    'InvalidSessionIdException',
    'InvalidPolicyException',
    'SessionStoreException',
    'service_exception_handler',
    'http_exception_handler',
    'general_exception_handler'
]


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
    if isinstance(exc, (JobNotFoundException, NoJobsFoundException, SessionNotFoundException)):
        status_code = 404
    elif isinstance(exc, (InvalidMessageException, InvalidSessionIdException, InvalidPolicyException)):
        status_code = 400
    elif isinstance(exc, SessionStoreException):
        status_code = 503

    if status_code >= 500:
        logger.error(f"Service error in {request.url.path}: {exc}", exc_info=True)
    else:
        logger.warning(f"Service error in {request.url.path}: {exc}")

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
