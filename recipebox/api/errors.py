"""
Helpers turning application errors into HTTP responses.

Every error body has the ErrorResponse shape:
{"error_code": ..., "message": ..., "details": {...}}
"""
import logging
from typing import Any, Dict, Optional

from fastapi import HTTPException, status

from recipebox.errors import ErrorCode, ErrorResponse, RecipeBoxError


def to_http_exception(error: RecipeBoxError) -> HTTPException:
    """Wrap a RecipeBoxError, keeping its status code and error code."""
    return HTTPException(
        status_code=error.status_code,
        detail=error.to_response().model_dump(),
    )


def internal_error(
    logger: logging.Logger,
    error: Exception,
    error_code: ErrorCode,
    message: str,
    details: Optional[Dict[str, Any]] = None,
) -> HTTPException:
    """
    Log an unexpected failure and build a structured 500 response.

    Must be called from inside an ``except`` block so the traceback is logged.
    """
    logger.exception(message)
    body = ErrorResponse(
        error_code=error_code,
        message=message,
        details={**(details or {}), "error_type": type(error).__name__},
    )
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=body.model_dump(),
    )
