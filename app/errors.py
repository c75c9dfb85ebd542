"""Structured error types and handlers for API responses."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from fastapi import Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


def build_error_payload(code: str, message: str, details: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    payload = {"error": {"code": code, "message": message}}
    if details is not None:
        payload["error"]["details"] = details
    return payload


class AppError(Exception):
    """Application-scoped error for standardized API responses."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    code: str = "internal_error"

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    @property
    def payload(self) -> Dict[str, Any]:
        return build_error_payload(self.code, self.message, self.details)


class InvalidArgumentError(AppError):
    """A required identifier or payload was missing."""

    status_code = status.HTTP_400_BAD_REQUEST
    code = "invalid_argument"


class NotFoundError(AppError):
    """No task or comment exists with the given id."""

    status_code = status.HTTP_404_NOT_FOUND
    code = "not_found"


class InternalError(AppError):
    """
    Unexpected store or runtime failure.

    ``cause`` keeps the underlying error text for logs; it is never
    part of the response body.
    """

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    code = "internal_error"

    def __init__(self, message: str, cause: Optional[str] = None):
        super().__init__(message)
        self.cause = cause


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    if isinstance(exc, InternalError):
        logger.error("%s %s failed: %s (cause: %s)", request.method, request.url.path, exc.message, exc.cause)
    return JSONResponse(status_code=exc.status_code, content=exc.payload)


async def validation_error_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed ids, dates or body types are the caller's fault: 400, not 422."""
    payload = build_error_payload(
        InvalidArgumentError.code,
        "Request validation failed",
        {"errors": jsonable_encoder(exc.errors())},
    )
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=payload)
