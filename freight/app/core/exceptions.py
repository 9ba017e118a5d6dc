"""
Custom exceptions and error handlers for consistent error responses.

Provides standardized error codes and global exception handlers.
"""

import logging
from fastapi import HTTPException, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from typing import Any, Dict, Iterable

logger = logging.getLogger("freight")


class AppException(Exception):
    """Base application exception."""

    def __init__(self, message: str, error_code: str, status_code: int = 500, details: Dict[str, Any] = None):
        self.message = message
        self.error_code = error_code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)


class ResourceNotFoundError(AppException):
    """Raised when requested resource is not found."""

    def __init__(self, resource: str, resource_id: Any = None):
        message = f"{resource} not found"
        if resource_id:
            message = f"{resource} with ID {resource_id} not found"
        super().__init__(
            message=message,
            error_code="ERR_NOT_FOUND_001",
            status_code=status.HTTP_404_NOT_FOUND,
            details={"resource": resource, "id": resource_id}
        )


class BookingConflictError(AppException):
    """
    Raised when a trip would double-book a driver or truck.

    Carries the field-scoped errors produced by the conflict checker so the
    caller can attach them to the offending form fields.
    """

    def __init__(self, errors: Iterable):
        self.errors = list(errors)
        super().__init__(
            message="Trip conflicts with another trip in progress",
            error_code="ERR_BOOKING_CONFLICT",
            status_code=status.HTTP_409_CONFLICT,
            details={
                "errors": [{"field": e.field, "message": e.message} for e in self.errors]
            }
        )


class CargoAlreadyAssignedError(AppException):
    """Raised when a cargo is already carried by another trip."""

    def __init__(self, cargo_id: int, trip_id: int):
        super().__init__(
            message=f"Cargo {cargo_id} is already assigned to trip {trip_id}",
            error_code="ERR_CARGO_ASSIGNED",
            status_code=status.HTTP_409_CONFLICT,
            details={
                "errors": [{"field": "cargo_id", "message": "Cargo is already assigned to another trip"}]
            }
        )


class ReferenceInUseError(AppException):
    """Raised when deleting an entity that trips still reference."""

    def __init__(self, resource: str, resource_id: int):
        super().__init__(
            message=f"Cannot delete {resource.lower()} {resource_id}: it is referenced by existing trips",
            error_code="ERR_REFERENCE_IN_USE",
            status_code=status.HTTP_409_CONFLICT,
            details={"resource": resource, "id": resource_id}
        )


# Global Exception Handlers

async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Handler for custom application exceptions."""
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error_code": exc.error_code,
            "message": exc.message,
            "details": exc.details
        }
    )


async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    """Handler for FastAPI HTTPException with standardized format."""
    # Map status code to error code
    error_code_map = {
        400: "ERR_BAD_REQUEST",
        404: "ERR_NOT_FOUND",
        409: "ERR_CONFLICT",
        500: "ERR_INTERNAL_SERVER"
    }

    error_code = error_code_map.get(exc.status_code, "ERR_UNKNOWN")

    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error_code": error_code,
            "message": exc.detail,
            "details": {}
        }
    )


def _field_errors(exc: RequestValidationError) -> list:
    """Flatten pydantic errors into {field, message} pairs."""
    errors = []
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ()) if part != "body"]
        errors.append({
            "field": loc[-1] if loc else None,
            "message": error.get("msg", "Invalid value"),
        })
    return errors


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Handler for Pydantic validation errors."""
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "error_code": "ERR_VALIDATION",
            "message": "Validation error",
            "details": {
                "errors": _field_errors(exc)
            }
        }
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handler for unhandled exceptions."""
    logger.exception("Unhandled exception: %s", type(exc).__name__)

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error_code": "ERR_INTERNAL_SERVER",
            "message": "An internal server error occurred",
            "details": {}
        }
    )
