"""
Structured exceptions and error responses for the checklist service.

Provides consistent error handling across the API with:
- Custom exception classes
- Structured error response format
- FastAPI exception handlers
"""

from typing import Any, Dict, List, Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from checklist.logging_config import get_logger

logger = get_logger("checklist.error")


# =============================================================================
# Error Response Schema
# =============================================================================

class ErrorDetail(BaseModel):
    """Detail of a single error."""
    loc: Optional[List[str]] = None  # e.g. ["body", "name"]
    msg: str
    type: str


class ErrorResponse(BaseModel):
    """Structured error response format."""
    error: str  # Error code (e.g. "validation_error")
    message: str  # Message shown to the user
    details: Optional[List[ErrorDetail]] = None


# =============================================================================
# Custom Exceptions
# =============================================================================

class ChecklistException(Exception):
    """Base exception for all checklist errors."""

    def __init__(
        self,
        message: str,
        error_code: str = "internal_error",
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[List[Dict[str, Any]]] = None,
    ):
        self.message = message
        self.error_code = error_code
        self.status_code = status_code
        self.details = details
        super().__init__(message)


class NotFoundError(ChecklistException):
    """Resource not found."""

    def __init__(self, resource: str, resource_id: str):
        super().__init__(
            message=f"{resource} with ID {resource_id} not found",
            error_code="not_found",
            status_code=status.HTTP_404_NOT_FOUND,
        )
        self.resource = resource
        self.resource_id = resource_id


class ValidationError(ChecklistException):
    """User input rejected; nothing was changed."""

    def __init__(self, message: str, field: Optional[str] = None):
        details = None
        if field:
            details = [{"loc": ["body", field], "msg": message, "type": "value_error"}]
        super().__init__(
            message=message,
            error_code="validation_error",
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            details=details,
        )
        self.field = field


class ConfirmationRequiredError(ChecklistException):
    """Destructive action attempted without explicit confirmation."""

    def __init__(self, entity_id: str, name: str):
        super().__init__(
            message=f'Are you sure you want to delete "{name}"? This action cannot be undone.',
            error_code="confirmation_required",
            status_code=status.HTTP_409_CONFLICT,
            details=[{
                "loc": ["query", "confirm"],
                "msg": f"Repeat the request with confirm=true to delete {entity_id}",
                "type": "confirmation_error",
            }],
        )
        self.entity_id = entity_id


# =============================================================================
# Exception Handlers
# =============================================================================

async def checklist_exception_handler(request: Request, exc: ChecklistException) -> JSONResponse:
    """Handle ChecklistException and return structured response."""
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error": exc.error_code,
            "message": exc.message,
            "details": exc.details,
        },
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions."""
    logger.exception(f"Unhandled exception: {exc}")

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "internal_error",
            "message": "An unexpected error occurred",
            "details": None,
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI app."""
    app.add_exception_handler(ChecklistException, checklist_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
