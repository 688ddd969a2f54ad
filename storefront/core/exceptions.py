"""
Custom exception classes and error handlers
Provides consistent error responses across the application
"""

from fastapi import HTTPException, Request, status
from fastapi.responses import JSONResponse
from typing import Any, Dict, Optional
import logging

logger = logging.getLogger(__name__)


class StorefrontException(HTTPException):
    """Base exception class for the storefront application"""

    def __init__(
        self,
        status_code: int,
        detail: str,
        error_code: Optional[str] = None,
        headers: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(status_code=status_code, detail=detail, headers=headers)
        self.error_code = error_code


class BadRequestException(StorefrontException):
    """400 Bad Request"""

    def __init__(self, detail: str, error_code: str = "BAD_REQUEST"):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=detail,
            error_code=error_code
        )


class NotFoundException(StorefrontException):
    """404 Not Found"""

    def __init__(self, detail: str = "Not found", error_code: str = "NOT_FOUND"):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=detail,
            error_code=error_code
        )


class ConflictException(StorefrontException):
    """409 Conflict"""

    def __init__(self, detail: str, error_code: str = "CONFLICT"):
        super().__init__(
            status_code=status.HTTP_409_CONFLICT,
            detail=detail,
            error_code=error_code
        )


# Business logic exceptions
class InvalidArgumentException(BadRequestException):
    """Caller-supplied value violates a precondition"""

    def __init__(self, detail: str):
        super().__init__(detail=detail, error_code="INVALID_ARGUMENT")


class InsufficientStockException(BadRequestException):
    """Requested quantity exceeds available stock"""

    def __init__(self, available: int):
        super().__init__(
            detail=f"Not enough stock. Only {available} items available",
            error_code="INSUFFICIENT_STOCK"
        )
        self.available = available


class ReferentialViolationException(BadRequestException):
    """Foreign key target does not exist"""

    def __init__(self, detail: str):
        super().__init__(detail=detail, error_code="REFERENTIAL_VIOLATION")


async def storefront_exception_handler(request: Request, exc: StorefrontException) -> JSONResponse:
    """Render application exceptions with their error code"""
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "detail": exc.detail,
            "error_code": exc.error_code,
            "request_id": getattr(request.state, "request_id", None),
        },
        headers=exc.headers,
    )
