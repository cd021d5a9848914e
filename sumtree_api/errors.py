"""
API Error Handling

Standardized error handling for the API.
"""

from fastapi import Request
from fastapi.responses import JSONResponse

from sumtree.schemas.errors import SumTreeException
from sumtree_api.models.responses import ErrorDetail, ErrorResponse


async def sumtree_error_handler(request: Request, exc: SumTreeException) -> JSONResponse:
    """Map tree construction and proof errors to 400 responses."""
    return JSONResponse(
        status_code=400,
        content=ErrorResponse(
            ok=False,
            error=ErrorDetail(
                code=exc.code,
                message=exc.message,
                details=exc.details,
            ),
        ).model_dump(),
    )


async def generic_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions."""
    return JSONResponse(
        status_code=500,
        content=ErrorResponse(
            ok=False,
            error=ErrorDetail(
                code="INTERNAL_ERROR",
                message="An unexpected error occurred",
                details={"type": type(exc).__name__},
            ),
        ).model_dump(),
    )
