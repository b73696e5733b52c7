"""
Unified error handling for consistent API error responses.

All API errors should use these classes so every failure renders as:
{
    "error": "Human-readable message"
}
"""

from fastapi import HTTPException, Request
from fastapi.responses import JSONResponse


class APIError(HTTPException):
    """
    Base API error class for consistent error responses.

    ``code`` is a stable machine identifier used in logs; the response body
    only carries the message.
    """

    def __init__(
        self,
        status_code: int,
        code: str,
        message: str,
        headers: dict[str, str] | None = None,
    ):
        self.code = code
        self.message = message
        super().__init__(
            status_code=status_code,
            detail=message,
            headers=headers,
        )


class ValidationError(APIError):
    """Invalid input (400)."""

    def __init__(self, message: str):
        super().__init__(status_code=400, code="VALIDATION_ERROR", message=message)


class NotFoundError(APIError):
    """Resource not found (404)."""

    def __init__(self, message: str = "User not found"):
        super().__init__(status_code=404, code="NOT_FOUND", message=message)


class ConfigurationError(APIError):
    """Server missing required configuration (500)."""

    def __init__(self, message: str):
        super().__init__(status_code=500, code="NOT_CONFIGURED", message=message)


class UpstreamError(APIError):
    """GitHub data could not be fetched (500)."""

    def __init__(self, message: str = "Failed to fetch GitHub data"):
        super().__init__(status_code=500, code="EXTERNAL_API_ERROR", message=message)


async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
    """
    FastAPI exception handler for APIError.

    Converts APIError exceptions to consistent JSON responses.
    """
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.message},
        headers=exc.headers,
    )
