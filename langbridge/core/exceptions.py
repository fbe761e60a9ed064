"""Error taxonomy for the LangBridge API.

Every error carries the user-facing message and the HTTP status it is
rendered with. The application registers one handler for the base class.
"""

from typing import Optional

from fastapi import Request, status
from fastapi.responses import JSONResponse


class LangBridgeError(Exception):
    """Base exception for errors surfaced to API clients."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class InvalidArgumentError(LangBridgeError):
    """Malformed or illegal input."""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(LangBridgeError):
    """Referenced entity is absent."""

    status_code = status.HTTP_404_NOT_FOUND


class ForbiddenError(LangBridgeError):
    """Caller lacks authority over the target entity."""

    status_code = status.HTTP_403_FORBIDDEN


class ConflictError(LangBridgeError):
    """Operation violates the current state.

    Rendered as 400 to keep the status codes the web client already handles.
    """

    status_code = status.HTTP_400_BAD_REQUEST


class UnexpectedError(LangBridgeError):
    """Any other failure. The message never carries internal detail."""

    def __init__(self, message: str = "Server error"):
        super().__init__(message)


async def langbridge_error_handler(request: Request, exc: LangBridgeError):
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})
