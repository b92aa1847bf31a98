"""
Authentication errors and the 401 challenge response.
"""

from typing import Optional

from fastapi import Request, status
from fastapi.responses import JSONResponse


class AuthError(Exception):
    """Base error for a request that failed Basic authentication."""

    message = "Authentication failed"

    def __init__(self, realm: str, message: Optional[str] = None):
        self.realm = realm
        if message is not None:
            self.message = message
        super().__init__(self.message)


class MissingAuthHeaderError(AuthError):
    """Authorization header absent or not using the Basic scheme."""

    message = "Authentication required"


class InvalidCredentialsError(AuthError):
    """Credentials could not be decoded or did not match."""

    message = "Invalid credentials"


def challenge_header(realm: str) -> dict:
    return {"WWW-Authenticate": f'Basic realm="{realm}"'}


async def auth_error_handler(request: Request, exc: AuthError) -> JSONResponse:
    """Render any AuthError as a 401 with a Basic challenge."""
    return JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED,
        content={"error": exc.message},
        headers=challenge_header(exc.realm),
    )
