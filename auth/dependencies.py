"""
FastAPI dependency functions for authentication.

These can be used in routes with Depends() to protect endpoints.
"""

import logging
from typing import Callable, Optional

from fastapi import Header

from secret_server.config import Settings
from .errors import InvalidCredentialsError, MissingAuthHeaderError
from .service import verify_credentials
from .utils import decode_basic_credentials, extract_basic_token

log = logging.getLogger("secret_server.auth")


def basic_auth(settings: Settings) -> Callable[..., str]:
    """
    Build a dependency that enforces Basic Auth against `settings`.

    Args:
        settings (Settings): Configuration captured by the app factory.

    Returns:
        Callable: Dependency returning the authenticated username.

    Raises (from the dependency):
        MissingAuthHeaderError: No header, or a scheme other than "Basic ".
        InvalidCredentialsError: Undecodable or non-matching credentials.
    """

    def get_current_user(authorization: Optional[str] = Header(None)) -> str:
        token = extract_basic_token(authorization)
        if token is None:
            log.info("Rejected request: missing or non-Basic Authorization header")
            raise MissingAuthHeaderError(settings.realm)

        try:
            username, password = decode_basic_credentials(token)
        except ValueError as exc:
            log.info("Rejected request: %s", exc)
            raise InvalidCredentialsError(settings.realm) from exc

        if not verify_credentials(username, password, settings):
            log.info("Rejected request: invalid credentials for user %r", username)
            raise InvalidCredentialsError(settings.realm)

        return username

    return get_current_user
