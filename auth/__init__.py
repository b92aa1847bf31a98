"""
Auth package for the Secret Server.

Provides the HTTP Basic Auth pieces used by the /secret route: header
decoding, constant-time credential checks, a FastAPI dependency and the
401 challenge handler.
"""

from .dependencies import basic_auth
from .errors import AuthError, InvalidCredentialsError, MissingAuthHeaderError

__all__ = ["basic_auth", "AuthError", "InvalidCredentialsError", "MissingAuthHeaderError"]
