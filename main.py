"""
Main API module for Secret Server.

Responsibilities:
    - Expose an unauthenticated greeting at GET /
    - Expose GET /secret behind HTTP Basic Auth, returning the configured
      secret message or a 401 challenge

Architecture:
    - App Factory pattern (create_app) for test isolation and DI.
    - Settings are loaded once per app and injected into the auth dependency;
      handlers never read the environment.
"""

import logging
from typing import Optional

from fastapi import Depends, FastAPI
from fastapi.responses import PlainTextResponse

from auth.dependencies import basic_auth
from auth.errors import AuthError, auth_error_handler
from auth.schemas import ErrorOut, SecretOut
from secret_server.config import Settings, load_settings

log = logging.getLogger("secret_server")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Factory function to build and configure a new FastAPI app instance.

    Args:
        settings (Settings, optional): Configuration to serve with. If omitted,
            it is loaded from the environment.

    Returns:
        FastAPI: A fully configured application instance.
    """
    if settings is None:
        settings = load_settings()

    app = FastAPI(
        title="Secret Server",
        description="Greeting endpoint plus a Basic-Auth protected secret",
    )

    # basic console logging (optional)
    if not logging.getLogger().handlers:
        logging.basicConfig(level=logging.INFO)

    if settings.credentials_configured:
        log.info("Basic auth enabled for user %r", settings.username)
    else:
        log.warning("USERNAME or PASSWORD not set; /secret will reject every request")

    app.add_exception_handler(AuthError, auth_error_handler)
    require_user = basic_auth(settings)

    # ----------------------------------------------------------------
    # Routes
    # ----------------------------------------------------------------
    @app.get("/", response_class=PlainTextResponse)
    def hello() -> str:
        return "Hello, world!"

    @app.get(
        "/secret",
        response_model=SecretOut,
        response_model_exclude_none=True,
        responses={401: {"model": ErrorOut, "description": "Missing or invalid credentials"}},
    )
    def secret(username: str = Depends(require_user)) -> SecretOut:
        """
        Return the configured secret message to an authenticated caller.

        Raises:
            MissingAuthHeaderError: Rendered as 401 "Authentication required".
            InvalidCredentialsError: Rendered as 401 "Invalid credentials".
        """
        log.info("Secret served to %r", username)
        return SecretOut(message=settings.secret_message, authenticated=True)

    return app


# `uvicorn main:app` and `from main import app` continue to work.
app = create_app()


if __name__ == "__main__":
    import uvicorn

    port = load_settings().port
    log.info("Server running on http://localhost:%d", port)
    uvicorn.run(app, host="0.0.0.0", port=port)
