"""
Runtime configuration for Secret Server
=======================================

Simple settings module that reads from environment variables (only here),
and hands out an immutable `Settings` object for the app factory to inject.
Avoid reading env vars anywhere else; import from this module instead.

Environment
-----------
- PORT           : int port for `python main.py`; default 8000
- USERNAME       : expected Basic-Auth username
- PASSWORD       : expected Basic-Auth password
- SECRET_MESSAGE : message returned by /secret on success

A `.env` file in the working directory is loaded first (existing variables win).
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import find_dotenv, load_dotenv

DEFAULT_PORT = 8000
DEFAULT_REALM = "Secret Area"


def _get_int(name: str, default: int) -> int:
    raw = os.getenv(name, str(default))
    try:
        return int(raw)
    except ValueError:
        return default


@dataclass(frozen=True)
class Settings:
    """Process-wide configuration; never mutated after load."""

    port: int = DEFAULT_PORT
    username: Optional[str] = None
    password: Optional[str] = None
    secret_message: Optional[str] = None
    realm: str = DEFAULT_REALM

    @property
    def credentials_configured(self) -> bool:
        return self.username is not None and self.password is not None


def load_settings(dotenv_path: Optional[str] = None) -> Settings:
    """
    Build a fresh `Settings` from the environment.

    A `.env` in the current working directory (or `dotenv_path`) is loaded
    first. Reads env **at call time** so tests can monkeypatch variables before
    constructing an app.
    """
    load_dotenv(dotenv_path or find_dotenv(usecwd=True), override=False)
    return Settings(
        port=_get_int("PORT", DEFAULT_PORT),
        username=os.getenv("USERNAME"),
        password=os.getenv("PASSWORD"),
        secret_message=os.getenv("SECRET_MESSAGE"),
    )
