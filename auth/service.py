"""
Core authentication logic.

Compares decoded credentials against the configured pair. Comparison is
constant-time so response timing does not leak how much of a value matched.
"""

import secrets
from typing import Optional

from secret_server.config import Settings


def _matches(supplied: str, expected: Optional[str]) -> bool:
    if expected is None:
        return False
    # compare_digest only accepts ASCII str; compare bytes instead
    return secrets.compare_digest(supplied.encode("utf-8"), expected.encode("utf-8"))


def verify_credentials(username: str, password: str, settings: Settings) -> bool:
    """
    Check a username/password pair against the configured credentials.

    Args:
        username (str): The username provided by the client.
        password (str): The password provided by the client.
        settings (Settings): Loaded configuration holding the expected pair.

    Returns:
        bool: True only if both values match exactly. Always False when
        either expected value is unset.
    """
    # Evaluate both so a wrong username takes as long as a wrong password
    user_ok = _matches(username, settings.username)
    pass_ok = _matches(password, settings.password)
    return user_ok and pass_ok
