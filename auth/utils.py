"""
Utility functions for the auth module.
"""

import base64
import binascii
from typing import Optional, Tuple

BASIC_PREFIX = "Basic "


def extract_basic_token(header: Optional[str]) -> Optional[str]:
    """
    Return the encoded part of a Basic `Authorization` header.

    The scheme check is a literal, case-sensitive prefix match on "Basic ".
    Returns None when the header is absent or uses another scheme.
    """
    if not header or not header.startswith(BASIC_PREFIX):
        return None
    return header[len(BASIC_PREFIX):].strip()


def decode_basic_credentials(token: str) -> Tuple[str, str]:
    """
    Decode a Base64 `username:password` token.

    Only the first colon separates the two parts; the password keeps any
    further colons verbatim.

    Raises:
        ValueError: If the token is not valid Base64, not UTF-8, or has no colon.
    """
    try:
        raw = base64.b64decode(token, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise ValueError("Malformed Base64 credentials") from exc

    try:
        decoded = raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ValueError("Credentials are not valid UTF-8") from exc

    username, sep, password = decoded.partition(":")
    if not sep:
        raise ValueError("Credentials missing ':' separator")
    return username, password
