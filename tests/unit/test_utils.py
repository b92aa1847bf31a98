"""
Unit tests for auth.utils header parsing and decoding.
"""

import pytest

from auth.utils import decode_basic_credentials, extract_basic_token


@pytest.mark.parametrize("header", [None, "", "Bearer abc", "basic YWRtaW46aHVudGVyMg==", "Basic"])
def test_extract_rejects_missing_or_other_scheme(header):
    assert extract_basic_token(header) is None


def test_extract_returns_token_after_prefix():
    assert extract_basic_token("Basic YWRtaW46aHVudGVyMg==") == "YWRtaW46aHVudGVyMg=="


def test_decode_splits_on_first_colon_only():
    # base64("admin:pa:ss:word")
    assert decode_basic_credentials("YWRtaW46cGE6c3M6d29yZA==") == ("admin", "pa:ss:word")


def test_decode_allows_empty_password():
    # base64("admin:")
    assert decode_basic_credentials("YWRtaW46") == ("admin", "")


def test_decode_rejects_malformed_base64():
    with pytest.raises(ValueError, match="Malformed Base64"):
        decode_basic_credentials("not base64!!")


def test_decode_rejects_missing_separator():
    # base64("admin")
    with pytest.raises(ValueError, match="separator"):
        decode_basic_credentials("YWRtaW4=")


def test_decode_rejects_non_utf8():
    # base64(b"\xff\xfe:x")
    with pytest.raises(ValueError, match="UTF-8"):
        decode_basic_credentials("//46eA==")


def test_decode_rejects_non_ascii_token():
    with pytest.raises(ValueError, match="Malformed Base64"):
        decode_basic_credentials("admín:pässword")
