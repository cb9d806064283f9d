"""Tests for the credential string codec."""

import base64

import pytest

from anonsts.constants import (
    ANONYMOUS_CREDENTIALS,
    ANONYMOUS_TOKEN_VALUE_TYPE,
    BASE64_ENCODING_TYPE,
)
from anonsts.security.tokens import (
    AnonymousAuthenticationToken,
    BaseAuthenticationToken,
    TokenParseError,
)


def _b64(text: str) -> str:
    return base64.b64encode(text.encode("utf-8")).decode("ascii")


def test_anonymous_token_encoding():
    token = AnonymousAuthenticationToken(realm="DDF", ip_address="10.0.0.5")

    assert token.principal == "Anonymous@10.0.0.5"
    assert token.credentials == ANONYMOUS_CREDENTIALS
    assert token.credential_string == (
        "Principal:Anonymous@10.0.0.5\nCredentials:Anonymous\nRealm:DDF"
    )
    assert token.encoded_credentials == _b64(token.credential_string)


def test_parse_encoded_anonymous_token():
    encoded = AnonymousAuthenticationToken(realm="karaf", ip_address="::1").encoded_credentials

    parsed = BaseAuthenticationToken.parse(encoded)
    assert parsed.principal == "Anonymous@::1"
    assert parsed.credentials == ANONYMOUS_CREDENTIALS
    assert parsed.realm == "karaf"


def test_missing_realm_encodes_empty_and_parses_as_none():
    token = AnonymousAuthenticationToken(realm=None, ip_address="10.0.0.5")
    assert token.credential_string.endswith("\nRealm:")

    parsed = BaseAuthenticationToken.parse(token.encoded_credentials)
    assert parsed.realm is None


def test_parse_unencoded_string():
    parsed = BaseAuthenticationToken.parse(
        "Principal:user\nCredentials:secret\nRealm:*", encoded=False
    )
    assert parsed == BaseAuthenticationToken(principal="user", realm="*", credentials="secret")


def test_trailing_newline_is_ignored():
    parsed = BaseAuthenticationToken.parse(
        _b64("Principal:Anonymous@1.2.3.4\nCredentials:Anonymous\nRealm:DDF\n")
    )
    assert parsed.realm == "DDF"


@pytest.mark.parametrize(
    "value",
    [
        "",
        "not base64!!",
        _b64("Credentials:Anonymous\nPrincipal:Anonymous@1.2.3.4\nRealm:DDF"),
        _b64("Principal:Anonymous@1.2.3.4\nCredentials:Anonymous"),
        _b64("Principal:Anonymous@1.2.3.4\nCredentials:Anonymous\nRealm:DDF\nExtra:1"),
        _b64("Principal:Anonymous@1.2.3.4\nCreds:Anonymous\nRealm:DDF"),
        base64.b64encode(b"\xff\xfe\xfd").decode("ascii"),
        "\u00e9",
        "UHJpbmNpcGFs\u00e9",
        "   \n",
    ],
)
def test_parse_rejects_malformed_credentials(value):
    with pytest.raises(TokenParseError):
        BaseAuthenticationToken.parse(value)


def test_token_parse_error_is_value_error():
    assert issubclass(TokenParseError, ValueError)


def test_to_binary_security_token():
    token = AnonymousAuthenticationToken(realm="DDF", ip_address="10.0.0.5")
    bst = token.to_binary_security_token()

    assert bst.value_type == ANONYMOUS_TOKEN_VALUE_TYPE
    assert bst.encoding_type == BASE64_ENCODING_TYPE
    assert bst.value == token.encoded_credentials


def test_parse_accepts_line_wrapped_base64():
    encoded = AnonymousAuthenticationToken(realm="DDF", ip_address="10.0.0.5").encoded_credentials
    wrapped = "\n".join(encoded[i : i + 16] for i in range(0, len(encoded), 16)) + "\r\n"

    parsed = BaseAuthenticationToken.parse(wrapped)
    assert parsed.principal == "Anonymous@10.0.0.5"
    assert parsed.realm == "DDF"
