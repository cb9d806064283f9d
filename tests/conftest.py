"""Shared fixtures for anonymous token tests."""

from __future__ import annotations

import base64
from typing import Callable, Optional

import pytest

from anonsts import (
    AnonymousAuthenticationToken,
    AnonymousValidator,
    BinarySecurityToken,
    ReceivedToken,
)
from anonsts.constants import ANONYMOUS_CREDENTIALS, ANONYMOUS_TOKEN_VALUE_TYPE


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path, monkeypatch):
    """Keep a stray config file or environment from leaking into tests."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("ANONSTS_CONFIG", raising=False)
    monkeypatch.delenv("ANONSTS_SUPPORTED_REALMS", raising=False)


@pytest.fixture
def validator() -> AnonymousValidator:
    return AnonymousValidator(supported_realms=["DDF", "karaf"])


@pytest.fixture
def raw_target() -> Callable[..., ReceivedToken]:
    """Build a target from an unencoded credential string."""

    def _build(text: str, value_type: str = ANONYMOUS_TOKEN_VALUE_TYPE) -> ReceivedToken:
        value = base64.b64encode(text.encode("utf-8")).decode("ascii")
        return ReceivedToken(token=BinarySecurityToken(value_type=value_type, value=value))

    return _build


@pytest.fixture
def anonymous_target() -> Callable[..., ReceivedToken]:
    """Build a target carrying an anonymous token."""

    def _build(
        ip_address: str,
        realm: Optional[str] = None,
        credentials: str = ANONYMOUS_CREDENTIALS,
    ) -> ReceivedToken:
        token = AnonymousAuthenticationToken(
            realm=realm, ip_address=ip_address, credentials=credentials
        )
        return ReceivedToken(token=token.to_binary_security_token())

    return _build
