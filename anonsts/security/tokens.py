"""Codec for the binary security token credential string.

The credential string has three labelled lines::

    Principal:<principal>
    Credentials:<credentials>
    Realm:<realm>

and travels base64 encoded inside a :class:`~anonsts.contracts.BinarySecurityToken`.
"""

from __future__ import annotations

import base64
from typing import List, Optional

from ..constants import (
    ANONYMOUS_CREDENTIALS,
    ANONYMOUS_TOKEN_VALUE_TYPE,
    BASE64_ENCODING_TYPE,
)
from ..contracts import BinarySecurityToken
from .principal import AnonymousPrincipal

PRINCIPAL_LABEL = "Principal:"
CREDENTIALS_LABEL = "Credentials:"
REALM_LABEL = "Realm:"
NEWLINE = "\n"


class TokenParseError(ValueError):
    """Raised when a credential string cannot be decoded into a token."""


def _split_components(text: str) -> List[str]:
    components = text.split(NEWLINE)
    # trailing empty lines do not count as components
    while components and not components[-1]:
        components.pop()
    return components


def _parse_component(component: str, label: str) -> str:
    if not component.startswith(label):
        raise TokenParseError(f"Expected component starting with '{label}'")
    return component[len(label):]


class BaseAuthenticationToken:
    """Realm-scoped principal and credentials decoded from a credential string."""

    def __init__(self, principal: str, realm: Optional[str], credentials: str) -> None:
        self.principal = principal
        self.realm = realm
        self.credentials = credentials

    @property
    def credential_string(self) -> str:
        """Unencoded three-line credential string."""
        return (
            f"{PRINCIPAL_LABEL}{self.principal}{NEWLINE}"
            f"{CREDENTIALS_LABEL}{self.credentials}{NEWLINE}"
            f"{REALM_LABEL}{self.realm or ''}"
        )

    @property
    def encoded_credentials(self) -> str:
        """Base64 form of :attr:`credential_string`."""
        return base64.b64encode(self.credential_string.encode("utf-8")).decode("ascii")

    @classmethod
    def parse(cls, value: str, encoded: bool = True) -> "BaseAuthenticationToken":
        """Decode ``value`` into a token.

        Args:
            value: Credential string as carried in the binary token.
            encoded: Whether ``value`` is base64 encoded.

        Raises:
            TokenParseError: If ``value`` is not a well-formed credential string.
        """
        if not value:
            raise TokenParseError("Credential string is empty")

        if encoded:
            # line-wrapped base64 is accepted
            compact = "".join(value.split())
            try:
                text = base64.b64decode(compact.encode("ascii"), validate=True).decode(
                    "utf-8"
                )
            except ValueError as e:
                raise TokenParseError(f"Unable to decode credential string: {e}") from e
        else:
            text = value

        if not text.startswith(PRINCIPAL_LABEL):
            raise TokenParseError("Credential string does not start with a principal")

        components = _split_components(text)
        if len(components) != 3:
            raise TokenParseError(
                f"Expected 3 credential components, found {len(components)}"
            )

        principal = _parse_component(components[0], PRINCIPAL_LABEL)
        credentials = _parse_component(components[1], CREDENTIALS_LABEL)
        realm = _parse_component(components[2], REALM_LABEL)
        return cls(principal=principal, realm=realm or None, credentials=credentials)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BaseAuthenticationToken):
            return NotImplemented
        return (self.principal, self.realm, self.credentials) == (
            other.principal,
            other.realm,
            other.credentials,
        )

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(principal={self.principal!r}, "
            f"realm={self.realm!r}, credentials={self.credentials!r})"
        )


class AnonymousAuthenticationToken(BaseAuthenticationToken):
    """Anonymous claim for a client address, optionally scoped to a realm."""

    def __init__(
        self,
        realm: Optional[str],
        ip_address: Optional[str],
        credentials: str = ANONYMOUS_CREDENTIALS,
    ) -> None:
        self.ip_address = ip_address
        super().__init__(
            principal=AnonymousPrincipal.for_address(ip_address).name,
            realm=realm,
            credentials=credentials,
        )

    def to_binary_security_token(self) -> BinarySecurityToken:
        """Wrap the encoded credentials in a binary security token."""
        return BinarySecurityToken(
            value_type=ANONYMOUS_TOKEN_VALUE_TYPE,
            value=self.encoded_credentials,
            encoding_type=BASE64_ENCODING_TYPE,
        )
