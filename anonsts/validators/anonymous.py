"""Validator for anonymous tokens bound to a client IP address."""

from __future__ import annotations

import logging
from typing import FrozenSet, Iterable, Optional

from ..constants import ANONYMOUS_CREDENTIALS, ANONYMOUS_TOKEN_VALUE_TYPE, WILDCARD_REALM
from ..contracts import (
    BinarySecurityToken,
    ReceivedToken,
    TokenState,
    TokenValidatorParameters,
    TokenValidatorResponse,
)
from ..security.address import is_valid_ip_address
from ..security.principal import AnonymousPrincipal, parse_address_from_name
from ..security.tokens import (
    AnonymousAuthenticationToken,
    BaseAuthenticationToken,
    TokenParseError,
)
from .base import TokenValidator

logger = logging.getLogger(__name__)


class AnonymousValidator(TokenValidator):
    """Marks anonymous tokens valid for the realms it supports.

    Several instances may be registered side by side, each with its own set
    of supported realms.
    """

    def __init__(self, supported_realms: Iterable[str]) -> None:
        self._supported_realms: FrozenSet[str] = frozenset(supported_realms)

    @property
    def supported_realms(self) -> FrozenSet[str]:
        return self._supported_realms

    def get_anonymous_token(
        self, target: ReceivedToken
    ) -> Optional[AnonymousAuthenticationToken]:
        """Extract the anonymous token carried by ``target``, if any."""
        token = target.token
        if not isinstance(token, BinarySecurityToken):
            return None
        if token.value_type != ANONYMOUS_TOKEN_VALUE_TYPE:
            return None

        try:
            base = BaseAuthenticationToken.parse(token.value, encoded=True)
        except TokenParseError as e:
            logger.warning(
                f"Unable to parse {AnonymousAuthenticationToken.__name__} "
                f"from encoded token: {e}",
                exc_info=True,
            )
            return None

        return AnonymousAuthenticationToken(
            realm=base.realm,
            ip_address=parse_address_from_name(base.principal),
            credentials=base.credentials,
        )

    def _is_supported_realm(self, realm: str) -> bool:
        return realm in self._supported_realms or realm == WILDCARD_REALM

    def can_handle_token(
        self, target: ReceivedToken, realm: Optional[str] = None
    ) -> bool:
        # The realm argument is not consulted: nothing resolves a realm from
        # the request context yet, so only the realm in the credentials counts.
        anon_token = self.get_anonymous_token(target)
        if anon_token is None:
            return False

        if anon_token.realm is None:
            logger.debug("No realm specified in request, can_handle_token = True")
            return True

        if self._is_supported_realm(anon_token.realm):
            logger.debug(f"Realm '{anon_token.realm}' recognized - can_handle_token = True")
            return True

        logger.debug(f"Realm '{anon_token.realm}' unrecognized - can_handle_token = False")
        return False

    def validate_token(
        self, parameters: TokenValidatorParameters
    ) -> TokenValidatorResponse:
        response = TokenValidatorResponse()
        target = parameters.token
        target.state = TokenState.INVALID

        anon_token = self.get_anonymous_token(target)
        response.token = target

        if anon_token is None:
            return response

        # Set before the checks below; only the target is gated on VALID.
        response.principal = AnonymousPrincipal.for_address(anon_token.ip_address)

        realm_ok = anon_token.realm is None or self._is_supported_realm(anon_token.realm)
        credentials_ok = anon_token.credentials == ANONYMOUS_CREDENTIALS
        address_ok = is_valid_ip_address(anon_token.ip_address)

        if realm_ok and credentials_ok and address_ok:
            target.state = TokenState.VALID
            target.principal = AnonymousPrincipal.for_address(anon_token.ip_address)
        else:
            logger.debug(
                f"Anonymous token for '{anon_token.ip_address}' rejected: "
                f"realm_ok={realm_ok} credentials_ok={credentials_ok} "
                f"address_ok={address_ok}"
            )
        return response
