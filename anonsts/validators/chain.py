"""Dispatch of received tokens across interchangeable validators."""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from ..contracts import (
    ReceivedToken,
    TokenState,
    TokenValidatorParameters,
    TokenValidatorResponse,
)
from .base import TokenValidator

logger = logging.getLogger(__name__)


class TokenValidatorChain:
    """Routes each token to the first validator that claims it."""

    def __init__(self, validators: Iterable[TokenValidator]) -> None:
        self.validators: List[TokenValidator] = list(validators)

    def find_validator(
        self, target: ReceivedToken, realm: Optional[str] = None
    ) -> Optional[TokenValidator]:
        """Return the first validator that can handle ``target``."""
        for validator in self.validators:
            if validator.can_handle_token(target, realm):
                logger.debug(f"Token claimed by {type(validator).__name__}")
                return validator
        return None

    def validate_token(
        self, parameters: TokenValidatorParameters
    ) -> TokenValidatorResponse:
        """Validate with the first eligible validator.

        When no validator claims the token, the target is marked ``INVALID``.
        """
        validator = self.find_validator(parameters.token, parameters.realm)
        if validator is None:
            logger.debug("No validator can handle the received token")
            parameters.token.state = TokenState.INVALID
            return TokenValidatorResponse(token=parameters.token, realm=parameters.realm)
        return validator.validate_token(parameters)
