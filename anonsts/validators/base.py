"""Base interface for token validators."""

from __future__ import annotations

import abc
from typing import Optional

from ..contracts import ReceivedToken, TokenValidatorParameters, TokenValidatorResponse


class TokenValidator(metaclass=abc.ABCMeta):
    """Validates one kind of received token on behalf of the STS."""

    @abc.abstractmethod
    def can_handle_token(
        self, target: ReceivedToken, realm: Optional[str] = None
    ) -> bool:
        """Return ``True`` if this validator should validate ``target``."""
        raise NotImplementedError

    @abc.abstractmethod
    def validate_token(
        self, parameters: TokenValidatorParameters
    ) -> TokenValidatorResponse:
        """Validate the token in ``parameters`` and report the outcome."""
        raise NotImplementedError
