"""Envelope contracts exchanged between the STS host and token validators."""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

from .security.principal import AnonymousPrincipal


class TokenState(str, Enum):
    """Validation state carried by a received token."""

    NONE = "NONE"
    INVALID = "INVALID"
    VALID = "VALID"
    EXPIRED = "EXPIRED"


class BinarySecurityToken(BaseModel):
    """Opaque binary token as received on the wire."""

    value_type: str
    value: str
    encoding_type: Optional[str] = None
    id: Optional[str] = None


class ReceivedToken(BaseModel):
    """Token presented for validation.

    Validators write ``state`` and ``principal`` back onto this object, so it
    is deliberately left mutable.
    """

    token: Any = None
    state: TokenState = TokenState.NONE
    principal: Optional[AnonymousPrincipal] = None


class TokenValidatorParameters(BaseModel):
    """Inputs for a single ``validate_token`` call."""

    token: ReceivedToken
    realm: Optional[str] = None


class TokenValidatorResponse(BaseModel):
    """Outcome of a ``validate_token`` call."""

    token: Optional[ReceivedToken] = None
    principal: Optional[AnonymousPrincipal] = None
    realm: Optional[str] = None
    additional_properties: Dict[str, Any] = Field(default_factory=dict)

    @property
    def state(self) -> TokenState:
        """State of the validated target, ``INVALID`` when there is none."""
        return self.token.state if self.token is not None else TokenState.INVALID
