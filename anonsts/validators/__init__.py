"""Token validators and validator factory."""

from __future__ import annotations

from typing import Iterable, Optional

from ..config import ValidatorConfig, load_config
from .anonymous import AnonymousValidator
from .base import TokenValidator
from .chain import TokenValidatorChain


def get_validator(
    supported_realms: Optional[Iterable[str]] = None,
    config: Optional[ValidatorConfig] = None,
) -> AnonymousValidator:
    """Factory function to get an anonymous validator.

    Supported realms come from ``supported_realms`` when given, otherwise from
    loaded configuration.
    """

    if supported_realms is None:
        config = config or load_config()
        supported_realms = config.supported_realms
    return AnonymousValidator(supported_realms=supported_realms)


__all__ = [
    "AnonymousValidator",
    "TokenValidator",
    "TokenValidatorChain",
    "get_validator",
]
