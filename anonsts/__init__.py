"""anonsts: anonymous token validation for a Security Token Service."""

from .config import ValidatorConfig, load_config
from .contracts import (
    BinarySecurityToken,
    ReceivedToken,
    TokenState,
    TokenValidatorParameters,
    TokenValidatorResponse,
)
from .security.address import is_valid_ip_address
from .security.principal import AnonymousPrincipal, parse_address_from_name
from .security.tokens import (
    AnonymousAuthenticationToken,
    BaseAuthenticationToken,
    TokenParseError,
)
from .validators import (
    AnonymousValidator,
    TokenValidator,
    TokenValidatorChain,
    get_validator,
)

__version__ = "0.1.0"
__all__ = [
    "AnonymousAuthenticationToken",
    "AnonymousPrincipal",
    "AnonymousValidator",
    "BaseAuthenticationToken",
    "BinarySecurityToken",
    "ReceivedToken",
    "TokenParseError",
    "TokenState",
    "TokenValidator",
    "TokenValidatorChain",
    "TokenValidatorParameters",
    "TokenValidatorResponse",
    "ValidatorConfig",
    "get_validator",
    "is_valid_ip_address",
    "load_config",
    "parse_address_from_name",
]
