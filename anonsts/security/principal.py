"""Principal representing an unauthenticated caller identified by address."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict

from ..constants import ANONYMOUS_NAME_DELIMITER, ANONYMOUS_NAME_PREFIX


def parse_address_from_name(name: Optional[str]) -> Optional[str]:
    """Return the address part of an ``Anonymous@<address>`` name.

    Names that do not split into exactly two parts around the delimiter
    yield ``None``.
    """
    if not name:
        return None
    parts = name.split(ANONYMOUS_NAME_DELIMITER)
    if len(parts) == 2:
        return parts[1]
    return None


class AnonymousPrincipal(BaseModel):
    """Anonymous identity bound to a client address."""

    name: str

    model_config = ConfigDict(frozen=True)

    @classmethod
    def for_address(cls, address: Optional[str]) -> "AnonymousPrincipal":
        return cls(name=f"{ANONYMOUS_NAME_PREFIX}{ANONYMOUS_NAME_DELIMITER}{address}")

    @property
    def address(self) -> Optional[str]:
        return parse_address_from_name(self.name)

    def __str__(self) -> str:
        return self.name
