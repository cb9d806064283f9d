from __future__ import annotations

import os
from typing import List, Optional

import yaml
from pydantic import BaseModel, Field, field_validator

from .constants import DEFAULT_SUPPORTED_REALMS


class ValidatorConfig(BaseModel):
    """Top-level configuration model."""

    supported_realms: List[str] = Field(
        default_factory=lambda: list(DEFAULT_SUPPORTED_REALMS)
    )
    log_level: str = "INFO"

    @field_validator("supported_realms")
    @classmethod
    def _strip_realms(cls, v: List[str]) -> List[str]:
        realms = [realm.strip() for realm in v]
        if any(not realm for realm in realms):
            raise ValueError("supported realms must be non-empty strings")
        return realms


def load_config(path: Optional[str] = None) -> ValidatorConfig:
    """Load configuration from YAML file.

    Args:
        path: Optional path to config file. Falls back to ANONSTS_CONFIG env
            variable or 'config.yaml' in the current directory.
    """

    config_path = path or os.getenv("ANONSTS_CONFIG", "config.yaml")
    if os.path.exists(config_path):
        with open(config_path) as f:
            data = yaml.safe_load(f) or {}
        config = ValidatorConfig(**data)
    else:
        config = ValidatorConfig()

    env_realms = os.getenv("ANONSTS_SUPPORTED_REALMS")
    if env_realms:
        config = config.model_copy(
            update={
                "supported_realms": [r.strip() for r in env_realms.split(",") if r.strip()]
            }
        )
    return config
