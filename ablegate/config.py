from __future__ import annotations

import os
from typing import Dict, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from .exceptions import ConfigError
from .registry.models import ensure_identifier

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}


class AblegateConfig(BaseModel):
    """Top-level configuration model."""

    default_policy: bool = True
    actions: Dict[str, str] = Field(
        default_factory=dict,
        description="Extra action -> predicate mappings added to the built-ins",
    )

    @field_validator("actions")
    @classmethod
    def _ensure_identifiers(cls, v: Dict[str, str]) -> Dict[str, str]:
        for action, predicate in v.items():
            ensure_identifier(action)
            ensure_identifier(predicate)
        return v


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    raise ConfigError(f"{name} must be a boolean, got {raw!r}")


def load_config(path: Optional[str] = None) -> AblegateConfig:
    """Load configuration from YAML file.

    Args:
        path: Optional path to config file. Falls back to ABLEGATE_CONFIG env
            variable or 'ablegate.yaml' in the current directory.
    """

    config_path = path or os.getenv("ABLEGATE_CONFIG", "ablegate.yaml")
    if os.path.exists(config_path):
        try:
            with open(config_path) as f:
                data = yaml.safe_load(f) or {}
            config = AblegateConfig(**data)
        except (yaml.YAMLError, ValidationError, TypeError) as e:
            raise ConfigError(f"Invalid config file {config_path}: {e}") from e
    else:
        config = AblegateConfig()

    env_default = os.getenv("ABLEGATE_DEFAULT_POLICY")
    if env_default:
        config.default_policy = _parse_bool("ABLEGATE_DEFAULT_POLICY", env_default)
    return config
