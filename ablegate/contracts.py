"""Data contracts produced by the policy resolver."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Scope(str, Enum):
    """Whether a target is authorized as an instance or as a type."""

    INSTANCE = "instance"
    TYPE = "type"


class DecisionSource(str, Enum):
    """Which tier of the fallback chain produced a decision."""

    OVERRIDE = "override"
    POLICY_CHECK = "policy_check"
    DEFAULT_POLICY = "default_policy"
    GLOBAL_DEFAULT = "global_default"


class Decision(BaseModel):
    """Outcome of a single policy resolution."""

    model_config = ConfigDict(frozen=True)

    action: str
    predicate: str = Field(..., description="Predicate base the action maps to")
    allowed: bool
    source: DecisionSource
    scope: Scope

    def __bool__(self) -> bool:
        return self.allowed
