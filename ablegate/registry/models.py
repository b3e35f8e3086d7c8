"""Pydantic models describing action registry entries."""

from __future__ import annotations

from datetime import datetime
from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator


def ensure_identifier(value: str) -> str:
    """Return ``value`` if it can name an action or predicate."""
    if not value or not value.isidentifier():
        raise ValueError(f"{value!r} is not a valid identifier")
    return value


class ActionMapping(BaseModel):
    """Maps an action name to the predicate base a resource implements."""

    model_config = ConfigDict(frozen=True)

    action: str
    predicate: str = Field(..., description="Predicate base, e.g. 'viewable'")

    @field_validator("action", "predicate")
    @classmethod
    def _ensure_identifier(cls, v: str) -> str:
        return ensure_identifier(v)


class RegistrySnapshot(BaseModel):
    """Point-in-time copy of the registry contents."""

    mappings: List[ActionMapping] = Field(default_factory=list)
    taken_at: datetime = Field(default_factory=datetime.now)

    def as_dict(self) -> dict[str, str]:
        return {m.action: m.predicate for m in self.mappings}
