"""Exception hierarchy for ablegate."""

from __future__ import annotations

from typing import Any


class AblegateError(Exception):
    """Base exception for all ablegate errors."""


class UnknownAction(AblegateError, KeyError):
    """Raised when an action was never registered."""

    def __init__(self, action: str) -> None:
        super().__init__(action)
        self.action = action

    def __str__(self) -> str:
        return f"Unknown action: {self.action!r}"


class Transgression(AblegateError):
    """Raised by enforcement when an actor may not perform ``action``."""

    def __init__(self, action: str, target: Any) -> None:
        super().__init__(f"Not permitted to {action} {target!r}")
        self.action = action
        self.target = target


class ConfigError(AblegateError):
    """Raised when the configuration file is invalid."""
