"""Configuration object tying the registry, defaults, resolver and gate together."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from .config import AblegateConfig, load_config
from .contracts import Decision
from .gate import EnforcementGate
from .policy import DefaultPolicy
from .registry import ActionMapping, ActionRegistry
from .resolver import PolicyResolver


class Authority:
    """Explicitly constructed authorization configuration.

    Pass an ``Authority`` to the code that needs to authorize instead of
    relying on process globals; tests build a fresh one per case.  The
    module-level :data:`AUTHORITY` backs the top-level convenience functions.
    """

    def __init__(
        self,
        registry: Optional[ActionRegistry] = None,
        defaults: Optional[DefaultPolicy] = None,
    ) -> None:
        self.registry = registry if registry is not None else ActionRegistry()
        self.defaults = defaults if defaults is not None else DefaultPolicy()
        self.resolver = PolicyResolver(self.registry, self.defaults)
        self.gate = EnforcementGate(self.resolver)

    @classmethod
    def from_config(cls, config: Optional[AblegateConfig] = None) -> "Authority":
        authority = cls()
        authority.configure(config or load_config())
        return authority

    def configure(self, config: AblegateConfig) -> None:
        """Apply ``config`` on top of the current settings."""
        for action, predicate in config.actions.items():
            self.registry.register(action, predicate)
        self.defaults.set_global_default(config.default_policy)

    def register(self, action: str, predicate: str) -> ActionMapping:
        return self.registry.register(action, predicate)

    def set_global_default(self, value: bool) -> None:
        self.defaults.set_global_default(value)

    def explain(
        self,
        actor: Any,
        action: str,
        target: Any,
        context: Optional[Mapping[str, Any]] = None,
    ) -> Decision:
        return self.resolver.explain(actor, action, target, context)

    def resolve(
        self,
        actor: Any,
        action: str,
        target: Any,
        context: Optional[Mapping[str, Any]] = None,
    ) -> bool:
        return self.resolver.resolve(actor, action, target, context)

    def enforce(
        self,
        actor: Any,
        action: str,
        target: Any,
        context: Optional[Mapping[str, Any]] = None,
    ) -> None:
        self.gate.enforce(actor, action, target, context)


# Process-wide authority.  Configure it during startup, before concurrent
# resolution begins.
AUTHORITY = Authority()


def register_action(action: str, predicate: str) -> ActionMapping:
    """Register ``action`` on :data:`AUTHORITY`."""
    return AUTHORITY.register(action, predicate)


def set_global_default(value: bool) -> None:
    AUTHORITY.set_global_default(value)


def resolve(
    actor: Any,
    action: str,
    target: Any,
    context: Optional[Mapping[str, Any]] = None,
) -> bool:
    """Query form: ``True`` if ``actor`` may perform ``action`` on ``target``."""
    return AUTHORITY.resolve(actor, action, target, context)


def enforce(
    actor: Any,
    action: str,
    target: Any,
    context: Optional[Mapping[str, Any]] = None,
) -> None:
    """Enforcement form: raise :class:`Transgression` unless permitted."""
    AUTHORITY.enforce(actor, action, target, context)
