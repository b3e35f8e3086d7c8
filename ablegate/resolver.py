"""Policy resolution: action -> predicate -> resource hook -> boolean."""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Mapping, Optional

from .contracts import Decision, DecisionSource
from .policy import DefaultPolicy
from .registry import ActionRegistry
from .target import Target

logger = logging.getLogger(__name__)

_EMPTY: Mapping[str, Any] = MappingProxyType({})


def _freeze(context: Optional[Mapping[str, Any]]) -> Mapping[str, Any]:
    if context is None:
        return _EMPTY
    return MappingProxyType(context)


class PolicyResolver:
    """Decides whether an actor may perform an action on a target.

    The chain, in order of precedence:

    1. ``<predicate>_by(actor[, context])`` defined by the target.
    2. ``policy_check(actor, predicate[, context])`` defined by the target.
    3. ``default_policy(predicate)`` defined by the target.
    4. The global default held by :class:`DefaultPolicy`.

    Hooks are looked up on the instance for instance targets and as
    class/static methods for type targets.  A missing hook, a default stub or
    one whose signature does not fit is skipped, never an error.
    """

    def __init__(self, registry: ActionRegistry, defaults: DefaultPolicy) -> None:
        self._registry = registry
        self._defaults = defaults

    def explain(
        self,
        actor: Any,
        action: str,
        target: Any,
        context: Optional[Mapping[str, Any]] = None,
    ) -> Decision:
        """Resolve ``action`` and report which tier answered."""
        predicate = self._registry.predicate_for(action)
        subject = Target.wrap(target)
        ctx = _freeze(context)

        override = subject.hook(f"{predicate}_by", arity=1)
        if override is not None:
            allowed = bool(override(actor, context=ctx))
            source = DecisionSource.OVERRIDE
        else:
            catch_all = subject.hook("policy_check", arity=2)
            if catch_all is not None:
                allowed = bool(catch_all(actor, predicate, context=ctx))
                source = DecisionSource.POLICY_CHECK
            else:
                allowed, source = self._defaults.decide(subject, predicate)

        decision = Decision(
            action=action,
            predicate=predicate,
            allowed=allowed,
            source=source,
            scope=subject.scope,
        )
        logger.debug(
            "%s %s on %r (%s, %s)",
            "Allowed" if allowed else "Denied",
            action,
            subject.value,
            source.value,
            subject.scope.value,
        )
        return decision

    def resolve(
        self,
        actor: Any,
        action: str,
        target: Any,
        context: Optional[Mapping[str, Any]] = None,
    ) -> bool:
        return self.explain(actor, action, target, context).allowed
