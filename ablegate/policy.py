"""Default policy settings and the optional resource policy interface."""

from __future__ import annotations

import threading
from typing import Any, Mapping, Protocol, Tuple, runtime_checkable

from .contracts import DecisionSource
from .target import Target


@runtime_checkable
class Policy(Protocol):
    """Hooks a resource may expose to shape its fallback behaviour.

    Both are optional and are found by capability detection, so resources do
    not need to inherit from this class.  Alongside them a resource defines
    one ``<predicate>_by(actor[, context])`` method per action it cares
    about, e.g. ``updatable_by``.  Name the parameter ``context`` to
    receive the call context; an optional parameter with another name is
    left at its default.

    ``policy_check`` takes priority over ``default_policy``; an
    implementation that wants the default as its own fallback should call
    ``self.default_policy(predicate)`` explicitly.
    """

    def default_policy(self, predicate: str) -> bool:
        ...

    def policy_check(
        self, actor: Any, predicate: str, context: Mapping[str, Any]
    ) -> bool:
        ...


class DefaultPolicy:
    """Process-wide default used when no resource-specific policy applies."""

    def __init__(self, global_default: bool = True) -> None:
        self._lock = threading.Lock()
        self._global_default = bool(global_default)

    @property
    def global_default(self) -> bool:
        with self._lock:
            return self._global_default

    def set_global_default(self, value: bool) -> None:
        with self._lock:
            self._global_default = bool(value)

    def decide(self, target: Target, predicate: str) -> Tuple[bool, DecisionSource]:
        """Consult the target's ``default_policy`` hook, else the global value."""
        hook = target.hook("default_policy", arity=1, with_context=False)
        if hook is not None:
            return bool(hook(predicate, context={})), DecisionSource.DEFAULT_POLICY
        return self.global_default, DecisionSource.GLOBAL_DEFAULT
