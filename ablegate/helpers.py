"""Named ``can_<action>`` / ``enforce_<action>_permission`` helpers."""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Mapping, Optional

from .authority import AUTHORITY, Authority


class Helpers:
    """Namespace of helper functions built from a registry snapshot.

    Example::

        helpers = build_helpers(authority)
        if helpers.can_view(user, article):
            ...
        helpers.enforce_update_permission(user, article)
    """

    def __init__(self, functions: Dict[str, Callable[..., Any]]) -> None:
        self._functions = dict(functions)

    def __getattr__(self, name: str) -> Callable[..., Any]:
        try:
            return self.__dict__["_functions"][name]
        except KeyError:
            raise AttributeError(name) from None

    def __dir__(self) -> List[str]:
        return sorted(set(super().__dir__()) | set(self._functions))

    def names(self) -> List[str]:
        return sorted(self._functions)


def _can(authority: Authority, action: str) -> Callable[..., bool]:
    def can(
        actor: Any, target: Any, context: Optional[Mapping[str, Any]] = None
    ) -> bool:
        return authority.resolve(actor, action, target, context)

    can.__name__ = f"can_{action}"
    can.__doc__ = f"Return True if ``actor`` may {action} ``target``."
    return can


def _enforce(authority: Authority, action: str) -> Callable[..., None]:
    def enforce(
        actor: Any, target: Any, context: Optional[Mapping[str, Any]] = None
    ) -> None:
        authority.enforce(actor, action, target, context)

    enforce.__name__ = f"enforce_{action}_permission"
    enforce.__doc__ = f"Raise Transgression unless ``actor`` may {action} ``target``."
    return enforce


def build_helpers(authority: Optional[Authority] = None) -> Helpers:
    """Build helpers for every action currently registered on ``authority``.

    Actions registered afterwards are not picked up; call again to refresh.
    """
    authority = authority or AUTHORITY
    functions: Dict[str, Callable[..., Any]] = {}
    for action in authority.registry.actions():
        can = _can(authority, action)
        enforce = _enforce(authority, action)
        functions[can.__name__] = can
        functions[enforce.__name__] = enforce
    return Helpers(functions)
