"""Targets of authorization and capability detection of their policy hooks."""

from __future__ import annotations

import inspect
import logging
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional

from .contracts import Scope

logger = logging.getLogger(__name__)

STUB_MARKER = "__ablegate_stub__"


def default_stub(fn: Callable[..., Any]) -> Callable[..., Any]:
    """Mark ``fn`` as a generated placeholder rather than a real policy.

    Host code that pre-declares ``<predicate>_by`` methods (for example to
    satisfy an interface) decorates them so the resolver keeps falling back
    through ``policy_check`` and the default policy.
    """
    setattr(fn, STUB_MARKER, True)
    return fn


def _binds(sig: inspect.Signature, *args: Any, **kwargs: Any) -> bool:
    try:
        sig.bind(*args, **kwargs)
    except TypeError:
        return False
    return True


@dataclass(frozen=True)
class Hook:
    """A located policy hook plus how it wants its context delivered."""

    fn: Callable[..., Any]
    context_mode: str  # "positional", "keyword" or "none"

    def __call__(self, *args: Any, context: Mapping[str, Any]) -> Any:
        if self.context_mode == "positional":
            return self.fn(*args, context)
        if self.context_mode == "keyword":
            return self.fn(*args, context=context)
        return self.fn(*args)


@dataclass(frozen=True)
class Target:
    """Tagged variant over the two shapes a resource can take."""

    value: Any
    scope: Scope

    @classmethod
    def instance(cls, value: Any) -> "Target":
        return cls(value=value, scope=Scope.INSTANCE)

    @classmethod
    def of_type(cls, value: type) -> "Target":
        if not isinstance(value, type):
            raise TypeError(f"{value!r} is not a class")
        return cls(value=value, scope=Scope.TYPE)

    @classmethod
    def wrap(cls, value: Any) -> "Target":
        """Return ``value`` as a :class:`Target`, inferring its scope."""
        if isinstance(value, Target):
            return value
        if isinstance(value, type):
            return cls.of_type(value)
        return cls.instance(value)

    @staticmethod
    def unwrap(value: Any) -> Any:
        return value.value if isinstance(value, Target) else value

    def _find(self, name: str) -> Optional[Callable[..., Any]]:
        if self.scope is Scope.TYPE:
            # Only class-level callables count; a plain function on the class
            # is an instance method and needs an instance to run.
            try:
                raw = inspect.getattr_static(self.value, name)
            except AttributeError:
                return None
            if inspect.isfunction(raw):
                return None
        try:
            fn = getattr(self.value, name, None)
        except Exception as e:
            # Properties and lazy loaders may fail; that is a missing hook.
            logger.debug("Ignoring %s on %r: lookup failed: %r", name, self.value, e)
            return None
        if fn is None or not callable(fn):
            return None
        if getattr(fn, STUB_MARKER, False):
            return None
        return fn

    def hook(self, name: str, arity: int, with_context: bool = True) -> Optional[Hook]:
        """Locate ``name`` and check it can be called with ``arity`` arguments.

        Returns ``None`` when the hook is absent, is a default stub, or has a
        signature that cannot accept the call.  Callers treat all of these
        the same way: fall through to the next tier.
        """
        fn = self._find(name)
        if fn is None:
            return None
        try:
            sig = inspect.signature(fn)
        except (TypeError, ValueError):
            logger.debug("Ignoring %s on %r: signature unavailable", name, self.value)
            return None

        args = (None,) * arity
        if with_context:
            # A parameter named ``context`` wins; otherwise only a required
            # extra positional receives it, never an unrelated optional one.
            param = sig.parameters.get("context")
            if (
                param is not None
                and param.kind is not inspect.Parameter.POSITIONAL_ONLY
                and _binds(sig, *args, context=None)
            ):
                return Hook(fn, "keyword")
            if _binds(sig, *args, None) and not _binds(sig, *args):
                return Hook(fn, "positional")
        if _binds(sig, *args):
            return Hook(fn, "none")
        logger.debug("Ignoring %s on %r: incompatible signature %s", name, self.value, sig)
        return None
