"""Enforcement form of the resolver."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from .exceptions import Transgression
from .resolver import PolicyResolver
from .target import Target

logger = logging.getLogger(__name__)


class EnforcementGate:
    """Turns a negative resolution into a :class:`Transgression`."""

    def __init__(self, resolver: PolicyResolver) -> None:
        self._resolver = resolver

    def enforce(
        self,
        actor: Any,
        action: str,
        target: Any,
        context: Optional[Mapping[str, Any]] = None,
    ) -> None:
        """Return quietly when permitted, raise ``Transgression`` otherwise.

        The resolver is consulted exactly once per call.
        """
        if self._resolver.resolve(actor, action, target, context):
            return
        original = Target.unwrap(target)
        logger.info("Transgression: %r may not %s %r", actor, action, original)
        raise Transgression(action, original)
