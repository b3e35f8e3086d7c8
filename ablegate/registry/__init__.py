"""Action registry: maps action names to predicate base names."""

from __future__ import annotations

import logging
import threading
from typing import Dict, Iterable, Optional, Tuple

from ..exceptions import UnknownAction
from .models import ActionMapping, RegistrySnapshot

logger = logging.getLogger(__name__)

BUILTIN_ACTIONS: Tuple[Tuple[str, str], ...] = (
    ("view", "viewable"),
    ("create", "creatable"),
    ("update", "updatable"),
    ("destroy", "destroyable"),
)


class ActionRegistry:
    """Thread-safe table of action -> predicate base name.

    Registration overwrites silently apart from a warning in the log; the
    last write wins.  Reads take the lock only briefly, so a
    reader never observes a partially applied mapping.
    """

    def __init__(
        self, mappings: Optional[Iterable[Tuple[str, str]]] = None, builtins: bool = True
    ) -> None:
        self._lock = threading.Lock()
        self._mappings: Dict[str, str] = {}
        if builtins:
            for action, predicate in BUILTIN_ACTIONS:
                self.register(action, predicate)
        for action, predicate in mappings or ():
            self.register(action, predicate)

    def register(self, action: str, predicate: str) -> ActionMapping:
        """Store ``action -> predicate``, replacing any earlier mapping."""
        mapping = ActionMapping(action=action, predicate=predicate)
        with self._lock:
            previous = self._mappings.get(mapping.action)
            self._mappings[mapping.action] = mapping.predicate
        if previous is not None and previous != mapping.predicate:
            logger.warning(
                "Action %r remapped from %r to %r", action, previous, predicate
            )
        return mapping

    def predicate_for(self, action: str) -> str:
        """Return the predicate base registered for ``action``."""
        with self._lock:
            try:
                return self._mappings[action]
            except KeyError:
                raise UnknownAction(action) from None

    def actions(self) -> Dict[str, str]:
        """Return a copy of the current table."""
        with self._lock:
            return dict(self._mappings)

    def snapshot(self) -> RegistrySnapshot:
        return RegistrySnapshot(
            mappings=[
                ActionMapping(action=a, predicate=p) for a, p in self.actions().items()
            ]
        )

    def __contains__(self, action: object) -> bool:
        with self._lock:
            return action in self._mappings

    def __len__(self) -> int:
        with self._lock:
            return len(self._mappings)


__all__ = [
    "ActionMapping",
    "ActionRegistry",
    "BUILTIN_ACTIONS",
    "RegistrySnapshot",
]
