"""ablegate: resource-defined authorization policies with a default fallback chain."""

from .authority import (
    AUTHORITY,
    Authority,
    enforce,
    register_action,
    resolve,
    set_global_default,
)
from .config import AblegateConfig, load_config
from .contracts import Decision, DecisionSource, Scope
from .exceptions import AblegateError, ConfigError, Transgression, UnknownAction
from .gate import EnforcementGate
from .helpers import Helpers, build_helpers
from .policy import DefaultPolicy, Policy
from .registry import ActionRegistry
from .resolver import PolicyResolver
from .target import Target, default_stub

__version__ = "0.1.0"
__all__ = [
    "AUTHORITY",
    "AblegateConfig",
    "AblegateError",
    "ActionRegistry",
    "Authority",
    "ConfigError",
    "Decision",
    "DecisionSource",
    "DefaultPolicy",
    "EnforcementGate",
    "Helpers",
    "Policy",
    "PolicyResolver",
    "Scope",
    "Target",
    "Transgression",
    "UnknownAction",
    "build_helpers",
    "default_stub",
    "enforce",
    "load_config",
    "register_action",
    "resolve",
    "set_global_default",
]
