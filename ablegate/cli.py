"""Command line interface for inspecting ablegate policies."""

from __future__ import annotations

import importlib
from pathlib import Path
from typing import Any, Dict, List, Optional

import typer

from ablegate.authority import Authority
from ablegate.config import load_config
from ablegate.exceptions import ConfigError, UnknownAction

app = typer.Typer(help="CLI for ablegate authorization policies")


def _load_authority(config: Optional[Path]) -> Authority:
    try:
        return Authority.from_config(load_config(str(config) if config else None))
    except ConfigError as e:
        typer.secho(str(e), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=2)


def _import_target(path: str) -> Any:
    """Import ``module:attr`` (``attr`` may be dotted)."""
    module_name, sep, attr_path = path.partition(":")
    if not sep or not module_name or not attr_path:
        raise ImportError(f"Target must look like 'module:attr', got {path!r}")
    obj: Any = importlib.import_module(module_name)
    for part in attr_path.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError:
            raise ImportError(f"{module_name!r} has no attribute {attr_path!r}") from None
    return obj


def _parse_context(pairs: List[str]) -> Dict[str, str]:
    context: Dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise typer.BadParameter(f"Expected key=value, got {pair!r}")
        context[key] = value
    return context


@app.callback()
def main() -> None:
    """ablegate CLI entry point."""
    pass


@app.command("actions")
def list_actions(
    config: Optional[Path] = typer.Option(None, help="Path to ablegate.yaml"),
) -> None:
    """
    List registered actions and the predicate each one maps to.

    Shows the built-in actions plus any declared in the configuration file,
    along with the global default policy.

    Example:
        ablegate actions
        # Output: view    viewable_by
        #         update  updatable_by
    """
    authority = _load_authority(config)
    snapshot = authority.registry.snapshot()
    for mapping in sorted(snapshot.mappings, key=lambda m: m.action):
        typer.echo(f"{mapping.action}\t{mapping.predicate}_by")
    typer.echo(f"snapshot taken at {snapshot.taken_at.isoformat(timespec='seconds')}")
    default = "allow" if authority.defaults.global_default else "deny"
    typer.echo(f"default policy: {default}")


@app.command("check")
def check(
    action: str,
    target: str,
    actor: Optional[str] = typer.Option(None, help="Actor passed to the policy"),
    context: List[str] = typer.Option(
        [], "--context", "-c", help="Context entry as key=value (repeatable)"
    ),
    config: Optional[Path] = typer.Option(None, help="Path to ablegate.yaml"),
) -> None:
    """
    Resolve ACTION against TARGET and report which policy tier decided.

    TARGET is an import path such as ``myapp.models:Article``.  Exits with 0
    when allowed, 1 when denied and 2 on configuration or lookup errors.

    Example:
        ablegate check index myapp.models:Article -c domain=public
    """
    authority = _load_authority(config)
    ctx = _parse_context(context)
    try:
        subject = _import_target(target)
    except ImportError as e:
        typer.secho(str(e), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=2)

    try:
        decision = authority.explain(actor, action, subject, ctx)
    except UnknownAction as e:
        typer.secho(str(e), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=2)

    verdict = "allowed" if decision.allowed else "denied"
    typer.echo(
        f"{verdict}: {action} -> {decision.predicate}_by "
        f"({decision.source.value}, {decision.scope.value})"
    )
    if not decision.allowed:
        raise typer.Exit(code=1)
