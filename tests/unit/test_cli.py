"""Tests for the ablegate CLI."""

from __future__ import annotations

import textwrap
import uuid
from pathlib import Path

from typer.testing import CliRunner

from ablegate.cli import app


def _write_resource_module(path: Path) -> str:
    module_name = f"resources_{uuid.uuid4().hex}"
    (path / f"{module_name}.py").write_text(
        textwrap.dedent(
            '''
            class Article:
                @classmethod
                def indexable_by(cls, user, context):
                    return context.get("domain") == "public"

                @classmethod
                def updatable_by(cls, user):
                    return user == "editor"
            '''
        ).strip()
        + "\n",
        encoding="utf-8",
    )
    return module_name


def _write_config(path: Path) -> Path:
    config_path = path / "ablegate.yaml"
    config_path.write_text("actions:\n  index: indexable\n")
    return config_path


def test_actions_lists_builtins_and_configured(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.delenv("ABLEGATE_DEFAULT_POLICY", raising=False)
    config_path = _write_config(tmp_path)

    runner = CliRunner()
    result = runner.invoke(app, ["actions", "--config", str(config_path)])
    assert result.exit_code == 0, result.output
    assert "view\tviewable_by" in result.output
    assert "index\tindexable_by" in result.output
    assert "default policy: allow" in result.output
    assert "snapshot taken at" in result.output


def test_check_allowed_and_denied(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.delenv("ABLEGATE_DEFAULT_POLICY", raising=False)
    monkeypatch.syspath_prepend(str(tmp_path))
    module_name = _write_resource_module(tmp_path)
    config_path = _write_config(tmp_path)
    target = f"{module_name}:Article"

    runner = CliRunner()
    allowed = runner.invoke(
        app,
        ["check", "index", target, "-c", "domain=public", "--config", str(config_path)],
    )
    assert allowed.exit_code == 0, allowed.output
    assert "allowed: index -> indexable_by (override, type)" in allowed.output

    denied = runner.invoke(
        app,
        ["check", "update", target, "--actor", "guest", "--config", str(config_path)],
    )
    assert denied.exit_code == 1
    assert "denied" in denied.output


def test_check_reports_default_source(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("ABLEGATE_DEFAULT_POLICY", "false")
    monkeypatch.syspath_prepend(str(tmp_path))
    module_name = _write_resource_module(tmp_path)
    config_path = _write_config(tmp_path)

    runner = CliRunner()
    result = runner.invoke(
        app, ["check", "view", f"{module_name}:Article", "--config", str(config_path)]
    )
    assert result.exit_code == 1
    assert "global_default" in result.output


def test_check_unknown_action_and_bad_target(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.delenv("ABLEGATE_DEFAULT_POLICY", raising=False)
    monkeypatch.syspath_prepend(str(tmp_path))
    module_name = _write_resource_module(tmp_path)
    config_path = _write_config(tmp_path)

    runner = CliRunner()
    unknown = runner.invoke(
        app, ["check", "archive", f"{module_name}:Article", "--config", str(config_path)]
    )
    assert unknown.exit_code == 2

    bad_target = runner.invoke(
        app, ["check", "view", "no_colon_here", "--config", str(config_path)]
    )
    assert bad_target.exit_code == 2

    missing_attr = runner.invoke(
        app, ["check", "view", f"{module_name}:Missing", "--config", str(config_path)]
    )
    assert missing_attr.exit_code == 2


def test_invalid_config_exits_with_config_error(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.delenv("ABLEGATE_DEFAULT_POLICY", raising=False)
    config_path = tmp_path / "ablegate.yaml"
    config_path.write_text("actions:\n  bulk-update: bulk updatable\n")

    runner = CliRunner()
    result = runner.invoke(app, ["check", "view", "os:path", "--config", str(config_path)])
    assert result.exit_code == 2

    listing = runner.invoke(app, ["actions", "--config", str(config_path)])
    assert listing.exit_code == 2
