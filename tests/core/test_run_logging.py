from __future__ import annotations

import json
from pathlib import Path

import pytest

from docslint.core.context import RunContext
from docslint.core.logging import log_event


def test_run_id_comes_from_environment(tmp_path: Path) -> None:
    ctx = RunContext.from_args(str(tmp_path))
    assert ctx.run_id == "docs-lint-test"
    assert ctx.repo_root == tmp_path.resolve()
    assert not ctx.log_json


def test_default_run_id_format(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("DOCS_LINT_RUN_ID")
    ctx = RunContext.from_args(str(tmp_path))
    assert ctx.run_id.startswith("docs-lint-")
    assert len(ctx.run_id) == len("docs-lint-YYYYmmdd-HHMMSS")


def test_text_log_line(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    ctx = RunContext.from_args(str(tmp_path))
    log_event(ctx, "info", "lint", "finish", status="ok", checks=3)
    err = capsys.readouterr().err.strip()
    assert err.startswith("ts=")
    assert "level=info run_id=docs-lint-test component=lint action=finish checks=3 status=ok" in err


def test_json_log_line(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    ctx = RunContext.from_args(str(tmp_path), output_format="json")
    log_event(ctx, "warn", "og", "font_missing", font="x.ttf")
    payload = json.loads(capsys.readouterr().err)
    assert payload["component"] == "og"
    assert payload["font"] == "x.ttf"
    assert payload["run_id"] == "docs-lint-test"


def test_quiet_and_debug_filtering(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    quiet = RunContext.from_args(str(tmp_path), quiet=True)
    log_event(quiet, "info", "cli", "start")
    log_event(quiet, "debug", "cli", "start")
    assert capsys.readouterr().err == ""
    log_event(quiet, "error", "images", "convert_failed")
    assert "level=error" in capsys.readouterr().err
    plain = RunContext.from_args(str(tmp_path))
    log_event(plain, "debug", "cli", "start")
    assert capsys.readouterr().err == ""
    verbose = RunContext.from_args(str(tmp_path), verbose=True)
    log_event(verbose, "debug", "cli", "start")
    assert "level=debug" in capsys.readouterr().err
