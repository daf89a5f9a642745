from __future__ import annotations

import socket
from pathlib import Path
from typing import Callable

import pytest
from hypothesis import settings
from hypothesis.database import DirectoryBasedExampleDatabase

from helpers import write_tree

_ALLOWED_MARKERS = {"unit", "integration", "slow"}

_ROOT = Path(__file__).resolve().parents[1]
_HYPOTHESIS_DB = _ROOT / ".hypothesis/examples"
_HYPOTHESIS_DB.parent.mkdir(parents=True, exist_ok=True)
settings.register_profile("docs-lint", database=DirectoryBasedExampleDatabase(_HYPOTHESIS_DB))
settings.load_profile("docs-lint")


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        names = {mark.name for mark in item.iter_markers()}
        if not names.intersection(_ALLOWED_MARKERS):
            item.add_marker("unit")


@pytest.fixture(autouse=True)
def no_network_for_unit(request: pytest.FixtureRequest, monkeypatch: pytest.MonkeyPatch) -> None:
    if request.node.get_closest_marker("integration") or request.node.get_closest_marker("slow"):
        return

    def _blocked(*_args: object, **_kwargs: object) -> socket.socket:
        raise RuntimeError("network disabled in unit tests")

    def _blocked_connect(*_args: object, **_kwargs: object) -> None:
        raise RuntimeError("network disabled in unit tests")

    monkeypatch.setattr(socket, "create_connection", _blocked)
    monkeypatch.setattr(socket.socket, "connect", _blocked_connect)


@pytest.fixture(autouse=True)
def fixed_run_id(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DOCS_LINT_RUN_ID", "docs-lint-test")


@pytest.fixture
def docs_repo(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing ``{relative path: text}`` into a fresh repository root."""

    def _build(files: dict[str, str] | None = None, config: str | None = None) -> Path:
        repo = tmp_path / "repo"
        (repo / "docs").mkdir(parents=True, exist_ok=True)
        write_tree(repo, files or {})
        if config is not None:
            (repo / "docs-lint.yaml").write_text(config, encoding="utf-8")
        return repo

    return _build
