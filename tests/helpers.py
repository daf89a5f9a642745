from __future__ import annotations

from pathlib import Path

from docslint.checks.model import CheckContext, CheckDef, CheckResult, Issue
from docslint.checks.runner import build_context, run_check
from docslint.config import Config, load_config


def write_tree(root: Path, files: dict[str, str]) -> None:
    for rel, text in files.items():
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")


def lint_context(root: Path, config: Config | None = None) -> CheckContext:
    return build_context(root, config if config is not None else load_config(root))


def run_one(check: CheckDef, root: Path, config: Config | None = None) -> CheckResult:
    return run_check(check, lint_context(root, config))


def messages(issues: tuple[Issue, ...]) -> list[str]:
    return [issue.message for issue in issues]


def located(issues: tuple[Issue, ...]) -> list[tuple[str, int | None, str]]:
    return [(issue.file, issue.line, issue.message) for issue in issues]
