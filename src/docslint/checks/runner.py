from __future__ import annotations

import time
from pathlib import Path
from typing import Iterable

from ..config import Config
from ..core.files import iter_markdown_files
from ..errors import ScriptError
from ..exit_codes import ERR_USAGE
from .model import CheckContext, CheckDef, CheckResult, Severity

CONFIG_CHECK_ID = "config"


def resolve_summary_path(root: Path, config: Config) -> Path:
    """Navigation document inside the docs dir, else at the repository root."""
    summary_path = root / config.docs_dir / config.summary
    if not summary_path.is_file() and (root / config.summary).is_file():
        return root / config.summary
    return summary_path


def build_context(root: Path, config: Config) -> CheckContext:
    """Resolve configured locations against ``root`` and list the documents once."""
    docs_dir = root / config.docs_dir
    summary_path = resolve_summary_path(root, config)
    return CheckContext(
        root=root,
        docs_dir=docs_dir,
        assets_dir=root / config.assets_dir,
        summary_path=summary_path,
        redirects_path=root / config.redirects,
        config=config,
        files=tuple(iter_markdown_files(docs_dir, config.exclude)),
    )


def select_checks(checks: Iterable[CheckDef], config: Config, only: str | None = None) -> list[CheckDef]:
    """Enabled checks in registry order, narrowed to ``only`` when given.

    A disabled id is not selectable, so naming one is an unknown check.
    """
    disabled = set(config.disable)
    selected = [check for check in checks if check.check_id not in disabled]
    if only:
        selected = [check for check in selected if check.check_id == only]
        if not selected:
            raise ScriptError(f"Unknown check: {only}", ERR_USAGE, "unknown_check")
    return selected


def effective_severity(check: CheckDef, config: Config) -> Severity:
    if check.check_id in config.warn_only:
        return Severity.WARNING
    return check.severity


def run_check(check: CheckDef, ctx: CheckContext) -> CheckResult:
    start = time.perf_counter()
    outcome = check.run(ctx)
    duration_ms = int((time.perf_counter() - start) * 1000)
    return CheckResult(
        check_id=check.check_id,
        name=check.name,
        severity=effective_severity(check, ctx.config),
        issues=tuple(outcome.issues),
        files_checked=int(outcome.files_checked),
        duration_ms=duration_ms,
    )


def config_result(config: Config) -> CheckResult | None:
    if not config.problems:
        return None
    return CheckResult(
        check_id=CONFIG_CHECK_ID,
        name="Configuration",
        severity=Severity.ERROR,
        issues=config.problems,
        files_checked=1,
    )


def run_checks(checks: Iterable[CheckDef], ctx: CheckContext) -> list[CheckResult]:
    """Run checks sequentially in registry order.

    Configuration problems lead the result list as their own error row.
    """
    results: list[CheckResult] = []
    problems = config_result(ctx.config)
    if problems is not None:
        results.append(problems)
    results.extend(run_check(check, ctx) for check in checks)
    return results


__all__ = [
    "CONFIG_CHECK_ID",
    "build_context",
    "config_result",
    "effective_severity",
    "resolve_summary_path",
    "run_check",
    "run_checks",
    "select_checks",
]
