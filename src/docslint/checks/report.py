from __future__ import annotations

import json
from typing import Any, Iterable

from ..contracts.catalog import REPORT_SCHEMA
from ..contracts.validate import validate
from .model import CheckResult, Issue, Severity

DISPLAY_LIMIT = 10


def _issue_row(issue: Issue) -> dict[str, Any]:
    row: dict[str, Any] = {"file": issue.file}
    if issue.line is not None:
        row["line"] = int(issue.line)
    row["message"] = issue.message
    if issue.detail is not None:
        row["detail"] = issue.detail
    return row


def results_as_rows(results: Iterable[CheckResult]) -> list[dict[str, Any]]:
    return [
        {
            "checkId": result.check_id,
            "name": result.name,
            "severity": str(result.severity),
            "issues": [_issue_row(issue) for issue in result.issues],
            "filesChecked": int(result.files_checked),
        }
        for result in results
    ]


def count_failed(results: Iterable[CheckResult], severity: Severity) -> int:
    return sum(1 for result in results if result.severity == severity and result.failed)


def has_errors(results: Iterable[CheckResult]) -> bool:
    return any(result.is_error for result in results)


def build_report_payload(results: list[CheckResult]) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "results": results_as_rows(results),
        "totalErrors": count_failed(results, Severity.ERROR),
        "totalWarnings": count_failed(results, Severity.WARNING),
    }
    validate(REPORT_SCHEMA, payload)
    return payload


def render_json(results: list[CheckResult]) -> str:
    return json.dumps(build_report_payload(results), indent=2)


def render_result(result: CheckResult, verbose: bool = False) -> list[str]:
    lines = ["", f"[check] {result.name}"]
    if not result.failed:
        lines.append(f"        ok {result.files_checked} files checked, no issues")
        return lines
    marker = "warn" if result.severity == Severity.WARNING else "FAIL"
    lines.append(f"        {marker} Found {len(result.issues)} {result.severity}(s):")
    shown = result.issues if verbose else result.issues[:DISPLAY_LIMIT]
    for issue in shown:
        lines.append(f"          - {issue.location}: {issue.message}")
        if issue.detail:
            lines.append(f"            {issue.detail}")
    hidden = len(result.issues) - len(shown)
    if hidden > 0:
        lines.append(f"          - ... and {hidden} more")
    if verbose:
        lines.append(f"        ({result.duration_ms} ms)")
    return lines


def render_summary(results: list[CheckResult]) -> list[str]:
    passed = sum(1 for result in results if not result.failed)
    warnings = count_failed(results, Severity.WARNING)
    errors = count_failed(results, Severity.ERROR)
    lines = ["", "=== Summary ==="]
    if passed:
        lines.append(f"ok   {passed} check(s) passed")
    if warnings:
        lines.append(f"warn {warnings} warning(s)")
    if errors:
        lines.append(f"FAIL {errors} check(s) failed")
    return lines


def render_text(results: list[CheckResult], verbose: bool = False) -> str:
    lines: list[str] = []
    for result in results:
        lines.extend(render_result(result, verbose=verbose))
    lines.extend(render_summary(results))
    return "\n".join(lines)


__all__ = [
    "DISPLAY_LIMIT",
    "build_report_payload",
    "count_failed",
    "has_errors",
    "render_json",
    "render_result",
    "render_summary",
    "render_text",
    "results_as_rows",
]
