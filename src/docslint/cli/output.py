"""CLI output helpers."""

from __future__ import annotations

import json
from typing import Iterable

from ..checks.model import CheckDef, Severity


def render_error(*, as_json: bool, message: str, code: int, kind: str = "generic_error") -> str:
    if as_json:
        return json.dumps(
            {
                "tool": "docs-lint",
                "status": "error",
                "errors": [{"code": code, "kind": kind, "message": message}],
            },
            sort_keys=True,
        )
    return f"Error: {message}"


def render_check_list(checks: Iterable[CheckDef], verbose: bool = False) -> str:
    lines = ["Available checks:", ""]
    for check in checks:
        suffix = " (warning)" if check.severity == Severity.WARNING else ""
        lines.append(f"  {check.check_id:<24} {check.name}{suffix}")
        if verbose and check.description:
            lines.append(f"  {'':<24} {check.description}")
    return "\n".join(lines)


def render_header(root: str, docs_dir: str, file_count: int) -> str:
    return "\n".join(["=== docs-lint ===", f"Root: {root}", f"Docs: {docs_dir}/ ({file_count} files)"])
