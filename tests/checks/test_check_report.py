from __future__ import annotations

import json

import pytest

from docslint.checks.model import CheckResult, Issue, Severity
from docslint.checks.report import build_report_payload, has_errors, render_json, render_text
from docslint.contracts.catalog import REPORT_SCHEMA
from docslint.contracts.validate import validate
from docslint.errors import ScriptError
from docslint.exit_codes import ERR_VALIDATION


def _results() -> list[CheckResult]:
    return [
        CheckResult("broken-links", "Broken Links", Severity.ERROR, (Issue("a.md", "Broken link: [x](y.md)", line=3),), 2),
        CheckResult("orphan-pages", "Orphan Pages", Severity.WARNING, (Issue("b.md", "No incoming links from other docs"),), 2),
        CheckResult("redirects", "Redirects", Severity.ERROR, (), 0),
    ]


def test_payload_shape_and_totals() -> None:
    payload = build_report_payload(_results())
    assert payload["totalErrors"] == 1
    assert payload["totalWarnings"] == 1
    first, second, third = payload["results"]
    assert first == {
        "checkId": "broken-links",
        "name": "Broken Links",
        "severity": "error",
        "issues": [{"file": "a.md", "line": 3, "message": "Broken link: [x](y.md)"}],
        "filesChecked": 2,
    }
    assert second["issues"] == [{"file": "b.md", "message": "No incoming links from other docs"}]
    assert third["issues"] == []
    assert json.loads(render_json(_results())) == payload


def test_warnings_never_fail() -> None:
    assert has_errors(_results())
    assert not has_errors(_results()[1:])


def test_schema_rejects_malformed_payload() -> None:
    with pytest.raises(ScriptError) as err:
        validate(REPORT_SCHEMA, {"results": [], "totalErrors": -1, "totalWarnings": 0})
    assert err.value.code == ERR_VALIDATION
    assert "totalErrors" in str(err.value)


def test_text_output_limits_issues_unless_verbose() -> None:
    issues = tuple(Issue("a.md", f"Broken link {n}", line=n + 1) for n in range(12))
    result = CheckResult("broken-links", "Broken Links", Severity.ERROR, issues, 1, duration_ms=7)
    text = render_text([result])
    assert "[check] Broken Links" in text
    assert "FAIL Found 12 error(s):" in text
    assert "a.md:10: Broken link 9" in text
    assert "Broken link 10" not in text
    assert "... and 2 more" in text
    assert "FAIL 1 check(s) failed" in text
    verbose = render_text([result], verbose=True)
    assert "a.md:12: Broken link 11" in verbose
    assert "... and" not in verbose
    assert "(7 ms)" in verbose


def test_text_output_passing_check() -> None:
    text = render_text([CheckResult("redirects", "Redirects", Severity.ERROR, (), 4)])
    assert "ok 4 files checked, no issues" in text
    assert "ok   1 check(s) passed" in text
