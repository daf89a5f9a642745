from __future__ import annotations

import re

from ...core.markdown import content_lines, heading_level, is_h1
from ..model import CheckContext, CheckOutcome, Issue

_EMPTY_HEADER_RE = re.compile(r"^#{2,6}\s*$")


def check_h1_headers(ctx: CheckContext) -> CheckOutcome:
    issues: list[Issue] = []
    for file in ctx.files:
        content = ctx.read(file)
        if not content:
            continue
        h1_lines = [record.line_num for record in content_lines(content) if is_h1(record.text)]
        if len(h1_lines) > 1:
            issues.append(Issue(file=file, line=h1_lines[1], message=f"Multiple H1 headers ({len(h1_lines)} found)"))
    return CheckOutcome(issues=tuple(issues), files_checked=len(ctx.files))


def check_empty_headers(ctx: CheckContext) -> CheckOutcome:
    issues: list[Issue] = []
    for file in ctx.files:
        content = ctx.read(file)
        if not content:
            continue
        for record in content_lines(content):
            if _EMPTY_HEADER_RE.match(record.text):
                issues.append(Issue(file=file, line=record.line_num, message=f"Empty header: {record.text.strip()}"))
    return CheckOutcome(issues=tuple(issues), files_checked=len(ctx.files))


def check_heading_order(ctx: CheckContext) -> CheckOutcome:
    issues: list[Issue] = []
    for file in ctx.files:
        content = ctx.read(file)
        if not content:
            continue
        last_level = 0
        for record in content_lines(content):
            level = heading_level(record.text)
            if not level:
                continue
            if last_level and level > last_level + 1:
                issues.append(
                    Issue(
                        file=file,
                        line=record.line_num,
                        message=f"Heading level skipped: h{last_level} -> h{level} (expected h{last_level + 1} or lower)",
                    )
                )
            last_level = level
    return CheckOutcome(issues=tuple(issues), files_checked=len(ctx.files))
