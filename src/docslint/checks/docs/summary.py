from __future__ import annotations

import re

from ...core.files import docs_path, read_text
from ...core.markdown import extract_h1
from ...core.resolve import MARKDOWN_SUFFIX
from ...core.summary import parse_summary, summary_paths
from ..model import CheckContext, CheckOutcome, Issue

_TITLE_RE = re.compile(r"\[([^\]]*)\]")
_BOLD_RE = re.compile(r"\*\*(.*?)\*\*")
_ITALIC_RE = re.compile(r"\*(.*?)\*")
_CODE_RE = re.compile(r"`(.*?)`")
_WS_RE = re.compile(r"\s+")


def normalize_title(title: str) -> str:
    """Comparable form of a title: markup stripped, whitespace collapsed, casefolded."""
    text = _BOLD_RE.sub(r"\1", title)
    text = _ITALIC_RE.sub(r"\1", text)
    text = _CODE_RE.sub(r"\1", text)
    return _WS_RE.sub(" ", text).strip().casefold()


def check_ampersand_summary(ctx: CheckContext) -> CheckOutcome:
    content = read_text(ctx.summary_path)
    if not content:
        return CheckOutcome()
    issues: list[Issue] = []
    for idx, line in enumerate(content.split("\n")):
        if " & " not in line:
            continue
        match = _TITLE_RE.search(line)
        if match and " & " in match.group(1):
            issues.append(Issue(file=ctx.summary_name, line=idx + 1, message="Title contains ' & ', use 'and' instead"))
    return CheckOutcome(issues=tuple(issues), files_checked=1)


def check_summary_sync(ctx: CheckContext) -> CheckOutcome:
    entries = parse_summary(ctx.summary_path)
    if not entries:
        return CheckOutcome()
    declared = summary_paths(entries)
    on_disk = [file for file in ctx.files if file != ctx.summary_name]
    issues: list[Issue] = [
        Issue(file=file, message=f"Not in {ctx.summary_name}") for file in on_disk if file not in declared
    ]
    for entry in entries:
        if not entry.path.endswith(MARKDOWN_SUFFIX):
            continue
        if not docs_path(ctx.docs_dir, entry.path).is_file():
            issues.append(Issue(file=ctx.summary_name, line=entry.line_num, message=f"Missing on disk: {entry.path}"))
    return CheckOutcome(issues=tuple(issues), files_checked=len(on_disk))


def check_title_mismatch(ctx: CheckContext) -> CheckOutcome:
    entries = parse_summary(ctx.summary_path)
    if not entries:
        return CheckOutcome()
    issues: list[Issue] = []
    checked = 0
    for entry in entries:
        if not entry.path.endswith(MARKDOWN_SUFFIX):
            continue
        content = ctx.read(entry.path)
        if not content:
            continue
        checked += 1
        h1 = extract_h1(content)
        if not h1:
            continue
        if normalize_title(entry.title) != normalize_title(h1):
            issues.append(Issue(file=entry.path, message=f'{ctx.summary_name} title "{entry.title}" != H1 "{h1}"'))
    return CheckOutcome(issues=tuple(issues), files_checked=checked)
