from __future__ import annotations

import re

from ...core.links import extract_links, is_external, is_image_href
from ...core.markdown import content_lines
from ...core.resolve import link_target_exists
from ..model import CheckContext, CheckOutcome, Issue

BROKEN_REFERENCE = "broken-reference"
DEFAULT_DOC_DOMAINS: tuple[str, ...] = ("docs.aidbox.app", "www.health-samurai.io/docs")

_BROKEN_REFERENCE_RE = re.compile(r"\[.*?\]\(" + re.escape(BROKEN_REFERENCE))
_DEPRECATED_RE = re.compile(r"deprecated", re.IGNORECASE)


def _is_placeholder(href: str) -> bool:
    return "{{" in href or "<" in href or href == BROKEN_REFERENCE


def check_broken_references(ctx: CheckContext) -> CheckOutcome:
    issues: list[Issue] = []
    for file in ctx.files:
        content = ctx.read(file)
        if not content:
            continue
        for record in content_lines(content):
            if _BROKEN_REFERENCE_RE.search(record.text):
                issues.append(Issue(file=file, line=record.line_num, message="Link points to broken-reference"))
    return CheckOutcome(issues=tuple(issues), files_checked=len(ctx.files))


def check_deprecated_links(ctx: CheckContext) -> CheckOutcome:
    issues: list[Issue] = []
    options = ctx.config.check_options("deprecated-links")
    exclude_files = [str(item) for item in options.get("exclude_files") or []]
    for file in ctx.files:
        if file == ctx.summary_name or "deprecated" in file:
            continue
        if any(pattern in file for pattern in exclude_files):
            continue
        content = ctx.read(file)
        if not content:
            continue
        for link in extract_links(content):
            if is_external(link.href):
                continue
            if _DEPRECATED_RE.search(link.href):
                issues.append(Issue(file=file, line=link.line_num, message=f"Link to deprecated: [{link.text}]({link.href})"))
    return CheckOutcome(issues=tuple(issues), files_checked=len(ctx.files))


def _domain_patterns(domains: list[str]) -> list[re.Pattern[str]]:
    return [re.compile(r"https?://" + re.escape(domain), re.IGNORECASE) for domain in domains]


def check_absolute_links(ctx: CheckContext) -> CheckOutcome:
    options = ctx.config.check_options("absolute-links")
    domains = [str(item) for item in options.get("domains") or DEFAULT_DOC_DOMAINS]
    patterns = _domain_patterns(domains)
    issues: list[Issue] = []
    for file in ctx.files:
        content = ctx.read(file)
        if not content:
            continue
        for record in content_lines(content):
            # one issue per line
            if any(pattern.search(record.text) for pattern in patterns):
                issues.append(Issue(file=file, line=record.line_num, message="Absolute link to documentation domain"))
    return CheckOutcome(issues=tuple(issues), files_checked=len(ctx.files))


def check_broken_links(ctx: CheckContext) -> CheckOutcome:
    issues: list[Issue] = []
    for file in ctx.files:
        content = ctx.read(file)
        if not content:
            continue
        for link in extract_links(content):
            if not link.href or is_external(link.href) or is_image_href(link.href):
                continue
            if _is_placeholder(link.href):
                continue
            if not link_target_exists(ctx.docs_dir, file, link.href):
                issues.append(Issue(file=file, line=link.line_num, message=f"Broken link: [{link.text}]({link.href})"))
    return CheckOutcome(issues=tuple(issues), files_checked=len(ctx.files))
