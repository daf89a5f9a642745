"""Link-graph checks: pages nobody links to and pages that link nowhere."""

from __future__ import annotations

import re
from typing import Mapping

import yaml

from ...core.graph import build_link_graph
from ...core.markdown import extract_frontmatter
from ...core.resolve import INDEX_DOCUMENT
from ...core.yaml_utils import load_yaml_text
from ..model import CheckContext, CheckOutcome, Issue

_HIDDEN_SCAN_CHARS = 500
_HIDDEN_RE = re.compile(r"hidden:\s*true")


def is_hidden(content: str) -> bool:
    """``hidden: true`` in the frontmatter block.

    Frontmatter that does not parse falls back to a textual scan of the
    document head.
    """
    fm = extract_frontmatter(content)
    if fm is None:
        return False
    try:
        data = load_yaml_text(fm.text)
    except yaml.YAMLError:
        return bool(_HIDDEN_RE.search(content[:_HIDDEN_SCAN_CHARS]))
    return isinstance(data, Mapping) and data.get("hidden") is True


def _entry_points(ctx: CheckContext) -> frozenset[str]:
    return frozenset({ctx.summary_name, INDEX_DOCUMENT, f"getting-started/{INDEX_DOCUMENT}"})


def check_orphan_pages(ctx: CheckContext) -> CheckOutcome:
    graph = build_link_graph(ctx.files, ctx.read)
    entry_points = _entry_points(ctx)
    issues: list[Issue] = []
    for file in ctx.files:
        if file in entry_points or file.endswith(INDEX_DOCUMENT):
            continue
        content = ctx.read(file)
        if content and is_hidden(content):
            continue
        if graph.in_degree(file) == 0:
            issues.append(Issue(file=file, message="No incoming links from other docs"))
    return CheckOutcome(issues=tuple(issues), files_checked=len(ctx.files))


def check_dead_end_pages(ctx: CheckContext) -> CheckOutcome:
    graph = build_link_graph(ctx.files, ctx.read)
    issues: list[Issue] = []
    for file in ctx.files:
        if file == ctx.summary_name or file.endswith(INDEX_DOCUMENT) or "deprecated" in file:
            continue
        if ctx.read(file) is None:
            continue
        if graph.out_degree(file) == 0:
            issues.append(Issue(file=file, message="No outgoing links to other docs"))
    return CheckOutcome(issues=tuple(issues), files_checked=len(ctx.files))
