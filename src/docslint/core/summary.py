from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path

from .files import read_text

_LINK_RE = re.compile(r"\[([^\]]+)\]\(([^)]+)\)")
_HTTP_RE = re.compile(r"^https?://")


@dataclass(frozen=True)
class NavigationEntry:
    title: str
    path: str
    line_num: int


def parse_summary_text(content: str) -> list[NavigationEntry]:
    entries: list[NavigationEntry] = []
    for idx, line in enumerate(content.split("\n")):
        match = _LINK_RE.search(line)
        if not match:
            continue
        title, path = match.group(1), match.group(2)
        if _HTTP_RE.match(path):
            continue
        entries.append(NavigationEntry(title=title.strip(), path=path, line_num=idx + 1))
    return entries


def parse_summary(summary_path: Path) -> list[NavigationEntry]:
    """Navigation entries in document order; empty when the document is absent."""
    content = read_text(summary_path)
    if not content:
        return []
    return parse_summary_text(content)


def summary_paths(entries: list[NavigationEntry]) -> set[str]:
    return {entry.path for entry in entries}
