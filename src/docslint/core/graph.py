from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Iterable

from .links import extract_links, is_internal_doc_link
from .resolve import MARKDOWN_SUFFIX, normalize_doc_target


@dataclass(frozen=True)
class LinkGraph:
    incoming: dict[str, set[str]] = field(default_factory=dict)
    outgoing: dict[str, set[str]] = field(default_factory=dict)

    def in_degree(self, doc: str) -> int:
        return len(self.incoming.get(doc, ()))

    def out_degree(self, doc: str) -> int:
        return len(self.outgoing.get(doc, ()))


def build_link_graph(files: Iterable[str], read: Callable[[str], str | None]) -> LinkGraph:
    """Single pass over every document's links.

    ``outgoing`` keeps every normalized internal target; ``incoming`` only
    records markdown targets linked from a different document.
    """
    graph = LinkGraph()
    for source in files:
        content = read(source)
        if content is None:
            continue
        for link in extract_links(content):
            if not is_internal_doc_link(link):
                continue
            target = normalize_doc_target(source, link.href)
            if not target:
                continue
            graph.outgoing.setdefault(source, set()).add(target)
            if not target.endswith(MARKDOWN_SUFFIX) or target == source:
                continue
            graph.incoming.setdefault(target, set()).add(source)
    return graph
