from __future__ import annotations

import posixpath
from dataclasses import dataclass
from pathlib import Path
from urllib.parse import quote

from ..core.files import iter_markdown_files, read_text

# characters left alone by JavaScript-style URI component encoding
_URI_COMPONENT_SAFE = "!~*'()"


@dataclass(frozen=True)
class Rename:
    source: str
    dest: str


def encode_basename(name: str) -> str:
    return quote(name, safe=_URI_COMPONENT_SAFE).replace("%20", " ")


def rewrite_refs(content: str, renames: list[Rename]) -> str:
    for rename in renames:
        old = posixpath.basename(rename.source)
        new = posixpath.basename(rename.dest)
        content = content.replace(old, new)
        old_encoded = encode_basename(old)
        if old_encoded != old:
            content = content.replace(old_encoded, encode_basename(new))
    return content


def update_refs_in_dir(docs_dir: Path, renames: list[Rename]) -> int:
    """Rewrite image basenames in every markdown file; returns the number of files changed."""
    if not renames:
        return 0
    changed = 0
    for rel in iter_markdown_files(docs_dir):
        path = docs_dir / rel
        content = read_text(path)
        if content is None:
            continue
        updated = rewrite_refs(content, renames)
        if updated != content:
            path.write_text(updated, encoding="utf-8")
            changed += 1
    return changed
