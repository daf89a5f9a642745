from __future__ import annotations

from pathlib import Path
from typing import Iterable


def iter_markdown_files(docs_dir: Path, exclude: Iterable[str] = ()) -> list[str]:
    """Markdown files under ``docs_dir`` as sorted posix paths relative to it.

    A file is skipped when any segment of its relative path equals an
    excluded directory name.
    """
    if not docs_dir.is_dir():
        return []
    excluded = set(exclude)
    out: list[str] = []
    for path in docs_dir.rglob("*.md"):
        if not path.is_file():
            continue
        rel = path.relative_to(docs_dir).as_posix()
        if excluded.intersection(rel.split("/")):
            continue
        out.append(rel)
    return sorted(out)


def docs_path(docs_dir: Path, rel: str) -> Path:
    """Docs-relative path on disk; a leading separator stays inside ``docs_dir``."""
    return docs_dir / rel.lstrip("/")


def read_text(path: Path) -> str | None:
    try:
        return path.read_text(encoding="utf-8", errors="ignore")
    except OSError:
        return None


class DocumentStore:
    """Per-run cache of document text keyed by docs-relative path."""

    def __init__(self, docs_dir: Path) -> None:
        self._docs_dir = docs_dir
        self._cache: dict[str, str | None] = {}

    def read(self, rel: str) -> str | None:
        if rel not in self._cache:
            self._cache[rel] = read_text(docs_path(self._docs_dir, rel))
        return self._cache[rel]

    def __contains__(self, rel: object) -> bool:
        return rel in self._cache
