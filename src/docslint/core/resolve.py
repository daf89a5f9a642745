"""Resolution of relative link and image targets to files on disk."""

from __future__ import annotations

import posixpath
from pathlib import Path
from urllib.parse import unquote

MARKDOWN_SUFFIX = ".md"
INDEX_DOCUMENT = "README.md"


def _source_dir(docs_dir: Path, source: str) -> Path:
    return (docs_dir / source).parent


def _join(base: Path, target: str) -> Path:
    # leading separators in the target stay relative to the base directory
    return Path(posixpath.normpath(f"{base.as_posix()}/{target}"))


def resolve_target(docs_dir: Path, source: str, raw: str) -> Path:
    return _join(_source_dir(docs_dir, source), unquote(raw))


def link_target_exists(docs_dir: Path, source: str, raw: str) -> bool:
    """Try the fallback conventions in priority order, stopping at the first hit."""
    if not raw:
        return True

    resolved = resolve_target(docs_dir, source, raw)
    if resolved.is_file():
        return True

    if not resolved.name.endswith(MARKDOWN_SUFFIX):
        if Path(f"{resolved}{MARKDOWN_SUFFIX}").is_file():
            return True

    if (resolved / INDEX_DOCUMENT).is_file():
        return True

    if raw.endswith("/"):
        base = raw[:-1]
        if resolve_target(docs_dir, source, base + MARKDOWN_SUFFIX).is_file():
            return True
        dir_name = base.split("/")[-1]
        if dir_name and resolve_target(docs_dir, source, f"{base}/{dir_name}{MARKDOWN_SUFFIX}").is_file():
            return True

    with_spaces = Path(str(resolved).replace("%20", " "))
    if with_spaces != resolved and with_spaces.is_file():
        return True

    return False


def image_exists(docs_dir: Path, assets_dir: Path, source: str, raw: str) -> bool:
    decoded = unquote(raw)
    relative = resolve_target(docs_dir, source, raw)
    if relative.is_file():
        return True

    filename = decoded.split("/")[-1]
    if filename and (assets_dir / filename).is_file():
        return True

    spaced = _join(_source_dir(docs_dir, source), raw.replace("%20", " "))
    if spaced != relative and spaced.is_file():
        return True

    return False


def normalize_doc_target(source: str, href: str) -> str:
    """Canonical docs-relative path for an internal link, or ``""``.

    Absolute-style targets drop their leading separator, trailing-separator
    targets map to the directory's index document, and everything else is
    joined to the source directory and normalized.
    """
    target = href.split("#", 1)[0]
    if not target:
        return ""
    decoded = unquote(target)
    if decoded.startswith("/"):
        resolved = decoded.lstrip("/")
    else:
        resolved = posixpath.join(posixpath.dirname(source), decoded)
    if resolved.endswith("/") or not resolved:
        resolved = posixpath.join(resolved, INDEX_DOCUMENT)
    return posixpath.normpath(resolved)
