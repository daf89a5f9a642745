"""Line-oriented markdown scanning with code-fence tracking."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator

FENCE = "```"

_FRONTMATTER_RE = re.compile(r"^---\r?\n([\s\S]*?)\r?\n---")
_H1_RE = re.compile(r"^#\s+(.+)$")
_HEADING_RE = re.compile(r"^(#{1,6})\s")
_INLINE_CODE_RE = re.compile(r"`[^`]+`")
_IMG_TAG_RE = re.compile(r"<img\b[^>]*>", re.IGNORECASE)

FRONTMATTER_LINE_OFFSET = 2


@dataclass(frozen=True)
class LineRecord:
    text: str
    line_num: int
    in_fence: bool


@dataclass(frozen=True)
class Frontmatter:
    text: str
    offset: int


@dataclass(frozen=True)
class ImgTag:
    tag: str
    line_num: int


def _split_lines(content: str) -> list[str]:
    return [line.rstrip("\r") for line in content.split("\n")]


def walk_lines(content: str) -> Iterator[LineRecord]:
    """Yield every line with the fence state in effect after reading it.

    Fence delimiter lines toggle the state, so an opening fence reports
    ``in_fence=True`` and a closing fence ``in_fence=False``.
    """
    in_fence = False
    for idx, line in enumerate(_split_lines(content)):
        if line.lstrip().startswith(FENCE):
            in_fence = not in_fence
        yield LineRecord(text=line, line_num=idx + 1, in_fence=in_fence)


def is_fence_line(line: str) -> bool:
    return line.lstrip().startswith(FENCE)


def content_lines(content: str) -> Iterator[LineRecord]:
    for record in walk_lines(content):
        if record.in_fence or is_fence_line(record.text):
            continue
        yield record


def extract_frontmatter(content: str) -> Frontmatter | None:
    if not content.startswith("---"):
        return None
    match = _FRONTMATTER_RE.match(content)
    if not match:
        return None
    return Frontmatter(text=match.group(1), offset=FRONTMATTER_LINE_OFFSET)


def is_h1(line: str) -> bool:
    return bool(_H1_RE.match(line)) and not line.startswith("##")


def extract_h1(content: str) -> str | None:
    """Stripped text of the first H1 outside fences; blank when that H1 is blank."""
    for record in content_lines(content):
        if is_h1(record.text):
            return _H1_RE.match(record.text).group(1).strip()
    return None


def heading_level(line: str) -> int:
    match = _HEADING_RE.match(line)
    return len(match.group(1)) if match else 0


def strip_inline_code(line: str) -> str:
    return _INLINE_CODE_RE.sub("", line)


def extract_img_tags(content: str) -> list[ImgTag]:
    """Raw HTML ``<img>`` tags outside fences, including tags spanning lines.

    Inline code spans are removed first so img markup quoted inside
    backticks never counts as a tag.
    """
    records = list(content_lines(content))
    joined = "\n".join(strip_inline_code(record.text) for record in records)
    tags: list[ImgTag] = []
    for match in _IMG_TAG_RE.finditer(joined):
        idx = joined.count("\n", 0, match.start())
        line_num = records[idx].line_num if idx < len(records) else 1
        tags.append(ImgTag(tag=match.group(0), line_num=line_num))
    return tags
