from __future__ import annotations

import re
from dataclasses import dataclass

from .markdown import content_lines

_LINK_RE = re.compile(r"(!?)\[([^\]]*)\]\(([^)]+)\)")
_LINK_TITLE_RE = re.compile(r"""\s+(?:"[^"]*"|'[^']*')\s*$""")
_EXTERNAL_RE = re.compile(r"^(https?://|mailto:|ftp://|#)")
_IMAGE_HREF_RE = re.compile(r"\.(png|jpg|jpeg|gif|svg|webp|bmp|tiff)$", re.IGNORECASE)


@dataclass(frozen=True)
class Link:
    text: str
    href: str
    line_num: int
    is_image: bool


def clean_href(raw: str) -> str:
    """Drop an optional quoted link title and the fragment."""
    target = _LINK_TITLE_RE.sub("", raw.strip())
    return target.split("#", 1)[0]


def extract_links(content: str) -> list[Link]:
    links: list[Link] = []
    for record in content_lines(content):
        for match in _LINK_RE.finditer(record.text):
            links.append(
                Link(
                    text=match.group(2),
                    href=clean_href(match.group(3)),
                    line_num=record.line_num,
                    is_image=match.group(1) == "!",
                )
            )
    return links


def is_external(href: str) -> bool:
    return bool(_EXTERNAL_RE.match(href))


def is_image_href(href: str) -> bool:
    return bool(_IMAGE_HREF_RE.search(href))


def is_internal_doc_link(link: Link) -> bool:
    if link.is_image or not link.href:
        return False
    return not (is_external(link.href) or is_image_href(link.href))
