from __future__ import annotations

import re
from dataclasses import dataclass

from ...core.markdown import content_lines, extract_img_tags, strip_inline_code
from ...core.resolve import image_exists
from ..model import CheckContext, CheckOutcome, Issue

_EMPTY_ALT_MD_RE = re.compile(r"!\[\]\([^)]+\)")
_EMPTY_ALT_ATTR_RE = re.compile(r"""alt\s*=\s*["']\s*["']""", re.IGNORECASE)
_ALT_ATTR_RE = re.compile(r"alt\s*=", re.IGNORECASE)
_MD_IMAGE_RE = re.compile(r"!\[[^\]]*\]\(([^)]+)\)")
_SRC_ATTR_RE = re.compile(r"""src=["']([^"']+)["']""", re.IGNORECASE)
_IMAGE_EXT_RE = re.compile(r"\.(png|jpg|jpeg|gif|svg|webp|bmp|tiff)$", re.IGNORECASE)


@dataclass(frozen=True)
class ImageRef:
    path: str
    line_num: int


def _is_local_image(path: str) -> bool:
    return bool(path) and not path.startswith("http") and bool(_IMAGE_EXT_RE.search(path))


def extract_image_refs(content: str) -> list[ImageRef]:
    refs: list[ImageRef] = []
    for record in content_lines(content):
        for match in _MD_IMAGE_RE.finditer(record.text):
            path = match.group(1).split("#", 1)[0].strip()
            if _is_local_image(path):
                refs.append(ImageRef(path=path, line_num=record.line_num))
        for match in _SRC_ATTR_RE.finditer(strip_inline_code(record.text)):
            path = match.group(1).strip()
            if _is_local_image(path):
                refs.append(ImageRef(path=path, line_num=record.line_num))
    return refs


def check_image_alt(ctx: CheckContext) -> CheckOutcome:
    issues: list[Issue] = []
    for file in ctx.files:
        content = ctx.read(file)
        if not content:
            continue
        for record in content_lines(content):
            if _EMPTY_ALT_MD_RE.search(record.text):
                issues.append(Issue(file=file, line=record.line_num, message="Markdown image without alt text"))
        for tag in extract_img_tags(content):
            if _EMPTY_ALT_ATTR_RE.search(tag.tag):
                issues.append(Issue(file=file, line=tag.line_num, message="img tag with empty alt"))
            elif not _ALT_ATTR_RE.search(tag.tag):
                issues.append(Issue(file=file, line=tag.line_num, message="img tag without alt attribute"))
    return CheckOutcome(issues=tuple(issues), files_checked=len(ctx.files))


def check_missing_images(ctx: CheckContext) -> CheckOutcome:
    issues: list[Issue] = []
    for file in ctx.files:
        content = ctx.read(file)
        if not content:
            continue
        for ref in extract_image_refs(content):
            if not image_exists(ctx.docs_dir, ctx.assets_dir, file, ref.path):
                issues.append(Issue(file=file, line=ref.line_num, message=f"Missing image: {ref.path}"))
    return CheckOutcome(issues=tuple(issues), files_checked=len(ctx.files))
