"""Ordered registry of every lint check."""

from __future__ import annotations

from .docs.frontmatter import check_frontmatter_yaml
from .docs.graph import check_dead_end_pages, check_orphan_pages
from .docs.headings import check_empty_headers, check_h1_headers, check_heading_order
from .docs.images import check_image_alt, check_missing_images
from .docs.redirects import check_redirects
from .docs.references import (
    check_absolute_links,
    check_broken_links,
    check_broken_references,
    check_deprecated_links,
)
from .docs.summary import check_ampersand_summary, check_summary_sync, check_title_mismatch
from .model import CheckDef, Severity

ALL_CHECKS: tuple[CheckDef, ...] = (
    CheckDef("frontmatter-yaml", "Frontmatter YAML", Severity.ERROR, check_frontmatter_yaml, "frontmatter block must parse as YAML"),
    CheckDef("h1-headers", "Multiple H1 Headers", Severity.ERROR, check_h1_headers, "at most one top-level heading per document"),
    CheckDef("empty-headers", "Empty Headers", Severity.ERROR, check_empty_headers, "headings must carry text"),
    CheckDef("heading-order", "Heading Order", Severity.WARNING, check_heading_order, "heading levels must not skip downward"),
    CheckDef("broken-references", "Broken References", Severity.ERROR, check_broken_references, "links pointing at broken-reference placeholders"),
    CheckDef("image-alt", "Image Alt Text", Severity.WARNING, check_image_alt, "images need alt text"),
    CheckDef("deprecated-links", "Deprecated Links", Severity.ERROR, check_deprecated_links, "links into deprecated documentation"),
    CheckDef("absolute-links", "Absolute Links", Severity.ERROR, check_absolute_links, "absolute URLs to the documentation's own domain"),
    CheckDef("ampersand-summary", "Ampersand in SUMMARY", Severity.ERROR, check_ampersand_summary, "navigation titles must spell out 'and'"),
    CheckDef("summary-sync", "SUMMARY Sync", Severity.ERROR, check_summary_sync, "navigation and disk must list the same documents"),
    CheckDef("title-mismatch", "Title Mismatch", Severity.ERROR, check_title_mismatch, "navigation titles must match document H1"),
    CheckDef("redirects", "Redirects", Severity.ERROR, check_redirects, "redirect targets must exist"),
    CheckDef("broken-links", "Broken Links", Severity.ERROR, check_broken_links, "internal links must resolve"),
    CheckDef("missing-images", "Missing Images", Severity.ERROR, check_missing_images, "referenced local images must exist"),
    CheckDef("orphan-pages", "Orphan Pages", Severity.WARNING, check_orphan_pages, "documents without incoming links"),
    CheckDef("dead-end-pages", "Dead-end Pages", Severity.WARNING, check_dead_end_pages, "documents without outgoing links"),
)


def list_checks() -> tuple[CheckDef, ...]:
    return ALL_CHECKS


def check_ids() -> tuple[str, ...]:
    return tuple(check.check_id for check in ALL_CHECKS)


def get_check(check_id: str) -> CheckDef | None:
    for check in ALL_CHECKS:
        if check.check_id == check_id:
            return check
    return None
