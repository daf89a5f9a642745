from __future__ import annotations

import re
import subprocess
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping

import yaml
from PIL import Image

from ..checks.runner import resolve_summary_path
from ..config import Config
from ..core.context import RunContext
from ..core.exec import run
from ..core.files import docs_path, read_text
from ..core.logging import log_event
from ..core.markdown import extract_frontmatter, extract_h1
from ..core.resolve import MARKDOWN_SUFFIX
from ..core.summary import NavigationEntry, parse_summary
from ..core.yaml_utils import load_yaml_text
from .template import CardSpec, render_card

OG_DIR = "og"
_MD_SUFFIX_RE = re.compile(r"\.md$")
_README_RE = re.compile(r"README$")


@dataclass(frozen=True)
class PlannedCard:
    entry: NavigationEntry
    slug: str
    out_path: Path
    title: str
    description: str | None


@dataclass
class GenerateReport:
    planned: list[PlannedCard] = field(default_factory=list)
    generated: list[PlannedCard] = field(default_factory=list)
    failed: list[str] = field(default_factory=list)


def path_to_slug(path: str) -> str:
    slug = _MD_SUFFIX_RE.sub("", path).replace("/", "-")
    return _README_RE.sub("index", slug)


def changed_markdown_files(root: Path) -> set[str]:
    """Markdown paths touched by the last commit; empty when git is unavailable."""
    try:
        proc = run(["git", "diff", "--name-only", "HEAD~1"], cwd=root, timeout_seconds=30)
    except (OSError, subprocess.SubprocessError):
        return set()
    if proc.returncode != 0:
        return set()
    return {line.strip() for line in proc.stdout.splitlines() if line.strip().endswith(MARKDOWN_SUFFIX)}


def page_description(content: str) -> str | None:
    fm = extract_frontmatter(content)
    if fm is None:
        return None
    try:
        data = load_yaml_text(fm.text)
    except yaml.YAMLError:
        return None
    if not isinstance(data, Mapping):
        return None
    description = str(data.get("description") or "").strip()
    return description or None


def _select_entries(root: Path, config: Config, entries: list[NavigationEntry], diff_only: bool) -> list[NavigationEntry]:
    if not diff_only:
        return entries
    changed = changed_markdown_files(root)
    return [entry for entry in entries if entry.path in changed or f"{config.docs_dir}/{entry.path}" in changed]


def _load_logo(ctx: RunContext, config: Config) -> Image.Image | None:
    if not config.og.logo:
        return None
    path = ctx.repo_root / config.og.logo
    try:
        with Image.open(path) as opened:
            return opened.convert("RGBA")
    except (OSError, ValueError) as exc:
        log_event(ctx, "warn", "og", "logo_unreadable", logo=config.og.logo, error=str(exc))
        return None


def _resolve_font(ctx: RunContext, config: Config) -> str | None:
    if not config.og.font:
        return None
    path = ctx.repo_root / config.og.font
    if not path.is_file():
        log_event(ctx, "warn", "og", "font_missing", font=config.og.font)
        return None
    return str(path)


def plan_cards(ctx: RunContext, config: Config, diff_only: bool = False) -> list[PlannedCard]:
    docs_dir = ctx.repo_root / config.docs_dir
    og_dir = ctx.repo_root / config.assets_dir / OG_DIR
    entries = _select_entries(ctx.repo_root, config, parse_summary(resolve_summary_path(ctx.repo_root, config)), diff_only)
    planned: list[PlannedCard] = []
    for entry in entries:
        if not entry.path.endswith(MARKDOWN_SUFFIX):
            continue
        slug = path_to_slug(entry.path)
        title = entry.title
        description = None
        content = read_text(docs_path(docs_dir, entry.path))
        if content:
            title = extract_h1(content) or title
            description = page_description(content)
        planned.append(
            PlannedCard(entry=entry, slug=slug, out_path=og_dir / f"{slug}.png", title=title, description=description)
        )
    return planned


def generate_og_images(ctx: RunContext, config: Config, dry_run: bool = False, diff_only: bool = False) -> GenerateReport:
    """Render one card per navigation page; a dry run only plans them."""
    report = GenerateReport(planned=plan_cards(ctx, config, diff_only=diff_only))
    if dry_run or not report.planned:
        return report
    font_path = _resolve_font(ctx, config)
    logo = _load_logo(ctx, config)
    report.planned[0].out_path.parent.mkdir(parents=True, exist_ok=True)
    for card in report.planned:
        spec = CardSpec(
            title=card.title,
            brand=config.og.brand,
            color=config.og.color,
            description=card.description,
            footer=config.og.footer,
            font_path=font_path,
            logo=logo,
        )
        try:
            render_card(spec).save(card.out_path, format="PNG")
        except (OSError, ValueError) as exc:
            log_event(ctx, "error", "og", "render_failed", slug=card.slug, error=str(exc))
            report.failed.append(card.slug)
            continue
        report.generated.append(card)
    return report
