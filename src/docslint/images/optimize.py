from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath

from PIL import Image

from ..core.context import RunContext
from ..core.logging import log_event
from .refs import Rename, update_refs_in_dir
from .scan import iter_optimizable

WEBP_SUFFIX = ".webp"


@dataclass(frozen=True)
class OptimizeOptions:
    dry_run: bool = False
    keep_originals: bool = False
    quality: int = 85
    max_width: int = 2000


@dataclass(frozen=True)
class ConversionResult:
    source: str
    dest: str
    original_size: int
    new_size: int

    @property
    def savings_pct(self) -> int:
        if not self.original_size:
            return 0
        return round((1 - self.new_size / self.original_size) * 100)


@dataclass
class OptimizeReport:
    renames: list[Rename] = field(default_factory=list)
    converted: list[ConversionResult] = field(default_factory=list)
    failed: list[str] = field(default_factory=list)
    files_updated: int = 0

    @property
    def original_bytes(self) -> int:
        return sum(row.original_size for row in self.converted)

    @property
    def new_bytes(self) -> int:
        return sum(row.new_size for row in self.converted)


def webp_name(rel: str) -> str:
    return str(PurePosixPath(rel).with_suffix(WEBP_SUFFIX))


def _normalize_mode(image: Image.Image) -> Image.Image:
    if image.mode in ("RGB", "RGBA"):
        return image
    if image.mode in ("P", "LA", "PA") or "transparency" in image.info:
        return image.convert("RGBA")
    return image.convert("RGB")


def convert_to_webp(source: Path, dest: Path, quality: int, max_width: int) -> None:
    with Image.open(source) as opened:
        image = _normalize_mode(opened)
        if image.width > max_width:
            height = max(1, round(image.height * max_width / image.width))
            image = image.resize((max_width, height), Image.Resampling.LANCZOS)
        image.save(dest, format="WEBP", quality=quality)


def optimize_images(ctx: RunContext, assets_dir: Path, docs_dir: Path, options: OptimizeOptions) -> OptimizeReport:
    """Convert raster assets to WebP and point markdown references at the new files.

    A dry run only records the planned renames.
    """
    report = OptimizeReport()
    for rel in iter_optimizable(assets_dir):
        source = assets_dir / rel
        dest_rel = webp_name(rel)
        if options.dry_run:
            report.renames.append(Rename(source=rel, dest=dest_rel))
            continue
        dest = assets_dir / dest_rel
        original_size = source.stat().st_size
        try:
            convert_to_webp(source, dest, options.quality, options.max_width)
        except (OSError, ValueError) as exc:
            log_event(ctx, "error", "images", "convert_failed", file=rel, error=str(exc))
            report.failed.append(rel)
            continue
        result = ConversionResult(source=rel, dest=dest_rel, original_size=original_size, new_size=dest.stat().st_size)
        report.converted.append(result)
        report.renames.append(Rename(source=rel, dest=dest_rel))
        log_event(ctx, "debug", "images", "converted", file=rel, dest=dest_rel, savings_pct=result.savings_pct)
        if not options.keep_originals:
            source.unlink()
    if report.renames and not options.dry_run:
        report.files_updated = update_refs_in_dir(docs_dir, report.renames)
    return report
