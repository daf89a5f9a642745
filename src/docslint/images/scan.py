from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

HEAVY_THRESHOLD = 500 * 1024
OPTIMIZABLE_SUFFIXES = frozenset({".png", ".jpg", ".jpeg", ".gif"})


@dataclass(frozen=True)
class UnoptimizedImage:
    path: str
    size: int

    @property
    def heavy(self) -> bool:
        return self.size > HEAVY_THRESHOLD

    @property
    def reason(self) -> str:
        return f"{format_size(self.size)} (>500KB)" if self.heavy else "Not WebP"


def format_size(size: int) -> str:
    if size < 1024:
        return f"{size}B"
    if size < 1024 * 1024:
        return f"{size / 1024:.0f}KB"
    return f"{size / (1024 * 1024):.1f}MB"


def iter_optimizable(assets_dir: Path) -> list[str]:
    """Raster files under ``assets_dir`` as sorted posix relative paths."""
    if not assets_dir.is_dir():
        return []
    return sorted(
        path.relative_to(assets_dir).as_posix()
        for path in assets_dir.rglob("*")
        if path.is_file() and path.suffix.lower() in OPTIMIZABLE_SUFFIXES
    )


def find_unoptimized(assets_dir: Path) -> list[UnoptimizedImage]:
    images = [UnoptimizedImage(path=rel, size=(assets_dir / rel).stat().st_size) for rel in iter_optimizable(assets_dir)]
    return sorted(images, key=lambda image: (-image.size, image.path))


def render_unoptimized(images: list[UnoptimizedImage], heavy_limit: int = 20, light_limit: int = 10) -> str:
    if not images:
        return "ok all images optimized"
    heavy = [image for image in images if image.heavy]
    light = [image for image in images if not image.heavy]
    lines = [f"Found {len(images)} unoptimized images:", ""]
    if heavy:
        lines.append("  Heavy images (>500KB):")
        lines.extend(f"    {image.path} ({format_size(image.size)})" for image in heavy[:heavy_limit])
        if len(heavy) > heavy_limit:
            lines.append(f"    ... and {len(heavy) - heavy_limit} more")
        lines.append("")
    if light:
        lines.append(f"  Not WebP ({len(light)} files)")
        lines.extend(f"    {image.path} ({format_size(image.size)})" for image in light[:light_limit])
        if len(light) > light_limit:
            lines.append(f"    ... and {len(light) - light_limit} more")
    lines.append("")
    lines.append("Run 'docs-lint images optimize' to convert to WebP")
    return "\n".join(lines)
