from __future__ import annotations

from pathlib import Path

import pytest
from PIL import Image

from docslint.core.context import RunContext
from docslint.images.optimize import OptimizeOptions, optimize_images, webp_name
from docslint.images.refs import Rename, encode_basename, rewrite_refs, update_refs_in_dir
from docslint.images.scan import find_unoptimized, format_size
from helpers import write_tree


@pytest.fixture
def image_repo(tmp_path: Path) -> Path:
    assets = tmp_path / "assets"
    (assets / "shots").mkdir(parents=True)
    Image.new("RGB", (3000, 300), "#336699").save(assets / "shots" / "wide.png")
    Image.new("RGB", (40, 20), "#996633").save(assets / "photo.JPG", format="JPEG")
    Image.new("P", (10, 10)).save(assets / "anim.gif")
    write_tree(
        tmp_path,
        {
            "docs/page.md": "![Wide](../assets/shots/wide.png)\n![Photo](../assets/photo.JPG)\n",
            "docs/other.md": "# Nothing here\n",
        },
    )
    return tmp_path


def _ctx(root: Path) -> RunContext:
    return RunContext.from_args(str(root), quiet=True)


def test_scan_flags_heavy_and_non_webp(tmp_path: Path) -> None:
    write_tree(tmp_path, {"assets/small.png": "x" * 10, "assets/notes.txt": "skip"})
    (tmp_path / "assets/big.jpeg").write_bytes(b"\0" * (600 * 1024))
    images = find_unoptimized(tmp_path / "assets")
    assert [(image.path, image.heavy, image.reason) for image in images] == [
        ("big.jpeg", True, "600KB (>500KB)"),
        ("small.png", False, "Not WebP"),
    ]
    assert find_unoptimized(tmp_path / "missing") == []


def test_format_size() -> None:
    assert format_size(512) == "512B"
    assert format_size(2048) == "2KB"
    assert format_size(3 * 1024 * 1024 // 2) == "1.5MB"


def test_optimize_converts_resizes_and_rewrites_refs(image_repo: Path) -> None:
    assets = image_repo / "assets"
    report = optimize_images(_ctx(image_repo), assets, image_repo / "docs", OptimizeOptions())
    assert sorted(row.dest for row in report.converted) == ["anim.webp", "photo.webp", "shots/wide.webp"]
    assert report.failed == []
    assert report.files_updated == 1
    assert not (assets / "shots/wide.png").exists()
    with Image.open(assets / "shots/wide.webp") as converted:
        assert converted.format == "WEBP"
        assert converted.size == (2000, 200)
    page = (image_repo / "docs/page.md").read_text(encoding="utf-8")
    assert page == "![Wide](../assets/shots/wide.webp)\n![Photo](../assets/photo.webp)\n"


def test_optimize_is_idempotent(image_repo: Path) -> None:
    assets = image_repo / "assets"
    optimize_images(_ctx(image_repo), assets, image_repo / "docs", OptimizeOptions())
    second = optimize_images(_ctx(image_repo), assets, image_repo / "docs", OptimizeOptions())
    assert second.renames == []
    assert second.converted == []
    assert second.files_updated == 0


def test_keep_originals_and_dry_run(image_repo: Path) -> None:
    assets = image_repo / "assets"
    dry = optimize_images(_ctx(image_repo), assets, image_repo / "docs", OptimizeOptions(dry_run=True))
    assert [rename.dest for rename in dry.renames] == ["anim.webp", "photo.webp", "shots/wide.webp"]
    assert not list(assets.rglob("*.webp"))
    assert "wide.png" in (image_repo / "docs/page.md").read_text(encoding="utf-8")

    kept = optimize_images(_ctx(image_repo), assets, image_repo / "docs", OptimizeOptions(keep_originals=True, max_width=4000))
    assert len(kept.converted) == 3
    assert (assets / "shots/wide.png").exists()
    with Image.open(assets / "shots/wide.webp") as converted:
        assert converted.size == (3000, 300)


def test_unreadable_image_is_counted_and_skipped(image_repo: Path) -> None:
    assets = image_repo / "assets"
    (assets / "broken.png").write_bytes(b"not an image")
    report = optimize_images(_ctx(image_repo), assets, image_repo / "docs", OptimizeOptions())
    assert report.failed == ["broken.png"]
    assert (assets / "broken.png").exists()
    assert len(report.converted) == 3


def test_webp_name() -> None:
    assert webp_name("a/b/shot.final.PNG") == "a/b/shot.final.webp"


def test_rewrite_refs_handles_encoded_names(tmp_path: Path) -> None:
    renames = [Rename(source="img/café shot.png", dest="img/café shot.webp")]
    assert encode_basename("café shot.png") == "caf%C3%A9 shot.png"
    content = "![a](img/café shot.png)\n![b](img/caf%C3%A9 shot.png)\n"
    assert rewrite_refs(content, renames) == "![a](img/café shot.webp)\n![b](img/caf%C3%A9 shot.webp)\n"

    write_tree(tmp_path, {"docs/a.md": content, "docs/b.md": "no images\n"})
    assert update_refs_in_dir(tmp_path / "docs", renames) == 1
    assert update_refs_in_dir(tmp_path / "docs", []) == 0
