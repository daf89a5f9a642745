from __future__ import annotations

import argparse

from ..config import load_config
from ..core.context import RunContext
from ..core.logging import log_event
from ..exit_codes import ERR_LINT, ERR_USAGE, OK
from .optimize import OptimizeOptions, optimize_images
from .scan import find_unoptimized, format_size, render_unoptimized


def configure_images_parser(sub: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    p = sub.add_parser("images", help="audit and convert raster images")
    p_sub = p.add_subparsers(dest="images_cmd", required=True)
    p_sub.add_parser("check", help="report heavy or non-WebP images")
    optimize = p_sub.add_parser("optimize", help="convert images to WebP and update references")
    optimize.add_argument("--dry-run", action="store_true", help="show planned conversions without writing")
    optimize.add_argument("--keep-originals", action="store_true", help="keep source files after conversion")
    optimize.add_argument("--quality", type=int, default=85, help="WebP quality (default: 85)")
    optimize.add_argument("--max-width", type=int, default=2000, help="max width in px (default: 2000)")


def run_images_command(ctx: RunContext, ns: argparse.Namespace) -> int:
    config = load_config(ctx.repo_root)
    assets_dir = ctx.repo_root / config.assets_dir
    docs_dir = ctx.repo_root / config.docs_dir
    if ns.images_cmd == "check":
        images = find_unoptimized(assets_dir)
        print(render_unoptimized(images))
        return OK
    if ns.images_cmd != "optimize":
        return ERR_USAGE

    options = OptimizeOptions(
        dry_run=ns.dry_run,
        keep_originals=ns.keep_originals,
        quality=ns.quality,
        max_width=ns.max_width,
    )
    log_event(ctx, "info", "images", "optimize_start", assets_dir=assets_dir, dry_run=options.dry_run)
    report = optimize_images(ctx, assets_dir, docs_dir, options)
    if not report.renames and not report.failed:
        print("No images to optimize")
        return OK
    if options.dry_run:
        for rename in report.renames:
            print(f"  Would convert: {rename.source} -> {rename.dest}")
        print(f"Would update references in {config.docs_dir}/")
        return OK
    for row in report.converted:
        print(
            f"  {row.source} -> {row.dest} "
            f"({format_size(row.original_size)} -> {format_size(row.new_size)}, -{row.savings_pct}%)"
        )
    if report.files_updated:
        print(f"  Updated references in {report.files_updated} file(s)")
    if report.converted:
        total_pct = round((1 - report.new_bytes / report.original_bytes) * 100) if report.original_bytes else 0
        print(
            f"Done: {len(report.converted)} images converted "
            f"({format_size(report.original_bytes)} -> {format_size(report.new_bytes)}, -{total_pct}%)"
        )
    log_event(ctx, "info", "images", "optimize_finish", converted=len(report.converted), failed=len(report.failed))
    return ERR_LINT if report.failed else OK
