from __future__ import annotations

import argparse

from ..config import load_config
from ..core.context import RunContext
from ..core.logging import log_event
from ..exit_codes import ERR_LINT, ERR_USAGE, OK
from .generate import generate_og_images


def configure_og_parser(sub: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    p = sub.add_parser("og", help="social preview card generation")
    p_sub = p.add_subparsers(dest="og_cmd", required=True)
    generate = p_sub.add_parser("generate", help="render a card for every navigation page")
    generate.add_argument("--dry-run", action="store_true", help="show what would be generated")
    generate.add_argument("--diff", action="store_true", help="only pages changed since the previous commit")


def run_og_command(ctx: RunContext, ns: argparse.Namespace) -> int:
    if ns.og_cmd != "generate":
        return ERR_USAGE
    config = load_config(ctx.repo_root)
    log_event(ctx, "info", "og", "generate_start", dry_run=ns.dry_run, diff=ns.diff)
    report = generate_og_images(ctx, config, dry_run=ns.dry_run, diff_only=ns.diff)
    if not report.planned:
        print("No changed docs since last commit" if ns.diff else f"No {config.summary} entries found")
        return OK
    if ns.dry_run:
        for card in report.planned:
            print(f"  Would generate: {card.out_path}")
            print(f"    Title: {card.title}")
        print(f"Done: {len(report.planned)} OG image(s) would be generated")
        return OK
    for card in report.generated:
        print(f"  {card.slug}.png ({card.title})")
    print(f"Done: {len(report.generated)} OG image(s) generated")
    log_event(ctx, "info", "og", "generate_finish", generated=len(report.generated), failed=len(report.failed))
    return ERR_LINT if report.failed else OK
