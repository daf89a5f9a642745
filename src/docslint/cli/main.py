from __future__ import annotations

import argparse
import sys

from .. import __version__
from ..checks.registry import list_checks
from ..checks.report import has_errors, render_json, render_text
from ..checks.runner import build_context, run_checks, select_checks
from ..config import load_config
from ..core.context import RunContext
from ..core.logging import log_event
from ..errors import ScriptError
from ..exit_codes import ERR_INTERNAL, ERR_LINT, OK
from ..images.command import configure_images_parser, run_images_command
from ..install.hooks import install_pre_push_hook
from ..og.command import configure_og_parser, run_og_command
from .output import render_check_list, render_error, render_header


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="docs-lint",
        description="Lint a markdown documentation tree. Without a sub-command every enabled check runs.",
    )
    p.add_argument("--version", action="version", version=f"docs-lint {__version__}")
    p.add_argument("--check", metavar="ID", help="run a single check")
    p.add_argument("--list", action="store_true", help="list available checks")
    p.add_argument("--json", action="store_true", help="emit JSON output")
    p.add_argument("--install-hook", action="store_true", help="install a pre-push git hook")
    p.add_argument("--root", help="repository root (default: current directory)")
    vg = p.add_mutually_exclusive_group()
    vg.add_argument("--verbose", action="store_true", help="show every issue and check timings")
    vg.add_argument("--quiet", action="store_true", help="suppress log events")
    sub = p.add_subparsers(dest="cmd")
    configure_images_parser(sub)
    configure_og_parser(sub)
    return p


def run_lint(ctx: RunContext, ns: argparse.Namespace) -> int:
    config = load_config(ctx.repo_root)
    checks = select_checks(list_checks(), config, ns.check)
    check_ctx = build_context(ctx.repo_root, config)
    if not ctx.log_json:
        print(render_header(str(ctx.repo_root), config.docs_dir, len(check_ctx.files)))
    log_event(ctx, "debug", "lint", "context", files=len(check_ctx.files), checks=len(checks))
    results = run_checks(checks, check_ctx)
    for result in results:
        log_event(ctx, "debug", "lint", "check_done", check=result.check_id, issues=len(result.issues), duration_ms=result.duration_ms)
    if ctx.log_json:
        print(render_json(results))
    else:
        print(render_text(results, verbose=ctx.verbose))
    failed = has_errors(results)
    log_event(ctx, "info", "lint", "finish", status="fail" if failed else "ok", checks=len(results))
    return ERR_LINT if failed else OK


def main(argv: list[str] | None = None) -> int:
    ns = build_parser().parse_args(argv)
    ctx = RunContext.from_args(ns.root, "json" if ns.json else "text", ns.verbose, ns.quiet)
    try:
        log_event(ctx, "info", "cli", "start", cmd=ns.cmd or "lint", fmt=ctx.output_format)
        if ns.cmd == "images":
            return run_images_command(ctx, ns)
        if ns.cmd == "og":
            return run_og_command(ctx, ns)
        if ns.list:
            print(render_check_list(list_checks(), verbose=ctx.verbose))
            return OK
        if ns.install_hook:
            hook_path = install_pre_push_hook(ctx.repo_root)
            print(f"Installed pre-push hook at {hook_path.relative_to(ctx.repo_root).as_posix()}")
            return OK
        return run_lint(ctx, ns)
    except ScriptError as exc:
        print(render_error(as_json=ctx.log_json, message=str(exc), code=exc.code, kind=exc.kind), file=sys.stderr)
        return exc.code
    except Exception as exc:  # pragma: no cover
        print(render_error(as_json=ctx.log_json, message=f"internal error: {exc}", code=ERR_INTERNAL), file=sys.stderr)
        return ERR_INTERNAL


def entrypoint() -> None:
    raise SystemExit(main())


if __name__ == "__main__":
    entrypoint()
