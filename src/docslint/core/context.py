from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Literal

OutputFormat = Literal["text", "json"]


@dataclass(frozen=True)
class RunContext:
    run_id: str
    repo_root: Path
    output_format: OutputFormat
    verbose: bool
    quiet: bool

    @property
    def log_json(self) -> bool:
        return self.output_format == "json"

    @classmethod
    def from_args(
        cls,
        root: str | None,
        output_format: OutputFormat = "text",
        verbose: bool = False,
        quiet: bool = False,
        run_id: str | None = None,
    ) -> "RunContext":
        repo_root = Path(root).resolve() if root else Path.cwd().resolve()
        default_run = f"docs-lint-{datetime.now(timezone.utc).strftime('%Y%m%d-%H%M%S')}"
        resolved_run_id = run_id or os.environ.get("DOCS_LINT_RUN_ID", default_run)
        return cls(
            run_id=resolved_run_id,
            repo_root=repo_root,
            output_format=output_format,
            verbose=verbose,
            quiet=quiet,
        )
