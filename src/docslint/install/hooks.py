from __future__ import annotations

import stat
from pathlib import Path

from ..errors import ScriptError
from ..exit_codes import ERR_CONFIG

PRE_PUSH_HOOK = "#!/bin/sh\n# docs-lint pre-push hook\ndocs-lint || exit 1\n"


def hooks_dir(root: Path) -> Path:
    git_dir = root / ".git"
    if not git_dir.is_dir():
        raise ScriptError(f"not a git repository: {root}", ERR_CONFIG, "missing_git_dir")
    return git_dir / "hooks"


def install_pre_push_hook(root: Path) -> Path:
    """Write an executable pre-push hook running the linter; an existing hook is replaced."""
    target_dir = hooks_dir(root)
    target_dir.mkdir(parents=True, exist_ok=True)
    hook_path = target_dir / "pre-push"
    hook_path.write_text(PRE_PUSH_HOOK, encoding="utf-8")
    mode = hook_path.stat().st_mode
    hook_path.chmod(mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return hook_path
