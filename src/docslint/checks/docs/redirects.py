from __future__ import annotations

from typing import Mapping

import yaml

from ...core.files import docs_path, read_text
from ...core.resolve import MARKDOWN_SUFFIX
from ...core.yaml_utils import load_yaml_text, yaml_error_line, yaml_error_reason
from ..model import CheckContext, CheckOutcome, Issue


def check_redirects(ctx: CheckContext) -> CheckOutcome:
    content = read_text(ctx.redirects_path)
    if not content:
        return CheckOutcome()
    name = ctx.config.redirects
    try:
        data = load_yaml_text(content)
    except yaml.YAMLError as exc:
        line = yaml_error_line(exc)
        issue = Issue(
            file=name,
            line=None if line is None else line + 1,
            message="Invalid YAML in redirects file",
            detail=yaml_error_reason(exc),
        )
        return CheckOutcome(issues=(issue,), files_checked=1)

    redirects = data.get("redirects") if isinstance(data, Mapping) else None
    if redirects is None:
        return CheckOutcome()
    if not isinstance(redirects, Mapping):
        return CheckOutcome(issues=(Issue(file=name, message="`redirects` must be a mapping of source to target"),), files_checked=1)

    issues: list[Issue] = []
    for target in redirects.values():
        target_str = str(target)
        if not target_str.endswith(MARKDOWN_SUFFIX):
            continue
        if not docs_path(ctx.docs_dir, target_str).is_file():
            issues.append(Issue(file=name, message=f"Redirect target missing: {target_str}"))
    return CheckOutcome(issues=tuple(issues), files_checked=len(redirects))
