from __future__ import annotations

import yaml

from ...core.markdown import extract_frontmatter
from ...core.yaml_utils import load_yaml_text, yaml_error_line, yaml_error_reason
from ..model import CheckContext, CheckOutcome, Issue


def check_frontmatter_yaml(ctx: CheckContext) -> CheckOutcome:
    issues: list[Issue] = []
    for file in ctx.files:
        content = ctx.read(file)
        if not content:
            continue
        fm = extract_frontmatter(content)
        if fm is None:
            continue
        try:
            load_yaml_text(fm.text)
        except yaml.YAMLError as exc:
            line = yaml_error_line(exc)
            issues.append(
                Issue(
                    file=file,
                    line=None if line is None else line + fm.offset,
                    message=f"Invalid YAML frontmatter: {yaml_error_reason(exc)}",
                )
            )
    return CheckOutcome(issues=tuple(issues), files_checked=len(ctx.files))
