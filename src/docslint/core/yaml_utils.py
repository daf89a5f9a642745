from __future__ import annotations

from typing import Any

import yaml


def load_yaml_text(text: str) -> Any:
    """Parse YAML with ``safe_load``; every parse failure surfaces as ``yaml.YAMLError``.

    The timestamp constructor raises plain ``ValueError`` for impossible dates
    such as ``2021-02-30``.
    """
    try:
        return yaml.safe_load(text)
    except ValueError as exc:
        raise yaml.YAMLError(str(exc) or exc.__class__.__name__) from exc


def yaml_error_line(exc: yaml.YAMLError) -> int | None:
    """0-based line of the problem mark, when PyYAML reports one."""
    mark = getattr(exc, "problem_mark", None) or getattr(exc, "context_mark", None)
    if mark is None:
        return None
    return int(mark.line)


def yaml_error_reason(exc: yaml.YAMLError) -> str:
    problem = getattr(exc, "problem", None)
    if problem:
        return str(problem)
    return str(exc).splitlines()[0] if str(exc) else exc.__class__.__name__
