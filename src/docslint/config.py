"""Loading of ``docs-lint.yaml`` with defaults for every absent field."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

import yaml

from .checks.model import Issue
from .core.yaml_utils import load_yaml_text, yaml_error_line, yaml_error_reason

CONFIG_FILENAME = "docs-lint.yaml"

DEFAULT_DOCS_DIR = "docs"
DEFAULT_ASSETS_DIR = "assets"
DEFAULT_SUMMARY = "SUMMARY.md"
DEFAULT_REDIRECTS = "redirects.yaml"
DEFAULT_EXCLUDE: tuple[str, ...] = ("deprecated",)
DEFAULT_WARN_ONLY: tuple[str, ...] = ("image-alt", "orphan-pages")

_RESERVED_CHECK_KEYS = frozenset({"disable", "warn_only"})


@dataclass(frozen=True)
class OgConfig:
    brand: str = "Docs"
    color: str = "#D95640"
    logo: str | None = None
    font: str | None = None
    footer: str = ""


@dataclass(frozen=True)
class Config:
    docs_dir: str = DEFAULT_DOCS_DIR
    assets_dir: str = DEFAULT_ASSETS_DIR
    summary: str = DEFAULT_SUMMARY
    redirects: str = DEFAULT_REDIRECTS
    exclude: tuple[str, ...] = DEFAULT_EXCLUDE
    disable: tuple[str, ...] = ()
    warn_only: tuple[str, ...] = DEFAULT_WARN_ONLY
    check_settings: Mapping[str, Any] = field(default_factory=dict)
    og: OgConfig = field(default_factory=OgConfig)
    problems: tuple[Issue, ...] = ()

    def check_options(self, check_id: str) -> dict[str, Any]:
        raw = self.check_settings.get(check_id)
        return dict(raw) if isinstance(raw, Mapping) else {}


def _string(data: Mapping[str, Any], key: str, default: str, problems: list[Issue]) -> str:
    value = data.get(key)
    if value is None:
        return default
    if not isinstance(value, str) or not value.strip():
        problems.append(Issue(file=CONFIG_FILENAME, message=f"`{key}` must be a non-empty string"))
        return default
    return value.strip()


def _string_list(data: Mapping[str, Any], key: str, default: tuple[str, ...], problems: list[Issue]) -> tuple[str, ...]:
    value = data.get(key)
    if value is None:
        return default
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        problems.append(Issue(file=CONFIG_FILENAME, message=f"`{key}` must be a list of strings"))
        return default
    return tuple(item.strip() for item in value if item.strip())


def _og_config(value: Any, problems: list[Issue]) -> OgConfig:
    if value is None:
        return OgConfig()
    if not isinstance(value, Mapping):
        problems.append(Issue(file=CONFIG_FILENAME, message="`og` must be a mapping"))
        return OgConfig()
    defaults = OgConfig()
    logo = value.get("logo")
    font = value.get("font")
    return OgConfig(
        brand=_string(value, "brand", defaults.brand, problems),
        color=str(value.get("color") or defaults.color),
        logo=str(logo) if logo else None,
        font=str(font) if font else None,
        footer=str(value.get("footer") or defaults.footer),
    )


def parse_config(text: str) -> Config:
    problems: list[Issue] = []
    try:
        data = load_yaml_text(text)
    except yaml.YAMLError as exc:
        line = yaml_error_line(exc)
        problems.append(
            Issue(
                file=CONFIG_FILENAME,
                line=None if line is None else line + 1,
                message=f"Invalid YAML in config: {yaml_error_reason(exc)}",
            )
        )
        return Config(problems=tuple(problems))
    if data is None:
        return Config()
    if not isinstance(data, Mapping):
        return Config(problems=(Issue(file=CONFIG_FILENAME, message="config root must be a mapping"),))

    checks = data.get("checks")
    if checks is None:
        checks = {}
    elif not isinstance(checks, Mapping):
        problems.append(Issue(file=CONFIG_FILENAME, message="`checks` must be a mapping"))
        checks = {}

    return Config(
        docs_dir=_string(data, "docs_dir", DEFAULT_DOCS_DIR, problems),
        assets_dir=_string(data, "assets_dir", DEFAULT_ASSETS_DIR, problems),
        summary=_string(data, "summary", DEFAULT_SUMMARY, problems),
        redirects=_string(data, "redirects", DEFAULT_REDIRECTS, problems),
        exclude=_string_list(data, "exclude", DEFAULT_EXCLUDE, problems),
        disable=_string_list(checks, "disable", (), problems),
        warn_only=_string_list(checks, "warn_only", DEFAULT_WARN_ONLY, problems),
        check_settings={str(k): v for k, v in checks.items() if k not in _RESERVED_CHECK_KEYS},
        og=_og_config(data.get("og"), problems),
        problems=tuple(problems),
    )


def load_config(root: Path) -> Config:
    path = root / CONFIG_FILENAME
    if not path.is_file():
        return Config()
    return parse_config(path.read_text(encoding="utf-8", errors="ignore"))
