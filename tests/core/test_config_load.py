from __future__ import annotations

from pathlib import Path

from docslint.config import CONFIG_FILENAME, Config, OgConfig, load_config, parse_config


def test_missing_config_uses_defaults(tmp_path: Path) -> None:
    config = load_config(tmp_path)
    assert config == Config()
    assert config.docs_dir == "docs"
    assert config.exclude == ("deprecated",)
    assert config.warn_only == ("image-alt", "orphan-pages")
    assert config.og == OgConfig()
    assert config.problems == ()


def test_full_config_is_parsed() -> None:
    config = parse_config(
        """
docs_dir: content
assets_dir: static
summary: TOC.md
exclude: [old, drafts]
checks:
  disable: [redirects]
  warn_only: [broken-links]
  absolute-links:
    domains: [docs.example.com]
og:
  brand: Example
  color: "#112233"
  footer: Example Inc.
"""
    )
    assert config.docs_dir == "content"
    assert config.assets_dir == "static"
    assert config.summary == "TOC.md"
    assert config.redirects == "redirects.yaml"
    assert config.exclude == ("old", "drafts")
    assert config.disable == ("redirects",)
    assert config.warn_only == ("broken-links",)
    assert config.check_options("absolute-links") == {"domains": ["docs.example.com"]}
    assert config.check_options("broken-links") == {}
    assert config.og.brand == "Example"
    assert config.og.color == "#112233"
    assert config.og.footer == "Example Inc."
    assert config.problems == ()


def test_malformed_yaml_becomes_problem_with_defaults() -> None:
    config = parse_config("docs_dir: [unterminated\n")
    assert config.docs_dir == "docs"
    assert len(config.problems) == 1
    assert config.problems[0].file == CONFIG_FILENAME
    assert config.problems[0].message.startswith("Invalid YAML in config")


def test_wrong_types_keep_field_defaults() -> None:
    config = parse_config("docs_dir: [a]\nexclude: nope\nchecks: [x]\nog: 3\n")
    assert config.docs_dir == "docs"
    assert config.exclude == ("deprecated",)
    assert config.og == OgConfig()
    assert [issue.message for issue in config.problems] == [
        "`checks` must be a mapping",
        "`docs_dir` must be a non-empty string",
        "`exclude` must be a list of strings",
        "`og` must be a mapping",
    ]


def test_non_mapping_root() -> None:
    config = parse_config("- a\n- b\n")
    assert [issue.message for issue in config.problems] == ["config root must be a mapping"]


def test_impossible_date_becomes_problem() -> None:
    config = parse_config("docs_dir: content\nreleased: 2021-02-30\n")
    assert config.docs_dir == "docs"
    [problem] = config.problems
    assert problem.message.startswith("Invalid YAML in config: ")
    assert problem.line is None
