from __future__ import annotations

from docslint.core.markdown import (
    content_lines,
    extract_frontmatter,
    extract_h1,
    extract_img_tags,
    heading_level,
    is_h1,
    walk_lines,
)


def test_walk_lines_reports_fence_state_after_each_line() -> None:
    records = list(walk_lines("a\n```py\ncode\n```\nb"))
    assert [(r.line_num, r.in_fence) for r in records] == [(1, False), (2, True), (3, True), (4, False), (5, False)]


def test_content_lines_skip_fences_and_fenced_text() -> None:
    texts = [r.text for r in content_lines("a\r\n  ```\n# hidden\n  ```\nb\n")]
    assert texts == ["a", "b", ""]


def test_h1_detection() -> None:
    assert is_h1("# Title")
    assert not is_h1("## Title")
    assert not is_h1("#Title")
    assert not is_h1(" # Title")


def test_extract_h1_ignores_fenced_headings() -> None:
    assert extract_h1("```\n# Fenced\n```\n# Real Title  \n") == "Real Title"
    assert extract_h1("## only h2\n") is None


def test_extract_h1_returns_first_heading_even_when_blank() -> None:
    assert extract_h1("#   \n# Later\n") == ""
    assert extract_h1("# First\n# Second\n") == "First"


def test_heading_level() -> None:
    assert heading_level("### three") == 3
    assert heading_level("####### seven") == 0
    assert heading_level("plain") == 0


def test_extract_frontmatter_requires_leading_block() -> None:
    fm = extract_frontmatter("---\ntitle: x\n---\n# Body\n")
    assert fm is not None
    assert fm.text == "title: x"
    assert fm.offset == 2
    assert extract_frontmatter("\n---\ntitle: x\n---\n") is None
    assert extract_frontmatter("---\ntitle: x\n") is None


def test_img_tags_span_lines_and_skip_inline_code() -> None:
    content = "intro\n<img\n  src='a.png'>\nuse `<img src='b.png'>` in docs\n```\n<img src='c.png'>\n```\n"
    tags = extract_img_tags(content)
    assert len(tags) == 1
    assert tags[0].line_num == 2
    assert "a.png" in tags[0].tag
