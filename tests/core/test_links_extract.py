from __future__ import annotations

from docslint.core.links import clean_href, extract_links, is_external, is_image_href, is_internal_doc_link


def test_extract_links_strips_title_and_fragment() -> None:
    links = extract_links('See [Guide](guide.md "The guide") and [Part](part.md#section)\n')
    assert [(link.text, link.href, link.line_num) for link in links] == [("Guide", "guide.md", 1), ("Part", "part.md", 1)]


def test_extract_links_marks_images_and_skips_fences() -> None:
    content = "![Logo](logo.png)\n```\n[fenced](x.md)\n```\n[after](y.md)\n"
    links = extract_links(content)
    assert [(link.href, link.is_image, link.line_num) for link in links] == [("logo.png", True, 1), ("y.md", False, 5)]


def test_clean_href() -> None:
    assert clean_href("page.md#top") == "page.md"
    assert clean_href("#top") == ""
    assert clean_href("page.md 'Title'") == "page.md"


def test_external_and_image_targets() -> None:
    for href in ("https://example.com", "http://x", "mailto:a@b.c", "ftp://host", "#anchor"):
        assert is_external(href)
    assert not is_external("docs/page.md")
    assert is_image_href("shot.PNG")
    assert not is_image_href("page.md")


def test_internal_doc_link_filter() -> None:
    links = extract_links("[a](a.md) [b](https://x.io) [c](pic.svg) ![d](d.md) [e](#top)\n")
    assert [link.href for link in links if is_internal_doc_link(link)] == ["a.md"]
