"""Tests for Markdown to HTML conversion of search answers."""

from __future__ import annotations

import pytest

from nlhelp.utils import markup


def test_bold_markup_is_converted_without_paragraph_wrapper():
    assert markup.markup_to_html("**bold**") == "<strong>bold</strong>"


def test_multiple_paragraphs_keep_their_wrappers():
    html = markup.markup_to_html("First\n\nSecond")
    assert html == "<p>First</p>\n<p>Second</p>"


def test_raw_html_is_escaped():
    html = markup.markup_to_html("<script>alert(1)</script> and <b>tag</b>")
    assert "<script>" not in html
    assert "<b>" not in html
    assert "&lt;script&gt;" in html


def test_fenced_code_block_is_rendered():
    html = markup.markup_to_html("```\nprint('hi')\n```")
    assert html.startswith("<pre><code>")


def test_empty_answer_renders_empty_string():
    assert markup.markup_to_html("") == ""


def test_unwrap_single_paragraph_leaves_other_fragments_alone():
    assert markup.unwrap_single_paragraph("<ul>\n<li>a</li>\n</ul>") == "<ul>\n<li>a</li>\n</ul>"
    assert markup.unwrap_single_paragraph("<p>one</p>") == "one"


def test_script_scheme_links_lose_their_href():
    html = markup.markup_to_html("[click](javascript:alert(1))")
    assert "javascript:" not in html
    assert html == "<a>click</a>"


def test_script_scheme_images_lose_their_src():
    html = markup.markup_to_html("![logo](data:text/html;base64,PHNjcmlwdD4=)")
    assert "data:" not in html
    assert "src=" not in html
    assert 'alt="logo"' in html


def test_is_safe_url_ignores_case_and_control_characters():
    assert not markup.is_safe_url("JaVaScRiPt:alert(1)")
    assert not markup.is_safe_url("java\tscript:alert(1)")
    assert not markup.is_safe_url(" \x01javascript:alert(1)")
    assert not markup.is_safe_url("vbscript:msgbox(1)")
    assert markup.is_safe_url("HTTPS://example.com")
    assert markup.is_safe_url("docs/page.html")


@pytest.mark.parametrize(
    "source, expected_url",
    [
        ("[docs](https://example.com/help)", "https://example.com/help"),
        ("[plain](http://example.com)", "http://example.com"),
        ("[mail](mailto:help@example.com)", "mailto:help@example.com"),
        ("[reset](/help/reset-password)", "/help/reset-password"),
        ("[anchor](#billing)", "#billing"),
    ],
)
def test_safe_link_urls_are_kept(source, expected_url):
    assert f'href="{expected_url}"' in markup.markup_to_html(source)


def test_relative_image_src_is_kept():
    assert 'src="/static/shot.png"' in markup.markup_to_html("![shot](/static/shot.png)")


def test_is_block_fragment():
    assert markup.is_block_fragment("<p>a</p>\n<p>b</p>")
    assert markup.is_block_fragment("<pre><code>x\n</code></pre>")
    assert markup.is_block_fragment("<ul>\n<li>a</li>\n</ul>")
    assert not markup.is_block_fragment("<strong>bold</strong>")
    assert not markup.is_block_fragment("plain text")
    assert not markup.is_block_fragment("")
