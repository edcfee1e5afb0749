"""Markdown to insertion-safe HTML conversion for search answers."""

from __future__ import annotations

import re
from urllib.parse import urlsplit

import markdown
from markdown.treeprocessors import Treeprocessor

DEFAULT_EXTENSIONS: tuple[str, ...] = ("fenced_code", "sane_lists")
SAFE_URL_SCHEMES = frozenset({"", "http", "https", "mailto"})
URL_ATTRIBUTES = ("href", "src")
SINGLE_PARAGRAPH_RE = re.compile(r"\A<p>(?P<body>.*)</p>\Z", re.DOTALL)
BLOCK_START_RE = re.compile(
    r"\A<(?:p|div|pre|ul|ol|dl|blockquote|table|hr|h[1-6])\b", re.IGNORECASE
)
# Browsers ignore whitespace and control characters inside a URL scheme.
URL_IGNORED_CHARS_RE = re.compile(r"[\x00-\x20\x7f]+")


def is_safe_url(url: str) -> bool:
    normalized = URL_IGNORED_CHARS_RE.sub("", url or "")
    try:
        scheme = urlsplit(normalized).scheme
    except ValueError:
        return False
    return scheme.lower() in SAFE_URL_SCHEMES


class UnsafeUrlStripper(Treeprocessor):
    """Remove link and image URLs whose scheme is not on the allow list."""

    def run(self, root):
        for element in root.iter():
            for attribute in URL_ATTRIBUTES:
                value = element.get(attribute)
                if value is not None and not is_safe_url(value):
                    del element.attrib[attribute]
        return None


def _build_converter(extensions: tuple[str, ...]) -> markdown.Markdown:
    converter = markdown.Markdown(extensions=list(extensions), output_format="html")
    # Raw HTML in answers is rendered as text instead of being passed through.
    converter.preprocessors.deregister("html_block")
    converter.inlinePatterns.deregister("html")
    # After "inline" (20) has built links and images, before "prettify" (10).
    converter.treeprocessors.register(UnsafeUrlStripper(converter), "unsafe_urls", 15)
    return converter


def unwrap_single_paragraph(html: str) -> str:
    """Drop the outer ``<p>`` when the fragment is exactly one paragraph."""

    match = SINGLE_PARAGRAPH_RE.match(html)
    if match is None:
        return html
    body = match.group("body")
    if "<p>" in body:
        return html
    return body


def is_block_fragment(html: str) -> bool:
    """True when the fragment starts with a block element and cannot sit inside ``<p>``."""

    return BLOCK_START_RE.match(html.lstrip()) is not None


def markup_to_html(text: str, *, extensions: tuple[str, ...] = DEFAULT_EXTENSIONS) -> str:
    converter = _build_converter(extensions)
    html = converter.convert(text or "").strip()
    return unwrap_single_paragraph(html)


__all__ = [
    "DEFAULT_EXTENSIONS",
    "SAFE_URL_SCHEMES",
    "UnsafeUrlStripper",
    "is_block_fragment",
    "is_safe_url",
    "markup_to_html",
    "unwrap_single_paragraph",
]
