"""Render strategies for the two search response shapes."""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Protocol

from pydantic import BaseModel, ValidationError

from nlhelp.domain.models import EntriesResponse, SearchResponse, TextResponse
from nlhelp.page.dom import RenderTarget
from nlhelp.services.exceptions import MalformedResponseError
from nlhelp.utils.markup import is_block_fragment, markup_to_html


class RenderMode(str, Enum):
    ENTRIES = "entries"
    TEXT = "text"


class RenderStrategy(Protocol):
    mode: RenderMode

    def parse(self, payload: Any) -> SearchResponse: ...

    def render(self, target: RenderTarget, response: SearchResponse) -> None: ...


def _validate(model: type[BaseModel], payload: Any) -> Any:
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        raise MalformedResponseError(
            f"Response does not match {model.__name__}: {exc.error_count()} error(s)"
        ) from exc


class EntriesRenderer:
    """Replace the target with one formatted element per entry.

    Inline answers get a ``<p>``; answers that convert to several blocks get a
    ``<div>`` carrying the same class.
    """

    mode = RenderMode.ENTRIES

    def __init__(
        self,
        *,
        answer_class: str = "answer",
        converter: Callable[[str], str] = markup_to_html,
    ) -> None:
        self.answer_class = answer_class
        self._convert = converter

    def parse(self, payload: Any) -> EntriesResponse:
        return _validate(EntriesResponse, payload)

    def render(self, target: RenderTarget, response: EntriesResponse) -> None:
        target.clear()
        for entry in response.entries:
            html = self._convert(entry.answer)
            # Multi-block answers cannot nest inside <p>.
            tag_name = "div" if is_block_fragment(html) else "p"
            target.append_html(tag_name, html, css_class=self.answer_class)


class TextRenderer:
    """Replace the target's text content with the plain-text answer."""

    mode = RenderMode.TEXT

    def parse(self, payload: Any) -> TextResponse:
        return _validate(TextResponse, payload)

    def render(self, target: RenderTarget, response: TextResponse) -> None:
        target.set_text(response.text)


def build_renderer(mode: RenderMode | str, *, answer_class: str = "answer") -> RenderStrategy:
    mode = RenderMode(mode)
    if mode is RenderMode.ENTRIES:
        return EntriesRenderer(answer_class=answer_class)
    return TextRenderer()


__all__ = [
    "EntriesRenderer",
    "RenderMode",
    "RenderStrategy",
    "TextRenderer",
    "build_renderer",
]
