"""In-memory page document standing in for the browser DOM.

The controller only talks to the small surface defined here: a form that
dispatches submit events to its listeners, and a render target whose content
can be cleared, appended to or replaced with text. The backing tree is a
BeautifulSoup document, so any page markup parsed with ``html.parser`` can be
bound.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable

from bs4 import BeautifulSoup, Tag

from nlhelp.services.exceptions import PageElementNotFound

PARSER = "html.parser"


@dataclass(slots=True)
class SubmitEvent:
    form: Form
    default_prevented: bool = False

    def prevent_default(self) -> None:
        self.default_prevented = True


SubmitListener = Callable[[SubmitEvent], object]


@dataclass(slots=True)
class Navigation:
    method: str
    action: str
    params: dict[str, str] = field(default_factory=dict)


class RenderTarget:
    """Page region that receives rendered search output."""

    def __init__(self, page: Page, element: Tag) -> None:
        self._page = page
        self.element = element

    @property
    def children(self) -> list[Tag]:
        return [child for child in self.element.children if isinstance(child, Tag)]

    @property
    def text(self) -> str:
        return self.element.get_text()

    @property
    def inner_html(self) -> str:
        return self.element.decode_contents()

    def clear(self) -> None:
        self.element.clear()

    def append_html(self, tag_name: str, html: str, *, css_class: str | None = None) -> Tag:
        """Append a new ``tag_name`` element whose content is parsed from ``html``."""

        new_tag = self._page.soup.new_tag(tag_name)
        if css_class:
            new_tag["class"] = [css_class]
        fragment = BeautifulSoup(html, PARSER)
        for node in list(fragment.contents):
            new_tag.append(node.extract())
        self.element.append(new_tag)
        return new_tag

    def set_text(self, text: str) -> None:
        self.element.string = text


class Form:
    """Form element with submit dispatch."""

    def __init__(self, page: Page, element: Tag) -> None:
        self._page = page
        self.element = element
        self._listeners: list[SubmitListener] = []

    @property
    def listeners(self) -> tuple[SubmitListener, ...]:
        return tuple(self._listeners)

    def _input(self, name: str) -> Tag:
        field_tag = self.element.find(["input", "textarea"], attrs={"name": name})
        if field_tag is None:
            raise PageElementNotFound(f"Form has no input named {name!r}")
        return field_tag

    def has_input(self, name: str) -> bool:
        return self.element.find(["input", "textarea"], attrs={"name": name}) is not None

    def input_value(self, name: str) -> str:
        field_tag = self._input(name)
        if field_tag.name == "textarea":
            return field_tag.get_text()
        return field_tag.get("value", "")

    def set_input_value(self, name: str, value: str) -> None:
        field_tag = self._input(name)
        if field_tag.name == "textarea":
            field_tag.string = value
        else:
            field_tag["value"] = value

    def add_submit_listener(self, listener: SubmitListener) -> None:
        self._listeners.append(listener)

    def submit(self) -> SubmitEvent:
        """Dispatch a submit event; navigate unless a listener prevented it."""

        event = SubmitEvent(form=self)
        for listener in list(self._listeners):
            listener(event)
        if not event.default_prevented:
            self._page.navigate(self._navigation())
        return event

    def _navigation(self) -> Navigation:
        params = {}
        for field_tag in self.element.find_all(["input", "textarea"]):
            name = field_tag.get("name")
            if not name:
                continue
            if field_tag.name == "textarea":
                params[name] = field_tag.get_text()
            else:
                params[name] = field_tag.get("value", "")
        return Navigation(
            method=str(self.element.get("method", "get")).lower(),
            action=str(self.element.get("action", "")),
            params=params,
        )


class Page:
    """Parsed help page document."""

    def __init__(self, soup: BeautifulSoup) -> None:
        self.soup = soup
        self.navigations: list[Navigation] = []
        self._forms: dict[int, Form] = {}

    @classmethod
    def from_html(cls, html: str) -> Page:
        return cls(BeautifulSoup(html, PARSER))

    @classmethod
    def from_path(cls, path: str | Path) -> Page:
        return cls.from_html(Path(path).read_text(encoding="utf-8"))

    def select_one(self, selector: str) -> Tag | None:
        return self.soup.select_one(selector)

    def form(self, selector: str) -> Form:
        element = self.select_one(selector)
        if element is None or element.name != "form":
            raise PageElementNotFound(f"No form matches {selector!r}")
        # One Form wrapper per element so listeners accumulate on the same object.
        key = id(element)
        if key not in self._forms:
            self._forms[key] = Form(self, element)
        return self._forms[key]

    def target(self, selector: str) -> RenderTarget:
        element = self.select_one(selector)
        if element is None:
            raise PageElementNotFound(f"No element matches {selector!r}")
        return RenderTarget(self, element)

    def navigate(self, navigation: Navigation) -> None:
        self.navigations.append(navigation)

    def render(self) -> str:
        return str(self.soup)


__all__ = [
    "Form",
    "Navigation",
    "Page",
    "RenderTarget",
    "SubmitEvent",
    "SubmitListener",
]
