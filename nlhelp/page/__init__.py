from nlhelp.page.controller import SearchFormController
from nlhelp.page.dom import Form, Page, RenderTarget, SubmitEvent
from nlhelp.page.render import EntriesRenderer, RenderMode, TextRenderer, build_renderer

__all__ = [
    "EntriesRenderer",
    "Form",
    "Page",
    "RenderMode",
    "RenderTarget",
    "SearchFormController",
    "SubmitEvent",
    "TextRenderer",
    "build_renderer",
]
