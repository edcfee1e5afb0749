"""Shared fixtures for page, search client and controller tests."""

from __future__ import annotations

import pytest

from nlhelp.page.dom import Page

HELP_PAGE = """
<html>
  <body>
    <form id="searchForm" action="/search" method="get">
      <input type="text" name="q" value="">
    </form>
    <p class="answer">Previous answer</p>
    <div class="js-hits"><p class="answer">Previous hit</p></div>
  </body>
</html>
"""


class RecordingLogger:
    def __init__(self) -> None:
        self.records: list[tuple[str, str, dict]] = []

    def _record(self, level: str, event: str, **kwargs) -> None:
        self.records.append((level, event, kwargs))

    def debug(self, event: str, **kwargs) -> None:
        self._record("debug", event, **kwargs)

    def info(self, event: str, **kwargs) -> None:
        self._record("info", event, **kwargs)

    def warning(self, event: str, **kwargs) -> None:
        self._record("warning", event, **kwargs)

    def error(self, event: str, **kwargs) -> None:
        self._record("error", event, **kwargs)

    def events(self, level: str | None = None) -> list[str]:
        return [event for lvl, event, _ in self.records if level is None or lvl == level]


@pytest.fixture
def page() -> Page:
    return Page.from_html(HELP_PAGE)


@pytest.fixture
def recorder(monkeypatch) -> RecordingLogger:
    from nlhelp.page import controller as controller_module

    recording = RecordingLogger()
    monkeypatch.setattr(controller_module, "logger", recording)
    return recording
