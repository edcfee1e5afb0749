"""Tests for logging configuration and the async entrypoint."""

from __future__ import annotations

import httpx
import pytest
import structlog

from nlhelp import main as main_module
from nlhelp.config import NLHelpSettings, PageSettings, SearchEndpointSettings
from nlhelp.logging import configure_logging


def test_configure_logging_outputs_json(capsys):
    configure_logging("info")
    logger = structlog.get_logger()
    logger.info("unit-test", foo="bar")
    out = capsys.readouterr().out
    assert "unit-test" in out
    assert "foo" in out


def test_configure_logging_rejects_unknown_level():
    with pytest.raises(ValueError):
        configure_logging("chatty")


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "mode, payload, expected",
    [
        ("entries", {"entries": [{"answer": "Use **Settings**"}]}, '<p class="answer">Use <strong>Settings</strong></p>'),
        ("text", {"text": "Open Settings"}, "Open Settings"),
    ],
)
async def test_main_renders_query_from_argv(monkeypatch, capsys, recorder, mode, payload, expected):
    requested: list[httpx.URL] = []

    async def handler(request: httpx.Request) -> httpx.Response:
        requested.append(request.url)
        return httpx.Response(200, json=payload)

    real_client = httpx.AsyncClient

    def fake_client(**kwargs):
        return real_client(transport=httpx.MockTransport(handler), **kwargs)

    settings = NLHelpSettings(
        render_mode=mode,
        search=SearchEndpointSettings(base_url="http://docs.example"),
        page=PageSettings(),
    )
    configured: list[str] = []
    monkeypatch.setattr(main_module, "get_settings", lambda: settings)
    monkeypatch.setattr(main_module, "configure_logging", configured.append)
    monkeypatch.setattr(main_module, "logger", recorder)
    monkeypatch.setattr(main_module.httpx, "AsyncClient", fake_client)

    output = await main_module.main(["change", "password"])

    assert configured == ["INFO"]
    assert len(requested) == 1
    assert requested[0].host == "docs.example"
    assert requested[0].path == "/search"
    assert requested[0].params["q"] == "change password"
    assert output == expected
    assert expected in capsys.readouterr().out


def test_configure_logging_renders_exceptions(capsys):
    configure_logging()
    assert structlog.dev.set_exc_info in structlog.get_config()["processors"]

    logger = structlog.get_logger()
    try:
        raise ValueError("render failed")
    except ValueError:
        logger.exception("unit-test-exception")
    out = capsys.readouterr().out
    assert "unit-test-exception" in out
    assert "ValueError: render failed" in out
