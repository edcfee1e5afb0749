"""Search form controller: intercept submit, query the endpoint, render results."""

from __future__ import annotations

import asyncio
from typing import Any

from nlhelp.config import PageSettings
from nlhelp.domain.models import Query, SearchResponse
from nlhelp.logging import logger
from nlhelp.page.dom import Form, Page, RenderTarget, SubmitEvent
from nlhelp.page.render import RenderMode, RenderStrategy, build_renderer
from nlhelp.services.exceptions import PageElementNotFound, SearchError
from nlhelp.services.search import SearchClient


class SearchFormController:
    """Bind a search form to a render target without page navigation.

    The render mode is fixed at construction time. Each non-empty submission
    schedules one request; concurrent requests are neither coalesced nor
    cancelled, so whichever resolves last owns the target.
    """

    def __init__(
        self,
        page: Page,
        client: SearchClient,
        *,
        mode: RenderMode | str = RenderMode.ENTRIES,
        settings: PageSettings | None = None,
        form_selector: str | None = None,
        target_selector: str | None = None,
    ) -> None:
        self.settings = settings or PageSettings()
        self.page = page
        self.client = client
        self.renderer: RenderStrategy = build_renderer(mode, answer_class=self.settings.answer_class)
        self.form_selector = form_selector or self.settings.form_selector
        self.target_selector = target_selector or self._default_target_selector()
        self.input_name = self.settings.input_name
        self.form: Form | None = None
        self.target: RenderTarget | None = None
        self._pending: set[asyncio.Task[None]] = set()

    @property
    def mode(self) -> RenderMode:
        return self.renderer.mode

    @property
    def pending(self) -> frozenset[asyncio.Task[None]]:
        return frozenset(self._pending)

    def _default_target_selector(self) -> str:
        if RenderMode(self.renderer.mode) is RenderMode.TEXT:
            return self.settings.text_target_selector
        return self.settings.entries_target_selector

    def bind(self) -> SearchFormController:
        """Register the submit handler. Calling this twice binds the handler twice."""

        form = self.page.form(self.form_selector)
        if not form.has_input(self.input_name):
            raise PageElementNotFound(
                f"Form {self.form_selector!r} has no input named {self.input_name!r}"
            )
        self.target = self.page.target(self.target_selector)
        self.form = form
        form.add_submit_listener(self.handle_submit)
        logger.info(
            "search_form_bound",
            form=self.form_selector,
            target=self.target_selector,
            mode=self.mode.value,
        )
        return self

    def handle_submit(self, event: SubmitEvent) -> asyncio.Task[None] | None:
        event.prevent_default()

        form = self.form or event.form
        query = Query.from_input(form.input_value(self.input_name))
        if query is None:
            logger.debug("search_query_empty", form=self.form_selector)
            return None

        logger.info("search_submitted", query=query.text, in_flight=len(self._pending))
        task = self.client.request(
            query.text,
            on_success=lambda payload: self._handle_payload(query, payload),
            on_failure=lambda error: self.on_request_failure(error, query=query),
        )
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    def _handle_payload(self, query: Query, payload: Any) -> None:
        try:
            response = self.renderer.parse(payload)
        except SearchError as exc:
            self.on_request_failure(exc, query=query)
            return
        self.on_request_success(response, query=query)

    def on_request_success(self, response: SearchResponse, *, query: Query | None = None) -> None:
        if self.target is None:
            raise RuntimeError("SearchFormController.bind() must run before rendering")
        self.renderer.render(self.target, response)
        logger.info(
            "search_rendered",
            query=query.text if query else None,
            mode=self.mode.value,
            children=len(self.target.children),
        )

    def on_request_failure(self, error: BaseException, *, query: Query | None = None) -> None:
        logger.error(
            "search_request_failed",
            query=query.text if query else None,
            error_type=error.__class__.__name__,
            error=str(error),
        )

    async def wait_idle(self) -> None:
        """Wait until every request issued so far has resolved."""

        while self._pending:
            await asyncio.gather(*self._pending)


__all__ = ["SearchFormController"]
