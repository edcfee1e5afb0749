"""Client for the help page's server-side search endpoint."""

from __future__ import annotations

import asyncio
from typing import Any, Callable

import httpx

from nlhelp.config import SearchEndpointSettings
from nlhelp.services.exceptions import MalformedResponseError, SearchError, SearchRequestError

ERROR_BODY_CHAR_LIMIT = 500

SuccessCallback = Callable[[dict[str, Any]], None]
FailureCallback = Callable[[SearchError], None]


class SearchClient:
    """Issue ``GET <path>?q=<query>`` and decode the JSON body.

    Requests are never retried or cancelled here. With no timeout configured a
    stalled endpoint keeps the request pending for as long as the loop runs.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        settings: SearchEndpointSettings | None = None,
    ) -> None:
        self._client = http_client
        self._settings = settings or SearchEndpointSettings()

    @property
    def path(self) -> str:
        return self._settings.path

    async def fetch(self, query: str) -> dict[str, Any]:
        try:
            response = await self._client.get(
                self._settings.path,
                params={"q": query},
                timeout=self._settings.request_timeout_seconds,
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            detail = exc.response.text[:ERROR_BODY_CHAR_LIMIT]
            raise SearchRequestError(
                f"Search request failed ({exc.response.status_code}): {detail}"
            ) from exc
        except httpx.RequestError as exc:
            raise SearchRequestError(f"Search request failed: {exc!r}") from exc

        try:
            data = response.json()
        except ValueError as exc:
            raise MalformedResponseError("Search response is not valid JSON") from exc
        if not isinstance(data, dict):
            raise MalformedResponseError(
                f"Search response must be a JSON object, got {type(data).__name__}"
            )
        return data

    def request(
        self,
        query: str,
        on_success: SuccessCallback,
        on_failure: FailureCallback,
    ) -> asyncio.Task[None]:
        """Schedule a fetch on the running loop and deliver the outcome to a callback."""

        async def _run() -> None:
            try:
                payload = await self.fetch(query)
            except SearchError as exc:
                on_failure(exc)
                return
            on_success(payload)

        return asyncio.get_running_loop().create_task(_run(), name=f"search:{query}")


__all__ = ["SearchClient"]
