"""Application entrypoint."""

from __future__ import annotations

import asyncio
import sys
from typing import Sequence

import httpx

from nlhelp.config import get_settings
from nlhelp.logging import configure_logging, logger
from nlhelp.page.controller import SearchFormController
from nlhelp.page.dom import Page
from nlhelp.services.search import SearchClient


async def main(argv: Sequence[str] | None = None) -> str:
    settings = get_settings()
    configure_logging(settings.log_level)

    args = list(sys.argv[1:] if argv is None else argv)
    query = " ".join(args)

    page = Page.from_path(settings.page.resolved_path())
    logger.info(
        "nlhelp_starting",
        environment=settings.environment,
        mode=settings.render_mode,
        endpoint=str(settings.search.base_url),
    )

    async with httpx.AsyncClient(base_url=str(settings.search.base_url)) as http_client:
        client = SearchClient(http_client, settings=settings.search)
        controller = SearchFormController(
            page,
            client,
            mode=settings.render_mode,
            settings=settings.page,
        ).bind()
        controller.form.set_input_value(settings.page.input_name, query)
        controller.form.submit()
        await controller.wait_idle()

    output = controller.target.inner_html
    print(output)
    return output


def run() -> None:
    asyncio.run(main())


if __name__ == "__main__":
    run()
