# SPDX-FileCopyrightText: 2024 Benedict Harcourt <ben.harcourt@harcourtprogramming.co.uk>
#
# SPDX-License-Identifier: BSD-2-Clause

from __future__ import annotations as _future_annotations

from collections.abc import Awaitable, Callable
from typing import Any

import asyncio
import logging
import signal

import aiohttp.web

from hypertext.host import current_document
from hypertext.serialise import Indent
from webapp.config import Settings
from webapp.responses import HTTPInternalServerError, HTTPNotFoundError, NodeResponse
from webapp.site import routes

Handler = Callable[[aiohttp.web.Request], Awaitable[Any]]

SETTINGS = aiohttp.web.AppKey("settings", Settings)

logger = logging.getLogger("webapp")


def node_middleware(indent: Indent = None) -> Any:
    """Serialise node trees returned by handlers; pass every other response through."""

    @aiohttp.web.middleware
    async def middleware(request: aiohttp.web.Request, handler: Handler) -> Any:
        response = await handler(request)

        if current_document().is_node(response):
            return NodeResponse(response, indent=indent)

        return response

    return middleware


@aiohttp.web.middleware
async def error_middleware(request: aiohttp.web.Request, handler: Handler) -> Any:
    try:
        return await handler(request)
    except (HTTPNotFoundError, HTTPInternalServerError) as response:
        return response
    except aiohttp.web.HTTPNotFound:
        return HTTPNotFoundError(request.path)
    except aiohttp.web.HTTPException:
        raise
    except Exception:
        logger.exception("Error in request", extra={"path": request.path})
        return HTTPInternalServerError()


def make_app(settings: Settings | None = None) -> aiohttp.web.Application:
    settings = settings or Settings()

    app = aiohttp.web.Application(
        middlewares=[error_middleware, node_middleware(settings.indent)],
    )
    app[SETTINGS] = settings
    app.add_routes(routes)
    return app


async def serve(
    app: aiohttp.web.Application,
    settings: Settings,
    stop: asyncio.Event | None = None,
) -> None:
    if stop is None:
        loop = asyncio.get_running_loop()
        stop = asyncio.Event()
        loop.add_signal_handler(signal.SIGINT, stop.set)
        loop.add_signal_handler(signal.SIGTERM, stop.set)

    runner = aiohttp.web.AppRunner(app)
    await runner.setup()

    site = aiohttp.web.TCPSite(runner, host=settings.host, port=settings.port)
    logger.warning("Listening to tcp %s:%d", settings.host, settings.port)
    await site.start()

    try:
        await stop.wait()
    finally:
        logger.warning("Shutdown runner")
        await runner.cleanup()
