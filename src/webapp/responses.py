# SPDX-FileCopyrightText: 2024 Benedict Harcourt <ben.harcourt@harcourtprogramming.co.uk>
#
# SPDX-License-Identifier: BSD-2-Clause

from __future__ import annotations as _future_annotations

from typing import Any

import html

import aiohttp.web
import brotli  # type: ignore[import-untyped]

from hypertext import elements as h
from hypertext.host import Document, current_document
from hypertext.serialise import Indent

DOCTYPE = "<!DOCTYPE html>"


class NodeResponse(aiohttp.web.Response):
    """An HTML response holding a node tree, serialised once on construction."""

    def __init__(
        self,
        node: Any,
        status: int = 200,
        *,
        indent: Indent = None,
        document: Document[Any] | None = None,
    ) -> None:
        document = document or current_document()
        content = document.serialise(node, indent)

        if content.startswith("<html"):
            content = DOCTYPE + content

        super().__init__(
            body=content.encode("utf-8"),
            status=status,
            content_type="text/html",
            charset="utf-8",
            headers={"Cache-Control": "must-revalidate, no-cache, no-store, private"},
        )

    async def prepare(self, request: aiohttp.web.BaseRequest) -> Any:
        accept_encoding = request.headers.get("Accept-Encoding", "")
        if "br" in accept_encoding and isinstance(self.body, bytes):
            self.body = brotli.compress(self.body)
            self.headers["Content-Encoding"] = "br"

        return await super().prepare(request)


class HTTPNotFoundError(NodeResponse, Exception):
    def __init__(self, reason: str = "") -> None:
        super().__init__(page("Page not found", html.escape(reason)), status=404)


class HTTPInternalServerError(NodeResponse, Exception):
    def __init__(self, reason: str = "") -> None:
        super().__init__(page("We encountered an issue", html.escape(reason)), status=500)


def page(title: str, *body: Any, styles: tuple[str, ...] = ("/style.css",)) -> Any:
    return h.html(
        {"lang": "en"},
        h.head(
            h.meta({"charset": "utf-8"}),
            h.meta({"name": "viewport", "content_": "width=device-width, initial-scale=1"}),
            h.title(title),
            [h.stylesheet(style) for style in styles],
        ),
        h.body(
            h.header(h.a({"href": "/"}, h.h1(title)), {"class": "left-slant"}),
            h.main(h.article({"class": "panel"}, body)),
        ),
    )
