# SPDX-FileCopyrightText: 2024 Benedict Harcourt <ben.harcourt@harcourtprogramming.co.uk>
#
# SPDX-License-Identifier: BSD-2-Clause

from __future__ import annotations as _future_annotations

from typing import Any

import aiohttp.web

from hypertext import elements as h
from webapp.responses import HTTPNotFoundError, page

routes = aiohttp.web.RouteTableDef()

EXAMPLES = {
    "card": lambda: h.div(
        {"class": "card.wide", "data_id": 7, "content": [h.p("child 1")]},
        h.p("child 2"),
        [h.p("child 3"), h.p("child 4")],
    ),
    "form": lambda: h.form(
        {"method": "post", "action": "/"},
        h.label("Subscribed", h.checkbox(True, {"name": "subscribed"})),
        h.label("Quantity", h.numberbox(3, {"name": "quantity", "min": 0})),
        h.label("Name", h.textbox("Anonymous", {"name": "name"})),
    ),
    "list": lambda: h.ul(
        {"style": {"list_style": "none", "margin": 0, "padding": False}},
        (h.li(n) for n in range(3)),
    ),
}


@routes.get("/")
async def index(_: aiohttp.web.Request) -> Any:
    return page(
        "hypertext",
        h.p("Examples built with the element builders:"),
        h.ul([h.li(h.a({"href": f"/example/{name}"}, name)) for name in EXAMPLES]),
    )


@routes.get("/example/{name}")
async def example(request: aiohttp.web.Request) -> Any:
    build = EXAMPLES.get(request.match_info["name"])
    if build is None:
        raise HTTPNotFoundError(request.match_info["name"])

    return build()


@routes.get("/health")
async def health(_: aiohttp.web.Request) -> aiohttp.web.Response:
    return aiohttp.web.Response(text="ok")
