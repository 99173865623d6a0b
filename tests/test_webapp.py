from __future__ import annotations

from typing import TYPE_CHECKING, Any

import asyncio
import json
import logging
import sys

import aiohttp.web
import pytest
from aiohttp.test_utils import make_mocked_request

from hypertext import elements as h
import webapp
from webapp import make_app, node_middleware, serve
from webapp.config import Settings, load_settings, parse_indent
from webapp.logs import JsonFormatter, install
from webapp.responses import NodeResponse

if TYPE_CHECKING:
    from aiohttp.test_utils import TestClient

CARD = (
    '<div class="card wide" data-id="7">'
    "<p>child 1</p><p>child 2</p><p>child 3</p><p>child 4</p>"
    "</div>"
)


async def test_index_page_is_a_document(aiohttp_client: Any) -> None:
    client: TestClient[Any, Any] = await aiohttp_client(make_app())

    response = await client.get("/")
    text = await response.text()

    assert response.status == 200
    assert response.content_type == "text/html"
    assert response.charset == "utf-8"
    assert text.startswith('<!DOCTYPE html><html lang="en"><head><meta charset="utf-8">')
    assert '<link rel="stylesheet" href="/style.css">' in text
    assert '<a href="/example/card">card</a>' in text


async def test_returned_nodes_are_serialised(aiohttp_client: Any) -> None:
    client = await aiohttp_client(make_app())

    response = await client.get("/example/card")

    assert response.status == 200
    assert await response.text() == CARD


async def test_configured_indent_is_applied(aiohttp_client: Any) -> None:
    client = await aiohttp_client(make_app(Settings(indent=2)))

    response = await client.get("/example/list")

    assert await response.text() == (
        '<ul style="list-style:none;">'
        "\n  <li>\n    0\n  </li>"
        "\n  <li>\n    1\n  </li>"
        "\n  <li>\n    2\n  </li>"
        "\n</ul>"
    )


async def test_other_responses_pass_through(aiohttp_client: Any) -> None:
    client = await aiohttp_client(make_app())

    response = await client.get("/health")

    assert response.content_type == "text/plain"
    assert await response.text() == "ok"


async def test_missing_pages_render_error_document(aiohttp_client: Any) -> None:
    client = await aiohttp_client(make_app())

    for path in ("/example/missing", "/nowhere"):
        response = await client.get(path)

        assert response.status == 404
        assert "Page not found" in await response.text()


async def test_handler_errors_are_logged(
    aiohttp_client: Any,
    caplog: pytest.LogCaptureFixture,
) -> None:
    async def broken(_: aiohttp.web.Request) -> Any:
        raise RuntimeError("boom")

    app = make_app()
    app.router.add_get("/broken", broken)
    client = await aiohttp_client(app)

    with caplog.at_level(logging.ERROR, logger="webapp"):
        response = await client.get("/broken")

    assert response.status == 500
    assert "We encountered an issue" in await response.text()
    assert "Error in request" in caplog.text


async def test_brotli_is_used_when_accepted(aiohttp_client: Any) -> None:
    client = await aiohttp_client(make_app())

    response = await client.get("/example/card", headers={"Accept-Encoding": "br"})

    assert response.headers["Content-Encoding"] == "br"
    assert await response.text() == CARD


async def test_middleware_replaces_nodes_only() -> None:
    middleware = node_middleware()
    request = make_mocked_request("GET", "/")

    async def node_handler(_: aiohttp.web.Request) -> Any:
        return h.b("x")

    async def text_handler(_: aiohttp.web.Request) -> Any:
        return "payload"

    response = await middleware(request, node_handler)

    assert isinstance(response, NodeResponse)
    assert response.body == b"<b>x</b>"
    assert await middleware(request, text_handler) == "payload"


def test_node_response_adds_doctype_to_documents() -> None:
    assert NodeResponse(h.html(h.body())).body == b"<!DOCTYPE html><html><body></body></html>"
    assert NodeResponse(h.div(), status=201).status == 201


@pytest.mark.parametrize(
    ("value", "indent"),
    [(None, None), ("", None), ("tab", True), ("TAB", True), ("4", 4), ("  ", "  ")],
)
def test_parse_indent(value: str | None, indent: object) -> None:
    assert parse_indent(value) == indent


def test_settings_from_env() -> None:
    settings = Settings.from_env(
        {"HYPERTEXT_PORT": "8080", "HYPERTEXT_INDENT": "tab", "HYPERTEXT_DOCUMENT": "minidom"},
    )

    assert settings == Settings(port=8080, indent=True, document="minidom")


def test_load_settings_prefers_arguments(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("HYPERTEXT_PORT", "9000")
    monkeypatch.setenv("HYPERTEXT_HOST", "0.0.0.0")

    settings = load_settings(["--port", "8081", "--indent", "2", "--local"])

    assert settings.host == "0.0.0.0"
    assert settings.port == 8081
    assert settings.indent == 2
    assert settings.local


def test_json_formatter_reports_exception_chains() -> None:
    formatter = JsonFormatter()

    try:
        try:
            {}["missing"]
        except KeyError as err:
            raise ValueError("bad") from err
    except ValueError:
        exc_info = sys.exc_info()

    formatted = formatter.formatException(exc_info)

    assert formatted is not None
    assert formatted["type"] == "ValueError"
    assert formatted["message"] == "bad"
    assert formatted["traceback"][0]["method"] == "test_json_formatter_reports_exception_chains"
    assert formatted["cause"]["type"] == "KeyError"
    assert formatted["cause"]["cause"] is None


def test_json_formatter_adds_level_and_logger() -> None:
    record = logging.LogRecord("hypertext", logging.WARNING, __file__, 1, "hello %s", ("x",), None)

    output = json.loads(JsonFormatter().format(record))

    assert output["message"] == "hello x"
    assert output["level"] == "WARNING"
    assert output["logger"] == "hypertext"


def test_install_attaches_json_handler() -> None:
    handler = install(level=logging.DEBUG, indent=2)

    try:
        for name in ("hypertext", "webapp"):
            logger = logging.getLogger(name)
            assert handler in logger.handlers
            assert logger.level == logging.DEBUG
        assert isinstance(handler.formatter, JsonFormatter)
    finally:
        for name in ("hypertext", "webapp"):
            logging.getLogger(name).removeHandler(handler)
            logging.getLogger(name).setLevel(logging.NOTSET)


def test_package_logger_survives_submodule_import() -> None:
    import webapp.logs  # noqa: F401, PLC0415

    assert isinstance(webapp.logger, logging.Logger)


async def test_serve_starts_and_stops(caplog: pytest.LogCaptureFixture) -> None:
    stop = asyncio.Event()
    stop.set()

    with caplog.at_level(logging.WARNING, logger="webapp"):
        await serve(make_app(), Settings(port=0), stop)

    assert "Listening to tcp 127.0.0.1:0" in caplog.text
    assert "Shutdown runner" in caplog.text


@pytest.mark.parametrize(
    ("path", "raw"),
    [
        ("/%3Cscript%3Ealert(1)%3C/script%3E", "<script>"),
        ("/example/%3Cimg%20src=x%20onerror=alert(1)%3E", "<img src=x"),
    ],
)
async def test_error_pages_escape_request_text(aiohttp_client: Any, path: str, raw: str) -> None:
    client = await aiohttp_client(make_app())

    response = await client.get(path)
    text = await response.text()

    assert response.status == 404
    assert raw not in text
    assert "&lt;" in text
