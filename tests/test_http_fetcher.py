from __future__ import annotations

import asyncio

import aiohttp
from aiohttp import test_utils, web
import pytest

from convert_logic.http import FetchError, FetchStatusError, build_async_fetcher


def _server_app() -> web.Application:
    async def ok(request: web.Request) -> web.Response:
        return web.Response(text=f"q={request.query.get('q', '')}")

    async def unavailable(request: web.Request) -> web.Response:
        del request
        return web.Response(status=503, text="busy")

    app = web.Application()
    app.router.add_get("/ok", ok)
    app.router.add_get("/unavailable", unavailable)
    return app


async def _fetch(path: str) -> str:
    async with test_utils.TestServer(_server_app()) as server:
        async with aiohttp.ClientSession() as session:
            fetcher = build_async_fetcher(session)
            return await fetcher(str(server.make_url(path)))


def test_fetcher_returns_body_on_success() -> None:
    assert asyncio.run(_fetch("/ok?q=xin")) == "q=xin"


def test_fetcher_raises_status_error_on_non_success() -> None:
    with pytest.raises(FetchStatusError) as excinfo:
        asyncio.run(_fetch("/unavailable"))

    assert excinfo.value.status_code == 503


def test_fetcher_wraps_connection_errors() -> None:
    async def scenario() -> str:
        async with aiohttp.ClientSession() as session:
            fetcher = build_async_fetcher(session, timeout=2.0)
            return await fetcher("http://127.0.0.1:9/unreachable")

    with pytest.raises(FetchError):
        asyncio.run(scenario())
