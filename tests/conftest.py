from typing import AsyncGenerator

import pytest
from _pytest.fixtures import SubRequest
from aiohttp import web

from httpassist.http.types import HttpImplementation

from .server import EchoServer


@pytest.fixture
async def server() -> AsyncGenerator[EchoServer, None]:
    echo = EchoServer()
    app = web.Application()
    app.add_routes(
        [
            web.route("*", "/echo", echo.echo_handler),
            web.get("/posts/{id}", echo.post_handler),
            web.route("*", "/status/{status}", echo.status_handler),
            web.get("/slow", echo.slow_handler),
        ]
    )
    runner = web.AppRunner(app)
    await runner.setup()
    site = web.TCPSite(runner, "127.0.0.1", 0)
    await site.start()
    echo.port = site._server.sockets[0].getsockname()[1]  # type: ignore[union-attr]
    yield echo
    await runner.cleanup()


@pytest.fixture(params=["httpx", "aiohttp"])
async def http(request: SubRequest) -> AsyncGenerator[HttpImplementation, None]:
    if request.param == "httpx":
        try:
            import httpx

            from httpassist.http.httpx import HTTPX
        except ImportError:
            raise pytest.skip("httpx not installed")
        async with httpx.AsyncClient() as client:
            yield HTTPX(client)
    elif request.param == "aiohttp":
        try:
            import aiohttp

            from httpassist.http.aiohttp import AIOHTTP
        except ImportError:
            raise pytest.skip("aiohttp not installed")
        async with aiohttp.ClientSession() as session:
            yield AIOHTTP(session)
