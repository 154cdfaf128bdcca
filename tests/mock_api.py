"""Mock transport API server for tests."""

from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from pathlib import Path

from aiohttp import web
from aiohttp.test_utils import TestServer

TESTDATA_DIR = Path(__file__).parent / "testdata"

Handler = Callable[[web.Request], Awaitable[web.StreamResponse]]


def read_fixture(name: str) -> bytes:
    """Read ``tests/testdata/<name>.json``."""
    return (TESTDATA_DIR / f"{name}.json").read_bytes()


def json_handler(body: bytes) -> Handler:
    """Handler answering every request with ``body`` and status 200."""

    async def handler(_request: web.Request) -> web.Response:
        return web.Response(body=body, content_type="application/json")

    return handler


def status_handler(status: int, body: bytes = b"") -> Handler:
    """Handler answering every request with ``status``."""

    async def handler(_request: web.Request) -> web.Response:
        return web.Response(status=status, body=body)

    return handler


def sequence_handler(*handlers: Handler) -> Handler:
    """Handler delegating to ``handlers`` in order, repeating the last one."""
    calls = {"count": 0}

    async def handler(request: web.Request) -> web.StreamResponse:
        index = min(calls["count"], len(handlers) - 1)
        calls["count"] += 1
        return await handlers[index](request)

    return handler


@dataclass
class RecordedRequest:
    method: str
    path_qs: str
    headers: dict[str, str]


@dataclass
class MockApi:
    """Running mock server and the requests it received."""

    base_url: str
    requests: list[RecordedRequest] = field(default_factory=list)


@asynccontextmanager
async def mock_api(routes: dict[str, Handler]) -> AsyncIterator[MockApi]:
    """Serve ``routes`` (path -> handler) on a local port.

    Unknown paths answer with aiohttp's default 404.
    """
    recorded: list[RecordedRequest] = []

    @web.middleware
    async def record(request: web.Request, handler: Handler) -> web.StreamResponse:
        recorded.append(
            RecordedRequest(
                method=request.method,
                path_qs=request.raw_path,
                headers=dict(request.headers),
            )
        )
        return await handler(request)

    app = web.Application(middlewares=[record])
    for path, handler in routes.items():
        app.router.add_get(path, handler)

    async with TestServer(app) as server:
        yield MockApi(base_url=str(server.make_url("/")), requests=recorded)
