"""Shared fixtures: a local aiohttp server standing in for the SESAME API."""

from __future__ import annotations

import asyncio
import json
from dataclasses import dataclass
from typing import Any, AsyncIterator

import pytest_asyncio
from aiohttp import web
from aiohttp.test_utils import TestServer
from multidict import CIMultiDictProxy

from pysesame import AsyncSesameAPI

DUMMY_AUTH_TOKEN = "YOUR_AUTH_TOKEN"
API_PREFIX = "/public"


@dataclass
class RecordedRequest:
    method: str
    path: str
    query: dict[str, str]
    headers: CIMultiDictProxy[str]
    body: str


class FakeSesameServer:
    """Serves canned responses and records every request it receives."""

    def __init__(self) -> None:
        self.requests: list[RecordedRequest] = []
        self._responses: dict[tuple[str, str], tuple[int, str | bytes, float]] = {}
        app = web.Application()
        app.router.add_route("*", "/{tail:.*}", self._handle)
        self._server = TestServer(app)

    async def start(self) -> None:
        await self._server.start_server()

    async def close(self) -> None:
        await self._server.close()

    @property
    def base_url(self) -> str:
        return str(self._server.make_url(API_PREFIX))

    def respond(
        self,
        method: str,
        path: str,
        text: str | bytes = "",
        status: int = 200,
        delay: float = 0.0,
    ) -> None:
        self._responses[(method, API_PREFIX + path)] = (status, text, delay)

    def respond_json(self, method: str, path: str, data: Any, status: int = 200) -> None:
        self.respond(method, path, json.dumps(data), status)

    async def _handle(self, request: web.Request) -> web.Response:
        self.requests.append(
            RecordedRequest(
                method=request.method,
                path=request.rel_url.raw_path,
                query=dict(request.query),
                headers=CIMultiDictProxy(request.headers.copy()),
                body=await request.text(),
            ),
        )
        status, text, delay = self._responses.get(
            (request.method, request.rel_url.raw_path),
            (404, "not found", 0.0),
        )
        if delay:
            await asyncio.sleep(delay)
        if isinstance(text, bytes):
            return web.Response(status=status, body=text)
        return web.Response(status=status, text=text)


@pytest_asyncio.fixture
async def fake_server() -> AsyncIterator[FakeSesameServer]:
    server = FakeSesameServer()
    await server.start()
    yield server
    await server.close()


@pytest_asyncio.fixture
async def api(fake_server: FakeSesameServer) -> AsyncIterator[AsyncSesameAPI]:
    sesame_api = AsyncSesameAPI(DUMMY_AUTH_TOKEN, base_url=fake_server.base_url)
    yield sesame_api
    await sesame_api.close()
