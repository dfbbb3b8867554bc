"""Helpers for tests that talk to HTTP adapters through ``httpx.MockTransport``."""

from __future__ import annotations

import base64
from collections.abc import Callable
from typing import TypeAlias

import httpx

JsonPayload: TypeAlias = dict[str, object]
Handler: TypeAlias = Callable[[httpx.Request], httpx.Response]


def basic_auth_header(username: str, password: str) -> str:
    token = base64.b64encode(f"{username}:{password}".encode()).decode("ascii")
    return f"Basic {token}"


class RecordingHandler:
    """Route requests by ``(method, path)`` and remember every request seen."""

    def __init__(self, routes: dict[tuple[str, str], httpx.Response | Handler]) -> None:
        self.routes = routes
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get((request.method, request.url.path))
        if route is None:
            return httpx.Response(404, text=f"no route for {request.method} {request.url}")
        if isinstance(route, httpx.Response):
            return httpx.Response(
                route.status_code, content=route.content, headers=route.headers
            )
        return route(request)

    def paths(self, method: str | None = None) -> list[str]:
        return [
            request.url.path
            for request in self.requests
            if method is None or request.method == method
        ]
