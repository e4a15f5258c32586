"""Module: middleware."""

from typing import Dict, Iterable

from starlette.types import ASGIApp, Receive, Scope, Send


def _route_key(path: str) -> str:
    return path.rstrip("/").casefold() or "/"


# Maps incoming paths onto the registered route spelling, so /api/hello,
# /API/HELLO and /api/Hello/ all reach /api/Hello. Paths with no registered
# counterpart pass through untouched and 404 as usual.
class CaseInsensitiveRouteMiddleware:
    def __init__(self, app: ASGIApp, paths: Iterable[str]) -> None:
        self.app = app
        self.routes: Dict[str, str] = {_route_key(path): path for path in paths}

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http":
            canonical = self.routes.get(_route_key(scope["path"]))
            if canonical is not None and canonical != scope["path"]:
                scope = dict(scope, path=canonical)
        await self.app(scope, receive, send)
