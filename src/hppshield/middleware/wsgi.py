"""WSGI adapter running the HPP step in front of a wrapped application."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Iterable

from hppshield.middleware.interceptor import HppMiddleware
from hppshield.middleware.options import HppOptions

QUERY_ENVIRON_KEY = "hppshield.query"
BODY_ENVIRON_KEY = "hppshield.body"

WSGIApp = Callable[[dict[str, Any], Callable[..., Any]], Iterable[bytes]]


@dataclass
class WSGIRequest:
    """Request view over a WSGI environ, shaped for the interception step."""

    environ: dict[str, Any]
    url: str
    method: str
    headers: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_environ(cls, environ: dict[str, Any]) -> WSGIRequest:
        path = environ.get("PATH_INFO") or "/"
        query_string = environ.get("QUERY_STRING", "")
        url = f"{path}?{query_string}" if query_string else path

        headers: dict[str, str] = {}
        for key, value in environ.items():
            if key.startswith("HTTP_"):
                headers[key[5:].replace("_", "-").lower()] = value
        # CGI keeps these two outside the HTTP_ namespace
        if environ.get("CONTENT_TYPE"):
            headers["content-type"] = environ["CONTENT_TYPE"]
        if environ.get("CONTENT_LENGTH"):
            headers["content-length"] = environ["CONTENT_LENGTH"]

        return cls(
            environ=environ,
            url=url,
            method=environ.get("REQUEST_METHOD", "GET"),
            headers=headers,
        )


class HppWSGIMiddleware:
    """
    Wrap a WSGI app and publish collapsed parameters in the environ.

    ``environ["hppshield.query"]`` and ``environ["hppshield.body"]`` are only
    set when the step produced them. Body checks need an ``access_body`` that
    reads the body the host buffered, e.g. from ``request.environ``.
    """

    def __init__(self, app: WSGIApp, options: HppOptions | None = None) -> None:
        self.app = app
        self.step = HppMiddleware(options)

    def __call__(
        self, environ: dict[str, Any], start_response: Callable[..., Any]
    ) -> Iterable[bytes]:
        request = WSGIRequest.from_environ(environ)
        responses: list[Iterable[bytes]] = []

        def call_next() -> None:
            if hasattr(request, "query"):
                environ[QUERY_ENVIRON_KEY] = request.query
            if hasattr(request, "body"):
                environ[BODY_ENVIRON_KEY] = request.body
            responses.append(self.app(environ, start_response))

        self.step(request, None, call_next)
        return responses[0]
