"""Shared fixtures: a live mock HTTP server backed by a mockpred Router.

The live server is pytest-httpserver with a single catch-all handler that
converts each werkzeug request to an HttpRequest and dispatches it through
the Router under test.
"""

from __future__ import annotations

from collections.abc import Callable

import pytest
from pytest_httpserver import HTTPServer, URIPattern
from werkzeug.wrappers import Request, Response

from mockpred import Router
from mockpred.http import HttpRequest


class AnyUri(URIPattern):
    """Matches every URI so the Router decides what to serve."""

    def match(self, uri: str) -> bool:
        return True


def to_http_request(request: Request) -> HttpRequest:
    """Convert a werkzeug request to an HttpRequest."""
    raw_path = request.path
    if request.query_string:
        raw_path = f"{raw_path}?{request.query_string.decode('latin-1')}"
    return HttpRequest(
        method=request.method,
        raw_path=raw_path,
        headers=dict(request.headers.items()),
        body=request.get_data(),
    )


@pytest.fixture
def serve(httpserver: HTTPServer) -> Callable[[Router[HttpRequest]], str]:
    """Mount a Router on the test HTTP server and return its base URL."""

    def _serve(router: Router[HttpRequest]) -> str:
        def handler(request: Request) -> Response:
            response = router.dispatch(to_http_request(request))
            return Response(response.body, status=response.status, headers=response.headers)

        httpserver.expect_request(AnyUri()).respond_with_handler(handler)
        return httpserver.url_for("/")

    return _serve
