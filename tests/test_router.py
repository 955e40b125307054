"""Tests for Router dispatch and depth validation."""

from __future__ import annotations

import logging

import pytest

from mockpred import (
    MAX_DEPTH,
    NOT_FOUND,
    MatcherError,
    Response,
    Route,
    Router,
    not_,
    router_from_matcher,
)
from mockpred.http import HttpRequest, header_exists, path
from mockpred.testing import Const, Unreachable


class TestRouter:
    def test_first_match_wins(self) -> None:
        router = Router(
            routes=(
                Route(Const(True), Response(200, "first")),
                Route(Const(True), Response(200, "second")),
            )
        )
        assert router.dispatch({}).body == "first"

    def test_later_routes_not_consulted_after_match(self) -> None:
        router = Router(
            routes=(Route(Const(True), Response(201)), Route(Unreachable(), Response()))
        )
        assert router.dispatch({}).status == 201

    def test_no_match_returns_404(self) -> None:
        router = Router(routes=(Route(Const(False), Response()),))
        assert router.dispatch({}) == NOT_FOUND
        assert router.dispatch({}).status == 404

    def test_custom_on_no_match(self) -> None:
        router = Router(routes=(), on_no_match=Response(418, "teapot"))
        assert router.dispatch({}).status == 418

    def test_http_routes(self) -> None:
        router = Router(
            routes=(
                Route(path("/health"), Response(200, "ok")),
                Route(not_(header_exists("authorization")), Response(401)),
            )
        )
        assert router.dispatch(HttpRequest(raw_path="/health")).body == "ok"
        assert router.dispatch(HttpRequest(raw_path="/items")).status == 401
        authed = HttpRequest(raw_path="/items", headers={"Authorization": "x"})
        assert router.dispatch(authed).status == 404

    def test_dispatch_logs_matched_route(self, caplog: pytest.LogCaptureFixture) -> None:
        router = router_from_matcher(Const(True, "always"))
        with caplog.at_level(logging.DEBUG, logger="mockpred._router"):
            router.dispatch({})
        assert "route 0 matched (always) -> 200" in caplog.text


class TestRouterFromMatcher:
    def test_defaults(self) -> None:
        router = router_from_matcher(Const(True))
        assert router.dispatch({}).status == 200

        router = router_from_matcher(Const(False))
        assert router.dispatch({}).status == 404

    def test_custom_responses(self) -> None:
        router = router_from_matcher(Const(False), Response(204), Response(500))
        assert router.dispatch({}).status == 500


class TestDepthValidation:
    def _nest(self, depth: int) -> object:
        m: object = Const(True)
        for _ in range(depth - 1):
            m = not_(m)  # type: ignore[arg-type]
        return m

    def test_max_depth_accepted(self) -> None:
        router = router_from_matcher(self._nest(MAX_DEPTH))  # type: ignore[arg-type]
        assert router.depth() == MAX_DEPTH

    def test_exceeding_max_depth_raises(self) -> None:
        with pytest.raises(MatcherError, match="exceeds maximum allowed depth"):
            router_from_matcher(self._nest(MAX_DEPTH + 1))  # type: ignore[arg-type]

    def test_very_deep_tree_raises_matcher_error(self) -> None:
        with pytest.raises(MatcherError, match="matcher depth 5000 exceeds"):
            router_from_matcher(self._nest(5000))  # type: ignore[arg-type]

    def test_empty_router_depth(self) -> None:
        assert Router(routes=()).depth() == 0
