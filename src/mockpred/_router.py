"""Router: first-match-wins dispatch of requests to canned responses.

A minimal in-process host for matchers. Each Route pairs a matcher with
the Response returned when it accepts a request; routes are consulted in
order and the first acceptance wins. When nothing matches, on_no_match
is returned (404 by default).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from mockpred._combinators import matcher_depth
from mockpred._types import describe

if TYPE_CHECKING:
    from mockpred._types import Matcher

logger = logging.getLogger(__name__)

MAX_DEPTH = 32


class MatcherError(Exception):
    """Errors from matcher validation."""


@dataclass(frozen=True, slots=True)
class Response:
    """A canned HTTP response."""

    status: int = 200
    body: str = ""
    headers: dict[str, str] = field(default_factory=dict)


NOT_FOUND = Response(status=404)


@dataclass(frozen=True, slots=True)
class Route[Ctx]:
    """Pairs a matcher with the response served when it accepts a request."""

    matcher: Matcher[Ctx]
    response: Response


@dataclass(frozen=True, slots=True)
class Router[Ctx]:
    """Dispatch requests to the first route whose matcher accepts them.

    Depth validation runs at construction time. If any route's matcher
    tree exceeds MAX_DEPTH (32), MatcherError is raised.
    """

    routes: tuple[Route[Ctx], ...]
    on_no_match: Response = NOT_FOUND

    def __post_init__(self) -> None:
        self.validate()

    def dispatch(self, request: Any) -> Response:
        """Return the response of the first matching route, or on_no_match."""
        for index, route in enumerate(self.routes):
            if route.matcher.evaluate(request):
                if logger.isEnabledFor(logging.DEBUG):
                    logger.debug(
                        "route %d matched (%s) -> %d",
                        index,
                        describe(route.matcher) or type(route.matcher).__name__,
                        route.response.status,
                    )
                return route.response
        logger.debug("no route matched -> %d", self.on_no_match.status)
        return self.on_no_match

    def validate(self) -> None:
        """Validate matcher depth does not exceed MAX_DEPTH.

        Raises:
            MatcherError: If depth exceeds MAX_DEPTH.
        """
        d = self.depth()
        if d > MAX_DEPTH:
            msg = f"matcher depth {d} exceeds maximum allowed depth {MAX_DEPTH}"
            raise MatcherError(msg)

    def depth(self) -> int:
        """Deepest matcher tree across all routes (0 for an empty router)."""
        return max((matcher_depth(r.matcher) for r in self.routes), default=0)


def router_from_matcher[Ctx](
    matcher: Matcher[Ctx],
    response: Response | None = None,
    on_no_match: Response | None = None,
) -> Router[Ctx]:
    """Create a Router with a single route.

    ``response`` defaults to an empty 200, ``on_no_match`` to an empty 404.
    """
    return Router(
        routes=(Route(matcher, response or Response()),),
        on_no_match=on_no_match or NOT_FOUND,
    )
