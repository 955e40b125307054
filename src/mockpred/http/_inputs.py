"""DataInput implementations for HttpRequest.

Each input extracts a specific field from an HttpRequest context
and returns it as MatchingData for predicate evaluation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mockpred._types import MatchingData
    from mockpred.http._request import HttpRequest


@dataclass(frozen=True, slots=True)
class PathInput:
    """Extracts the request path (without query string)."""

    def get(self, ctx: HttpRequest, /) -> MatchingData:
        return ctx.path

    def describe(self) -> str:
        return "path"


@dataclass(frozen=True, slots=True)
class MethodInput:
    """Extracts the HTTP method."""

    def get(self, ctx: HttpRequest, /) -> MatchingData:
        return ctx.method

    def describe(self) -> str:
        return "method"


@dataclass(frozen=True, slots=True)
class HeaderInput:
    """Extracts a header value by name (case-insensitive lookup)."""

    name: str

    def get(self, ctx: HttpRequest, /) -> MatchingData:
        return ctx.header(self.name)

    def describe(self) -> str:
        return f"header[{self.name!r}]"


@dataclass(frozen=True, slots=True)
class QueryParamInput:
    """Extracts a query parameter value by name."""

    name: str

    def get(self, ctx: HttpRequest, /) -> MatchingData:
        return ctx.query_param(self.name)

    def describe(self) -> str:
        return f"query[{self.name!r}]"


@dataclass(frozen=True, slots=True)
class BodyInput:
    """Extracts the body decoded as UTF-8 (None if it isn't valid UTF-8)."""

    def get(self, ctx: HttpRequest, /) -> MatchingData:
        try:
            return ctx.body.decode("utf-8")
        except UnicodeDecodeError:
            return None

    def describe(self) -> str:
        return "body"
