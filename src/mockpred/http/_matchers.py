"""Primitive HTTP matchers.

Ready-made SinglePredicates over HttpRequest, the building blocks that
the combinators compose:

    and_(header_exists("x-for-testing-purposes"), query_param("page", "1"))
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from mockpred._combinators import NotMatcher
from mockpred._predicate import SinglePredicate
from mockpred._string_matchers import (
    ContainsMatcher,
    ExactMatcher,
    PresentMatcher,
    RegexMatcher,
)
from mockpred.http._inputs import (
    BodyInput,
    HeaderInput,
    MethodInput,
    PathInput,
    QueryParamInput,
)

if TYPE_CHECKING:
    from mockpred.http._request import HttpRequest


def method(name: str) -> SinglePredicate[HttpRequest]:
    """Match the HTTP method, case-insensitively."""
    return SinglePredicate(MethodInput(), ExactMatcher(name, ignore_case=True))


def path(value: str) -> SinglePredicate[HttpRequest]:
    """Match the exact request path (query string excluded)."""
    return SinglePredicate(PathInput(), ExactMatcher(value))


def path_regex(pattern: str) -> SinglePredicate[HttpRequest]:
    return SinglePredicate(PathInput(), RegexMatcher(pattern))


def header(name: str, value: str) -> SinglePredicate[HttpRequest]:
    """Match a header by exact value. The header name is case-insensitive."""
    return SinglePredicate(HeaderInput(name), ExactMatcher(value))


def header_exists(name: str) -> SinglePredicate[HttpRequest]:
    """Match if the header is present, whatever its value."""
    return SinglePredicate(HeaderInput(name), PresentMatcher())


def header_regex(name: str, pattern: str) -> SinglePredicate[HttpRequest]:
    return SinglePredicate(HeaderInput(name), RegexMatcher(pattern))


def query_param(name: str, value: str) -> SinglePredicate[HttpRequest]:
    """Match a query parameter by exact (decoded) value."""
    return SinglePredicate(QueryParamInput(name), ExactMatcher(value))


def query_param_is_missing(name: str) -> NotMatcher[HttpRequest]:
    """Match if the query parameter is absent."""
    return NotMatcher(SinglePredicate(QueryParamInput(name), PresentMatcher()))


def bearer_token(token: str) -> SinglePredicate[HttpRequest]:
    """Match an ``Authorization: Bearer <token>`` header."""
    return SinglePredicate(HeaderInput("authorization"), ExactMatcher(f"Bearer {token}"))


def body_string_contains(substring: str) -> SinglePredicate[HttpRequest]:
    return SinglePredicate(BodyInput(), ContainsMatcher(substring))
