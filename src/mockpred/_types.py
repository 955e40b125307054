"""Core protocols and type aliases for mockpred.

- Matcher is the request-level capability every combinator both consumes and produces
- DataInput is the domain-specific extraction port
- InputMatcher is the domain-agnostic value matching port
- Describable is the optional introspection capability
"""

from __future__ import annotations

from typing import Protocol, TypeVar, runtime_checkable

# None means "data not available" and makes a SinglePredicate evaluate to False.
MatchingData = str | int | bool | bytes | None

Ctx = TypeVar("Ctx", contravariant=True)


@runtime_checkable
class Matcher(Protocol[Ctx]):
    """A predicate over an incoming request.

    Implementations must not mutate themselves during evaluation, so
    repeated evaluation against the same request gives the same answer.
    """

    def evaluate(self, request: Ctx, /) -> bool: ...


@runtime_checkable
class Describable(Protocol):
    """A matcher that can render itself for logs and test failures.

    Returning None means "no description available".
    """

    def describe(self) -> str | None: ...


@runtime_checkable
class DataInput(Protocol[Ctx]):
    """Extract a value from a domain-specific context.

    Returning None signals "data not available" and causes the predicate
    to evaluate to False.
    """

    def get(self, ctx: Ctx, /) -> MatchingData: ...


@runtime_checkable
class InputMatcher(Protocol):
    """Match against a type-erased value.

    Non-generic on purpose: the same ExactMatcher works for headers,
    paths, query parameters and dict contexts alike.
    """

    def matches(self, value: MatchingData, /) -> bool: ...


def describe(matcher: object) -> str | None:
    """Return a human-readable description of ``matcher``, if it has one.

    Objects without a ``describe`` method, or whose ``describe()`` returns
    None or an empty string, are not introspectable and yield None.
    """
    method = getattr(matcher, "describe", None)
    if not callable(method):
        return None
    text = method()
    if not text:
        return None
    return text
