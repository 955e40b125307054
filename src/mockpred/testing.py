"""Test utilities for mockpred.

Provides a dict-backed DataInput and a handful of scripted matchers for
exercising combinators without building real requests:

- Const: always returns a fixed answer, describable
- Opaque: always returns a fixed answer, not describable
- Unreachable: fails the test if it is ever evaluated
- Spy: wraps another matcher and records every evaluation

These are NOT domain adapters. For real domains, use mockpred.http or
implement DataInput for your own context type.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from mockpred._combinators import Composable

if TYPE_CHECKING:
    from mockpred._types import Matcher, MatchingData


@dataclass(frozen=True, slots=True)
class DictInput:
    """Extract a value by key from a dict context.

    >>> from mockpred import SinglePredicate, ExactMatcher
    >>> from mockpred.testing import DictInput
    >>> p = SinglePredicate(DictInput("name"), ExactMatcher("alice"))
    >>> p.evaluate({"name": "alice"})
    True
    """

    key: str

    def get(self, ctx: dict[str, str], /) -> MatchingData:
        return ctx.get(self.key)

    def describe(self) -> str:
        return f"dict[{self.key!r}]"


class UnexpectedEvaluation(AssertionError):
    """Raised by Unreachable when a combinator fails to short-circuit."""


@dataclass(frozen=True, slots=True)
class Const(Composable):
    """Accepts or rejects every request, and describes itself."""

    result: bool
    label: str | None = None

    def evaluate(self, request: Any, /) -> bool:
        return self.result

    def describe(self) -> str:
        return self.label or str(self.result).lower()


@dataclass(frozen=True, slots=True)
class Opaque(Composable):
    """Like Const, but with no description."""

    result: bool

    def evaluate(self, request: Any, /) -> bool:
        return self.result


@dataclass(frozen=True, slots=True)
class Unreachable(Composable):
    """Raises UnexpectedEvaluation if evaluated."""

    label: str = "unreachable"

    def evaluate(self, request: Any, /) -> bool:
        msg = f"matcher {self.label!r} should not have been evaluated"
        raise UnexpectedEvaluation(msg)

    def describe(self) -> str:
        return self.label


@dataclass(eq=False)
class Spy(Composable):
    """Delegates to ``inner`` and records each request it is evaluated with."""

    inner: Matcher[Any]
    calls: list[Any] = field(default_factory=list)

    def evaluate(self, request: Any, /) -> bool:
        self.calls.append(request)
        return self.inner.evaluate(request)

    @property
    def call_count(self) -> int:
        return len(self.calls)
