"""SinglePredicate: extract a value from the request, then match it.

This is the leaf every primitive matcher is built from. It satisfies the
Matcher protocol, so it composes with the combinators directly.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from mockpred._combinators import Composable
from mockpred._types import describe

if TYPE_CHECKING:
    from mockpred._types import DataInput, InputMatcher


@dataclass(frozen=True, slots=True)
class SinglePredicate[Ctx](Composable):
    """A single predicate: extract data, then match.

    If the DataInput returns None, the predicate evaluates to False
    without consulting the matcher.
    """

    input: DataInput[Ctx]
    matcher: InputMatcher

    def evaluate(self, request: Any, /) -> bool:
        value = self.input.get(request)
        if value is None:
            return False
        return self.matcher.matches(value)

    def describe(self) -> str | None:
        input_text = describe(self.input)
        matcher_text = describe(self.matcher)
        if input_text is None or matcher_text is None:
            return None
        return f"{input_text} {matcher_text}"
