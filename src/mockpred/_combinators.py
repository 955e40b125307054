"""Boolean combinators over request matchers.

AndMatcher, OrMatcher, XorMatcher and NotMatcher wrap one or two matchers
and satisfy the Matcher protocol themselves, so they can be registered on a
route exactly like a primitive matcher or nested inside each other.

Evaluation order is always left then right. AND and OR short-circuit; XOR
cannot. Exceptions raised by a submatcher propagate unchanged.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from mockpred._types import describe

if TYPE_CHECKING:
    from mockpred._types import Matcher


class Composable:
    """Operator sugar: ``&``, ``|``, ``^`` and ``~`` build combinators.

    Chains stay binary: ``a & b & c`` is ``AndMatcher(AndMatcher(a, b), c)``.
    The reflected forms keep operand order, so ``plain & c`` is
    ``AndMatcher(plain, c)`` for a plain Matcher on the left.
    """

    __slots__ = ()

    def __and__(self, other: Matcher[Any]) -> AndMatcher[Any]:
        return AndMatcher(self, other)

    def __or__(self, other: Matcher[Any]) -> OrMatcher[Any]:
        return OrMatcher(self, other)

    def __xor__(self, other: Matcher[Any]) -> XorMatcher[Any]:
        return XorMatcher(self, other)

    def __rand__(self, other: Matcher[Any]) -> AndMatcher[Any]:
        return AndMatcher(other, self)

    def __ror__(self, other: Matcher[Any]) -> OrMatcher[Any]:
        return OrMatcher(other, self)

    def __rxor__(self, other: Matcher[Any]) -> XorMatcher[Any]:
        return XorMatcher(other, self)

    def __invert__(self) -> NotMatcher[Any]:
        return NotMatcher(self)


@dataclass(frozen=True, slots=True)
class AndMatcher[Ctx](Composable):
    """Accepts a request only if both submatchers accept it.

    Short-circuits: if ``left`` rejects the request, ``right`` is not called.
    """

    left: Matcher[Ctx]
    right: Matcher[Ctx]

    def evaluate(self, request: Ctx, /) -> bool:
        return bool(self.left.evaluate(request) and self.right.evaluate(request))

    def describe(self) -> str | None:
        return _describe_binary("and", self.left, self.right)


@dataclass(frozen=True, slots=True)
class OrMatcher[Ctx](Composable):
    """Accepts a request if either submatcher accepts it.

    Short-circuits: if ``left`` accepts the request, ``right`` is not called.
    """

    left: Matcher[Ctx]
    right: Matcher[Ctx]

    def evaluate(self, request: Ctx, /) -> bool:
        return bool(self.left.evaluate(request) or self.right.evaluate(request))

    def describe(self) -> str | None:
        return _describe_binary("or", self.left, self.right)


@dataclass(frozen=True, slots=True)
class XorMatcher[Ctx](Composable):
    """Accepts a request if exactly one submatcher accepts it.

    Both submatchers are always evaluated, exactly once each.
    """

    left: Matcher[Ctx]
    right: Matcher[Ctx]

    def evaluate(self, request: Ctx, /) -> bool:
        left = bool(self.left.evaluate(request))
        right = bool(self.right.evaluate(request))
        return left != right

    def describe(self) -> str | None:
        return _describe_binary("xor", self.left, self.right)


@dataclass(frozen=True, slots=True)
class NotMatcher[Ctx](Composable):
    """Accepts a request only if the inner matcher rejects it."""

    inner: Matcher[Ctx]

    def evaluate(self, request: Ctx, /) -> bool:
        return not self.inner.evaluate(request)

    def describe(self) -> str | None:
        inner = describe(self.inner)
        if inner is None:
            return None
        return f"not({inner})"


def and_[Ctx](left: Matcher[Ctx], right: Matcher[Ctx]) -> AndMatcher[Ctx]:
    """Shorthand for :class:`AndMatcher`."""
    return AndMatcher(left, right)


def or_[Ctx](left: Matcher[Ctx], right: Matcher[Ctx]) -> OrMatcher[Ctx]:
    """Shorthand for :class:`OrMatcher`."""
    return OrMatcher(left, right)


def xor[Ctx](left: Matcher[Ctx], right: Matcher[Ctx]) -> XorMatcher[Ctx]:
    """Shorthand for :class:`XorMatcher`."""
    return XorMatcher(left, right)


def not_[Ctx](inner: Matcher[Ctx]) -> NotMatcher[Ctx]:
    """Shorthand for :class:`NotMatcher`."""
    return NotMatcher(inner)


def matcher_depth(m: object) -> int:
    """Calculate the nesting depth of a matcher tree.

    Anything that is not a combinator counts as a leaf of depth 1.
    Walks the tree with an explicit stack, so arbitrarily deep trees are
    measured without hitting the interpreter's recursion limit.
    """
    deepest = 0
    stack: list[tuple[object, int]] = [(m, 1)]
    while stack:
        node, depth = stack.pop()
        deepest = max(deepest, depth)
        match node:
            case (
                AndMatcher(left=left, right=right)
                | OrMatcher(left=left, right=right)
                | XorMatcher(left=left, right=right)
            ):
                stack.append((left, depth + 1))
                stack.append((right, depth + 1))
            case NotMatcher(inner=inner):
                stack.append((inner, depth + 1))
    return deepest


def _describe_binary(op: str, left: object, right: object) -> str | None:
    """Describe a binary combinator, or None if either side can't describe itself."""
    left_text = describe(left)
    if left_text is None:
        return None
    right_text = describe(right)
    if right_text is None:
        return None
    return f"{op}({left_text}, {right_text})"
