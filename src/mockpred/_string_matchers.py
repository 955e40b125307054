"""Concrete string matchers implementing the InputMatcher protocol.

Each matcher is a frozen dataclass, immutable after construction.
All matchers return False for non-string or None input values.

Regex uses ``google-re2`` for guaranteed linear-time matching. RE2 does not
support backreferences or lookahead/lookbehind because they require
backtracking, so patterns using them are rejected at compile time.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import re2

from mockpred._router import MatcherError

if TYPE_CHECKING:
    from mockpred._types import MatchingData


def _case_suffix(ignore_case: bool) -> str:
    return " (ignore case)" if ignore_case else ""


@dataclass(frozen=True, slots=True)
class ExactMatcher:
    """Exact string equality match.

    When ignore_case is True, comparison is case-insensitive.
    The comparison value is pre-folded at construction time.
    """

    value: str
    ignore_case: bool = False
    _cmp_value: str = field(init=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "_cmp_value", self.value.casefold() if self.ignore_case else self.value
        )

    def matches(self, value: MatchingData, /) -> bool:
        if not isinstance(value, str):
            return False
        input_val = value.casefold() if self.ignore_case else value
        return input_val == self._cmp_value

    def describe(self) -> str:
        return f"== {self.value!r}{_case_suffix(self.ignore_case)}"


@dataclass(frozen=True, slots=True)
class PrefixMatcher:
    """String prefix match (startswith)."""

    prefix: str
    ignore_case: bool = False
    _cmp_prefix: str = field(init=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "_cmp_prefix", self.prefix.casefold() if self.ignore_case else self.prefix
        )

    def matches(self, value: MatchingData, /) -> bool:
        if not isinstance(value, str):
            return False
        input_val = value.casefold() if self.ignore_case else value
        return input_val.startswith(self._cmp_prefix)

    def describe(self) -> str:
        return f"starts with {self.prefix!r}{_case_suffix(self.ignore_case)}"


@dataclass(frozen=True, slots=True)
class SuffixMatcher:
    """String suffix match (endswith)."""

    suffix: str
    ignore_case: bool = False
    _cmp_suffix: str = field(init=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "_cmp_suffix", self.suffix.casefold() if self.ignore_case else self.suffix
        )

    def matches(self, value: MatchingData, /) -> bool:
        if not isinstance(value, str):
            return False
        input_val = value.casefold() if self.ignore_case else value
        return input_val.endswith(self._cmp_suffix)

    def describe(self) -> str:
        return f"ends with {self.suffix!r}{_case_suffix(self.ignore_case)}"


@dataclass(frozen=True, slots=True)
class ContainsMatcher:
    """Substring search match.

    The substring is pre-folded at construction time so repeated
    evaluation only folds the input.
    """

    substring: str
    ignore_case: bool = False
    _cmp_substring: str = field(init=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "_cmp_substring",
            self.substring.casefold() if self.ignore_case else self.substring,
        )

    def matches(self, value: MatchingData, /) -> bool:
        if not isinstance(value, str):
            return False
        input_val = value.casefold() if self.ignore_case else value
        return self._cmp_substring in input_val

    def describe(self) -> str:
        return f"contains {self.substring!r}{_case_suffix(self.ignore_case)}"


@dataclass(frozen=True, slots=True)
class RegexMatcher:
    """Regular expression match.

    The pattern is compiled at construction time via ``google-re2``.
    Uses search (not fullmatch) to match anywhere in the string.

    Raises:
        MatcherError: If the pattern is not valid RE2 syntax.
    """

    pattern: str
    _compiled: re2.Pattern[str] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        try:
            compiled = re2.compile(self.pattern)
        except re2.error as e:
            msg = f'invalid regex pattern "{self.pattern}": {e}'
            raise MatcherError(msg) from e
        object.__setattr__(self, "_compiled", compiled)

    def matches(self, value: MatchingData, /) -> bool:
        if not isinstance(value, str):
            return False
        return self._compiled.search(value) is not None

    def describe(self) -> str:
        return f"matches {self.pattern!r}"


@dataclass(frozen=True, slots=True)
class PresentMatcher:
    """Matches any string value, including the empty string.

    Combined with a SinglePredicate this checks that a value exists.
    """

    def matches(self, value: MatchingData, /) -> bool:
        return isinstance(value, str)

    def describe(self) -> str:
        return "exists"
