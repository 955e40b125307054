"""mockpred: boolean combinators for HTTP mock request matchers.

All public types are exported from this module for flat imports:

    from mockpred import and_, or_, xor, not_
    from mockpred.http import header_exists, query_param

    matcher = and_(header_exists("x-for-testing-purposes"), query_param("page", "1"))
"""

__version__ = "0.1.0"

# Combinators
from mockpred._combinators import (
    AndMatcher,
    Composable,
    NotMatcher,
    OrMatcher,
    XorMatcher,
    and_,
    matcher_depth,
    not_,
    or_,
    xor,
)
from mockpred._predicate import SinglePredicate

# Host routing
from mockpred._router import (
    MAX_DEPTH,
    NOT_FOUND,
    MatcherError,
    Response,
    Route,
    Router,
    router_from_matcher,
)

# Concrete matchers
from mockpred._string_matchers import (
    ContainsMatcher,
    ExactMatcher,
    PrefixMatcher,
    PresentMatcher,
    RegexMatcher,
    SuffixMatcher,
)
from mockpred._types import (
    DataInput,
    Describable,
    InputMatcher,
    Matcher,
    MatchingData,
    describe,
)

__all__ = [
    # Protocols
    "Matcher",
    "Describable",
    "DataInput",
    "InputMatcher",
    "MatchingData",
    "describe",
    # Combinators
    "AndMatcher",
    "OrMatcher",
    "XorMatcher",
    "NotMatcher",
    "Composable",
    "and_",
    "or_",
    "xor",
    "not_",
    "matcher_depth",
    # Predicates
    "SinglePredicate",
    # Concrete matchers
    "ExactMatcher",
    "PrefixMatcher",
    "SuffixMatcher",
    "ContainsMatcher",
    "RegexMatcher",
    "PresentMatcher",
    # Routing
    "Response",
    "Route",
    "Router",
    "router_from_matcher",
    "MatcherError",
    "MAX_DEPTH",
    "NOT_FOUND",
]
