"""mockpred.http: HTTP matching domain.

Provides the HttpRequest context, DataInput implementations and the
primitive request matchers that combinators are composed from.
"""

from mockpred.http._inputs import (
    BodyInput,
    HeaderInput,
    MethodInput,
    PathInput,
    QueryParamInput,
)
from mockpred.http._matchers import (
    bearer_token,
    body_string_contains,
    header,
    header_exists,
    header_regex,
    method,
    path,
    path_regex,
    query_param,
    query_param_is_missing,
)
from mockpred.http._request import HttpRequest

__all__ = [
    # Context
    "HttpRequest",
    # DataInputs
    "PathInput",
    "MethodInput",
    "HeaderInput",
    "QueryParamInput",
    "BodyInput",
    # Primitive matchers
    "method",
    "path",
    "path_regex",
    "header",
    "header_exists",
    "header_regex",
    "query_param",
    "query_param_is_missing",
    "bearer_token",
    "body_string_contains",
]
