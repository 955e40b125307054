"""HttpRequest: simple HTTP request context for matching.

Holds method, path (without query string), headers (case-insensitive),
query parameters (parsed from the raw path) and the raw body.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from urllib.parse import parse_qsl


@dataclass(frozen=True, slots=True)
class HttpRequest:
    """HTTP request context for matching.

    The path should be provided as-is from the wire (may include query string).
    Query parameters are percent-decoded; when a name repeats, the first
    value wins. Headers are stored with lowercased keys for
    case-insensitive lookup.
    """

    method: str = "GET"
    raw_path: str = "/"
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes = b""

    _clean_path: str = field(init=False, repr=False)
    _query_params: dict[str, str] = field(init=False, repr=False)
    _lower_headers: dict[str, str] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        path, _, query_string = self.raw_path.partition("?")
        params: dict[str, str] = {}
        for k, v in parse_qsl(query_string, keep_blank_values=True):
            params.setdefault(k, v)
        object.__setattr__(self, "_clean_path", path)
        object.__setattr__(self, "_query_params", params)
        object.__setattr__(
            self,
            "_lower_headers",
            {k.lower(): v for k, v in self.headers.items()},
        )

    @property
    def path(self) -> str:
        """Path without query string."""
        return self._clean_path

    @property
    def query_params(self) -> dict[str, str]:
        """Parsed query parameters."""
        return self._query_params

    def header(self, name: str) -> str | None:
        """Get a header value by name (case-insensitive)."""
        return self._lower_headers.get(name.lower())

    def query_param(self, name: str) -> str | None:
        """Get a query parameter by name."""
        return self._query_params.get(name)
