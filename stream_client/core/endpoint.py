from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from stream_shared.protocol.constants import ACCESS_TOKEN_PARAM, STREAM_PARAM

REDACTED = "***"
SENSITIVE_PARAMS = frozenset({ACCESS_TOKEN_PARAM})


@dataclass(frozen=True)
class EndpointConfig:
    """What to connect to. Immutable for the lifetime of a listen call."""

    base_url: str
    stream: str
    params: Optional[Tuple[str, ...]] = None
    access_token: Optional[str] = None

    def __post_init__(self) -> None:
        if isinstance(self.params, str):
            object.__setattr__(self, "params", (self.params,))
        elif self.params is not None and not isinstance(self.params, tuple):
            object.__setattr__(self, "params", tuple(self.params))

    def query_params(self) -> List[str]:
        """Query parts in wire order: stream, access token, then caller extras verbatim."""
        parts = [f"{STREAM_PARAM}={self.stream}"]
        if self.access_token is not None:
            parts.append(f"{ACCESS_TOKEN_PARAM}={self.access_token}")
        if self.params:
            parts.extend(self.params)
        return parts

    def build_url(self) -> str:
        return self.base_url + "?" + "&".join(self.query_params())


def redact_url(url: str) -> str:
    """Return the URL with credential query values masked, for logging."""
    try:
        parsed = urlsplit(url)
    except ValueError:
        return url
    pairs = parse_qsl(parsed.query, keep_blank_values=True)
    if not any(key in SENSITIVE_PARAMS for key, _ in pairs):
        return url
    masked = [(key, REDACTED if key in SENSITIVE_PARAMS else value) for key, value in pairs]
    query = urlencode(masked, safe="*")
    return urlunsplit((parsed.scheme, parsed.netloc, parsed.path, query, parsed.fragment))


__all__ = ["EndpointConfig", "redact_url", "REDACTED"]
