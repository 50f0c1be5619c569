"""Immutable HTTP request metadata.

Only what the versioning listeners read: method, path, and headers.
"""

from dataclasses import dataclass, field

from apiver.http.headers import Headers


@dataclass(frozen=True, slots=True)
class Request:
    """An immutable HTTP request.

    Usage::

        request = Request("GET", "/status", Headers.from_pairs({"Accept": "application/json"}))
    """

    method: str
    path: str
    headers: Headers = field(default_factory=Headers)
