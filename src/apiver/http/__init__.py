"""HTTP request abstractions consumed by the header listeners."""

from apiver.http.headers import Headers
from apiver.http.request import Request

__all__ = ["Headers", "Request"]
