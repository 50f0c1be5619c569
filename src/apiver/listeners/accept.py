"""Accept version listener.

Same rules as ``ContentTypeListener``, applied to the media ranges of
the Accept header. Ranges are tried in the order the client sent them.
"""

from apiver.http.request import Request
from apiver.listeners.content_type import ContentTypeListener
from apiver.listeners.rules import match_rules


class AcceptListener(ContentTypeListener):
    """Inject version fields parsed from the Accept header."""

    header_name = "accept"

    def header_value(self, request: Request) -> str | None:
        return request.headers.field_value(self.header_name)

    def parse_header(self, value: str) -> dict[str, str] | None:
        for media_range in value.split(","):
            media_type = media_range.split(";", 1)[0].strip()
            if not media_type:
                continue
            matches = match_rules(self._rules, media_type)
            if matches is not None:
                return matches
        return None
