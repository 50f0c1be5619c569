"""Content-Type version listener.

Reads the request's Content-Type header after routing and copies the
version fields it carries into the route match::

    Content-Type: application/vnd.acme.v2.status+json; charset=utf-8

    laminas_ver_vendor   = "acme"
    laminas_ver_version  = "2"
    laminas_ver_resource = "status"

Extraction is best-effort. A request that does not fit any rule is
dispatched unchanged.
"""

import logging
from collections.abc import Iterable
from typing import Any

from apiver.errors import InvalidArgumentError
from apiver.events import EventManager, ListenerHandle, Phase, RouteEvent
from apiver.http.request import Request
from apiver.listeners.rules import match_rules
from apiver.routing.route import RouteMatch

logger = logging.getLogger("apiver.listeners")

DEFAULT_RULE = (
    r"application/vnd\.(?P<laminas_ver_vendor>[^.]+)"
    r"\.v(?P<laminas_ver_version>\d+)"
    r"(?:\.(?P<laminas_ver_resource>[a-zA-Z0-9_-]+))?"
    r"(?:\+[a-z]+)?"
)

# After the router (priority 1), before dispatch
ROUTE_PRIORITY = -40


class ContentTypeListener:
    """Inject version fields parsed from a request header into the route match.

    Rules are tried most recently added first, so rules added through
    ``add_rule`` take precedence over the built-in one::

        listener = ContentTypeListener()
        listener.add_rule(r"text/x-acme-(?P<laminas_ver_version>\\d+)")
        listener.attach(events)
    """

    header_name = "content-type"

    def __init__(self, rules: Iterable[str] = (), *, header_name: str | None = None) -> None:
        if header_name is not None:
            self.header_name = header_name.lower()
        self._rules: list[str] = [DEFAULT_RULE]
        self._handles: list[ListenerHandle] = []
        for rule in rules:
            self.add_rule(rule)

    @property
    def rules(self) -> list[str]:
        """Registered rules in registration order (a copy)."""
        return list(self._rules)

    def add_rule(self, rule: Any) -> "ContentTypeListener":
        """Append a rule. Raises ``InvalidArgumentError`` unless *rule* is a str."""
        if not isinstance(rule, str):
            raise InvalidArgumentError(
                f"{type(self).__name__}.add_rule", "a string regular expression", rule
            )
        self._rules.append(rule)
        return self

    def clear_rules(self) -> None:
        """Remove every rule, the built-in one included."""
        self._rules.clear()

    def attach(self, events: EventManager, priority: int = ROUTE_PRIORITY) -> None:
        self._handles.append(events.attach(Phase.ROUTE, self.on_route, priority))

    def detach(self, events: EventManager) -> None:
        for handle in self._handles:
            events.detach(handle)
        self._handles.clear()

    def on_route(self, event: RouteEvent) -> None:
        """Match the header and inject the result into the route match."""
        route_match = getattr(event, "route_match", None)
        if not isinstance(route_match, RouteMatch):
            return

        request = getattr(event, "request", None)
        if not isinstance(request, Request):
            return

        value = self.header_value(request)
        if value is None:
            return

        matches = self.parse_header(value)
        if matches is not None:
            self.inject(route_match, matches)

    def header_value(self, request: Request) -> str | None:
        """Return the raw field value of the examined header, or ``None``."""
        return request.headers.get(self.header_name)

    def parse_header(self, value: str) -> dict[str, str] | None:
        """Return the named groups of the first rule matching *value*.

        Parameters such as ``; charset=utf-8`` are ignored.
        """
        media_type = value.split(";", 1)[0].strip()
        return match_rules(self._rules, media_type)

    def inject(self, route_match: RouteMatch, matches: dict[str, str]) -> None:
        """Copy non-empty named groups into *route_match*."""
        # Named groups only; optional groups that took no part are None
        for key, value in matches.items():
            if not value:
                continue
            route_match.set_param(key, value)
            logger.debug("Route %r: %s=%r from %s", route_match.name, key, value, self.header_name)
