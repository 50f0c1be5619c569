"""Tests for apiver.module: end-to-end wiring through the event manager."""

from apiver.events import ConfigEvent, EventManager, Phase, RouteEvent
from apiver.http.headers import Headers
from apiver.http.request import Request
from apiver.listeners.content_type import ROUTE_PRIORITY
from apiver.module import VersioningModule
from apiver.routing.route import RouteMatch


def _config() -> dict:
    return {
        "router": {
            "routes": {
                "status": {"options": {"route": "/status[/:id]"}},
                "health": {"options": {"route": "/health"}},
            },
        },
        "api-tools-versioning": {
            "uri": ["status"],
            "default_version": {"status": 2},
            "content-type": [r"application/x-acme\+v(?P<laminas_ver_version>\d+)"],
        },
    }


class TestVersioningModule:
    def test_init_attaches_prototype_listener(self) -> None:
        events = EventManager()
        module = VersioningModule()
        module.init(events)
        assert events.listeners(Phase.MERGE_CONFIG) == [module.prototype_listener.on_merge_config]
        assert events.listeners(Phase.ROUTE) == []

    def test_full_lifecycle(self) -> None:
        events = EventManager()
        module = VersioningModule()
        module.init(events)

        config = _config()
        events.trigger(Phase.MERGE_CONFIG, ConfigEvent(config))
        module.on_bootstrap(events, config)

        status = config["router"]["routes"]["status"]["options"]
        assert status["route"] == "/status[/v:version][/:id]"
        assert status["defaults"] == {"version": 2}
        assert config["router"]["routes"]["health"] == {"options": {"route": "/health"}}

        route = RouteMatch(name="status", params=dict(status["defaults"]))
        events.attach(Phase.ROUTE, lambda event: event.route_match.set_param("matched", "yes"))
        request = Request(
            "GET",
            "/status",
            Headers.from_pairs(
                {
                    "Accept": "application/vnd.acme.v3+json",
                    "Content-Type": "application/x-acme+v5",
                }
            ),
        )
        events.trigger(Phase.ROUTE, RouteEvent(request, route))

        assert route.get_param("matched") == "yes"
        assert route.get_param("laminas_ver_vendor") == "acme"
        # Content-Type is attached last and overwrites the Accept version
        assert route.get_param("laminas_ver_version") == "5"
        assert route.get_param("version") == 2

    def test_bootstrap_attaches_header_listeners_after_routing(self) -> None:
        events = EventManager()
        module = VersioningModule()
        module.on_bootstrap(events, None)

        assert module.accept_listener is not None
        assert module.content_type_listener is not None
        assert events.listeners(Phase.ROUTE) == [
            module.accept_listener.on_route,
            module.content_type_listener.on_route,
        ]
        assert ROUTE_PRIORITY < 1

    def test_route_without_match_is_ignored(self) -> None:
        events = EventManager()
        module = VersioningModule()
        module.on_bootstrap(events, {})
        request = Request("GET", "/", Headers.from_pairs({"Accept": "application/vnd.acme.v3"}))
        assert events.trigger(Phase.ROUTE, RouteEvent(request, None)) == [None, None]
