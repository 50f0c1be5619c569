"""apiver: API versioning hooks for routed web applications.

Reads API versions from media types and gives configured routes an
optional version segment.

Basic usage::

    from apiver import ConfigEvent, EventManager, Phase, RouteEvent, VersioningModule

    events = EventManager()
    module = VersioningModule()
    module.init(events)
    events.trigger(Phase.MERGE_CONFIG, ConfigEvent(config))
    module.on_bootstrap(events, config)

    # per request, after routing
    events.trigger(Phase.ROUTE, RouteEvent(request, route_match))
    route_match.get_param("laminas_ver_version")
"""

__version__ = "0.1.0-dev"
__all__ = [
    "AcceptListener",
    "ApiverError",
    "ConfigEvent",
    "ContentTypeListener",
    "EventManager",
    "Headers",
    "InvalidArgumentError",
    "Phase",
    "PrototypeRouteListener",
    "Request",
    "RouteEvent",
    "RouteMatch",
    "VersioningConfig",
    "VersioningModule",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import apiver`` fast while providing a clean top-level API.
    """
    if name in ("ContentTypeListener", "AcceptListener", "PrototypeRouteListener"):
        from apiver import listeners as _listeners

        return getattr(_listeners, name)

    if name in ("ConfigEvent", "EventManager", "Phase", "RouteEvent"):
        from apiver import events as _events

        return getattr(_events, name)

    if name in ("ApiverError", "InvalidArgumentError"):
        from apiver import errors as _errors

        return getattr(_errors, name)

    if name in ("Headers", "Request"):
        from apiver import http as _http

        return getattr(_http, name)

    if name == "RouteMatch":
        from apiver.routing.route import RouteMatch

        return RouteMatch

    if name == "VersioningConfig":
        from apiver.config import VersioningConfig

        return VersioningConfig

    if name == "VersioningModule":
        from apiver.module import VersioningModule

        return VersioningModule

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
