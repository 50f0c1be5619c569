"""Prototype route listener.

At config merge time, gives every route listed under
``api-tools-versioning.uri`` an optional ``[/v:version]`` segment, a
``\\d+`` constraint, and a default version::

    api-tools-versioning:
      uri: [status, user]
      default_version: {status: 2}

    router.routes.status.options.route     "/status[/:id]" -> "/status[/v:version][/:id]"
    router.routes.status.options.defaults  {"version": 2, ...}
    router.routes.user.options.defaults    {"version": 1, ...}
"""

import logging
from collections.abc import MutableMapping
from typing import Any

from apiver.config import VersioningConfig
from apiver.events import ConfigEvent, EventManager, ListenerHandle, Phase
from apiver.routing.prototype import inject_prototypes

logger = logging.getLogger("apiver.listeners")


class PrototypeRouteListener:
    """Rewrite configured route definitions in the merged configuration."""

    __slots__ = ("_handles",)

    def __init__(self) -> None:
        self._handles: list[ListenerHandle] = []

    def attach(self, events: EventManager, priority: int = 1) -> None:
        self._handles.append(events.attach(Phase.MERGE_CONFIG, self.on_merge_config, priority))

    def detach(self, events: EventManager) -> None:
        for handle in self._handles:
            events.detach(handle)
        self._handles.clear()

    def on_merge_config(self, event: ConfigEvent) -> None:
        """Apply version prototypes to ``event.config`` in place."""
        config = event.config
        versioning = VersioningConfig.from_mapping(config)
        if not versioning.uri:
            return

        routes = _router_routes(config)
        if routes is None:
            logger.debug("No router.routes in merged config; nothing to version")
            return

        updated = inject_prototypes(routes, versioning)
        # Write back into the caller's tree so other references see it
        for name, route_config in updated.items():
            if route_config is not routes[name]:
                routes[name] = route_config


def _router_routes(config: MutableMapping[str, Any]) -> MutableMapping[str, Any] | None:
    router = config.get("router")
    if not isinstance(router, MutableMapping):
        return None
    routes = router.get("routes")
    if not isinstance(routes, MutableMapping):
        return None
    return routes
