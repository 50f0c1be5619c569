"""Versioning module: wires the listeners into a host application.

Usage::

    module = VersioningModule()
    module.init(events)                 # before configuration is merged
    events.trigger(Phase.MERGE_CONFIG, ConfigEvent(config))
    module.on_bootstrap(events, config)  # once the merged config is final
"""

import logging
from collections.abc import Mapping
from typing import Any

from apiver.events import EventManager
from apiver.factory import accept_listener_factory, content_type_listener_factory
from apiver.listeners.accept import AcceptListener
from apiver.listeners.content_type import ContentTypeListener
from apiver.listeners.prototype import PrototypeRouteListener

logger = logging.getLogger("apiver")


class VersioningModule:
    """Attach the prototype listener at merge time and the header listeners at bootstrap."""

    __slots__ = ("accept_listener", "content_type_listener", "prototype_listener")

    def __init__(self) -> None:
        self.prototype_listener = PrototypeRouteListener()
        self.content_type_listener: ContentTypeListener | None = None
        self.accept_listener: AcceptListener | None = None

    def init(self, events: EventManager) -> None:
        self.prototype_listener.attach(events)

    def on_bootstrap(self, events: EventManager, config: Mapping[str, Any] | None) -> None:
        self.accept_listener = accept_listener_factory(config)
        self.content_type_listener = content_type_listener_factory(config)
        self.accept_listener.attach(events)
        self.content_type_listener.attach(events)
        logger.debug(
            "Versioning listeners attached with %d rule(s)",
            len(self.content_type_listener.rules),
        )
