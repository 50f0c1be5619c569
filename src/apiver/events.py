"""Phase-based event manager.

Listeners attach to a lifecycle ``Phase`` with an integer priority.
``trigger`` runs the listeners of one phase in descending priority;
listeners sharing a priority run in the order they were attached.

Usage::

    events = EventManager()
    handle = events.attach(Phase.ROUTE, on_route, priority=-40)
    events.trigger(Phase.ROUTE, RouteEvent(request, route_match))
    events.detach(handle)
"""

import itertools
import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, TypeAlias

from apiver.http.request import Request
from apiver.routing.route import RouteMatch

logger = logging.getLogger("apiver.events")


class Phase(Enum):
    """Lifecycle points the host framework triggers, in order."""

    MERGE_CONFIG = "merge_config"
    BOOTSTRAP = "bootstrap"
    ROUTE = "route"
    DISPATCH = "dispatch"


@dataclass(slots=True)
class Event:
    """Base event. Any listener may stop the remaining ones from running."""

    propagation_stopped: bool = field(default=False, init=False)

    def stop_propagation(self) -> None:
        self.propagation_stopped = True


@dataclass(slots=True)
class ConfigEvent(Event):
    """Carries the merged configuration tree. Listeners mutate it in place."""

    config: dict[str, Any] = field(default_factory=dict)


@dataclass(slots=True)
class RouteEvent(Event):
    """Carries one request and its route match (``None`` when nothing matched)."""

    request: Request | None = None
    route_match: RouteMatch | None = None


Listener: TypeAlias = Callable[[Any], Any]


@dataclass(frozen=True, slots=True)
class ListenerHandle:
    """Returned by ``attach``; pass it to ``detach``."""

    phase: Phase
    callback: Listener
    priority: int
    order: int


class EventManager:
    """Ordered callback lists keyed by phase."""

    __slots__ = ("_counter", "_listeners")

    def __init__(self) -> None:
        self._listeners: dict[Phase, list[ListenerHandle]] = {}
        self._counter = itertools.count()

    def attach(self, phase: Phase, callback: Listener, priority: int = 1) -> ListenerHandle:
        """Attach *callback* to *phase*. Higher priority runs first."""
        handle = ListenerHandle(phase, callback, priority, next(self._counter))
        handles = self._listeners.setdefault(phase, [])
        handles.append(handle)
        handles.sort(key=lambda h: (-h.priority, h.order))
        return handle

    def detach(self, handle: ListenerHandle) -> bool:
        """Remove a listener. Returns False if it was not attached."""
        handles = self._listeners.get(handle.phase, [])
        try:
            handles.remove(handle)
        except ValueError:
            return False
        return True

    def listeners(self, phase: Phase) -> list[Listener]:
        """Callbacks attached to *phase*, in the order ``trigger`` runs them."""
        return [h.callback for h in self._listeners.get(phase, [])]

    def trigger(self, phase: Phase, event: Event) -> list[Any]:
        """Run every listener of *phase* with *event*; collect their results."""
        results: list[Any] = []
        for handle in list(self._listeners.get(phase, [])):
            results.append(handle.callback(event))
            if event.propagation_stopped:
                logger.debug("Propagation of %s stopped by %r", phase.value, handle.callback)
                break
        return results
