"""Event listeners: attach to an EventManager, no base class required.

Built-in listeners:
    ContentTypeListener -- Version fields from the Content-Type header
    AcceptListener -- Version fields from the Accept header
    PrototypeRouteListener -- Optional version segment for configured routes
"""

from apiver.listeners.accept import AcceptListener
from apiver.listeners.content_type import DEFAULT_RULE, ContentTypeListener
from apiver.listeners.prototype import PrototypeRouteListener

__all__ = [
    "DEFAULT_RULE",
    "AcceptListener",
    "ContentTypeListener",
    "PrototypeRouteListener",
]
