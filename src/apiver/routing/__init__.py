"""Routing: the route match parameter set and the version prototype
transform applied to route definitions at config merge time.
"""

from apiver.routing.prototype import (
    VERSION_CONSTRAINT,
    VERSION_SEGMENT,
    inject_prototypes,
    insert_version_segment,
)
from apiver.routing.route import RouteMatch

__all__ = [
    "VERSION_CONSTRAINT",
    "VERSION_SEGMENT",
    "RouteMatch",
    "inject_prototypes",
    "insert_version_segment",
]
