"""Version prototype injection for route definitions.

Route definitions use segment syntax: ``/status[/:id]``, where ``[...]``
is an optional part and ``:name`` a parameter. Injecting the version
prototype turns ``/status[/:id]`` into ``/status[/v:version][/:id]``
and adds a ``\\d+`` constraint plus a default for ``version``.
"""

import logging
import re
from collections.abc import Mapping
from typing import Any

from apiver.config import VersioningConfig

logger = logging.getLogger("apiver.routing")

VERSION_SEGMENT = "[/v:version]"
VERSION_CONSTRAINT = r"\d+"

# Any existing version parameter, optional or not: "/v:version", "[/v:version]"
_VERSION_PARAM = re.compile(r"/v:version(?![A-Za-z0-9_])")


def insert_version_segment(route: str) -> str:
    """Splice ``[/v:version]`` into a route pattern.

    The segment goes before the first top-level optional part, or at
    the end when there is none. A pattern that already has a
    ``/v:version`` parameter, optional or mandatory, is returned
    unchanged.

    Examples::

        "/status[/:id]"   -> "/status[/v:version][/:id]"
        "/ping"           -> "/ping[/v:version]"
        "/a[/:b][/:c]"    -> "/a[/v:version][/:b][/:c]"
    """
    if _VERSION_PARAM.search(route):
        return route

    escaped = False
    for index, char in enumerate(route):
        if escaped:
            escaped = False
        elif char == "\\":
            escaped = True
        elif char == "[":
            return route[:index] + VERSION_SEGMENT + route[index:]
    return route + VERSION_SEGMENT


def _with_prototype(route_config: Mapping[str, Any], version: Any) -> dict[str, Any]:
    """Return a copy of one route definition with the prototype applied."""
    options = dict(route_config.get("options") or {})
    options["route"] = insert_version_segment(options.get("route", ""))
    options["constraints"] = {**(options.get("constraints") or {}), "version": VERSION_CONSTRAINT}
    options["defaults"] = {**(options.get("defaults") or {}), "version": version}
    return {**route_config, "options": options}


def inject_prototypes(
    routes: Mapping[str, Any],
    versioning: VersioningConfig,
) -> dict[str, Any]:
    """Return a new route table with version prototypes injected.

    Only routes named in ``versioning.uri`` change. Names that are not
    in *routes* are skipped. Route order is preserved and unchanged
    entries are the same objects as in *routes*.
    """
    result = dict(routes)
    for name in versioning.uri:
        route_config = result.get(name)
        if not isinstance(route_config, Mapping):
            logger.debug("Skipping version prototype for unknown route %r", name)
            continue
        version = versioning.version_for(name)
        result[name] = _with_prototype(route_config, version)
        logger.debug(
            "Injected version prototype into %r: %s (default version %s)",
            name,
            result[name]["options"]["route"],
            version,
        )
    return result
