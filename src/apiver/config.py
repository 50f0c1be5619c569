"""Versioning configuration.

VersioningConfig is a frozen dataclass built once from the merged
application configuration. Malformed sections are ignored with a
warning; the versioning hooks are best-effort and never stop an app
from booting.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger("apiver.config")

CONFIG_KEY = "api-tools-versioning"

DEFAULT_VERSION = 1


@dataclass(frozen=True, slots=True)
class VersioningConfig:
    """The ``api-tools-versioning`` section. Immutable after creation.

    Usage::

        config = VersioningConfig(uri=("status",), default_version={"status": 2})
        config.version_for("status")  # 2
    """

    # Route names that get an optional version segment
    uri: tuple[str, ...] = ()

    # int for every route, or {route name: int}; None means DEFAULT_VERSION
    default_version: int | Mapping[str, int] | None = None

    # Extra header rules, registered after the built-in one
    content_types: tuple[str, ...] = ()

    def version_for(self, route_name: str) -> Any:
        """Resolve the default version for *route_name*.

        Per-route mapping value first, then the scalar default, then
        ``DEFAULT_VERSION``.
        """
        default = self.default_version
        if isinstance(default, Mapping):
            value = default.get(route_name)
            return DEFAULT_VERSION if value is None else value
        if default is None or isinstance(default, bool):
            return DEFAULT_VERSION
        return default

    @classmethod
    def from_mapping(cls, config: Mapping[str, Any] | None) -> "VersioningConfig":
        """Read the ``api-tools-versioning`` section of a merged config tree."""
        if not isinstance(config, Mapping):
            return cls()

        section = config.get(CONFIG_KEY)
        if section is None:
            return cls()
        if not isinstance(section, Mapping):
            logger.warning("Ignoring %r: expected a mapping, got %s", CONFIG_KEY, type(section).__name__)
            return cls()

        uri = _route_names(_string_list(section, "uri"))
        content_types = _string_list(section, "content-type")

        default_version = section.get("default_version")
        if isinstance(default_version, Mapping):
            default_version = dict(default_version)

        return cls(
            uri=uri,
            default_version=default_version,
            content_types=content_types,
        )


def _string_list(section: Mapping[str, Any], key: str) -> tuple[Any, ...]:
    """Return ``section[key]`` as a tuple, or ``()`` if unusable."""
    value = section.get(key)
    if value is None:
        return ()
    if isinstance(value, str) or not isinstance(value, (list, tuple)):
        logger.warning("Ignoring %s.%s: expected a list, got %s", CONFIG_KEY, key, type(value).__name__)
        return ()
    return tuple(value)


def _route_names(names: tuple[Any, ...]) -> tuple[str, ...]:
    """Drop ``uri`` entries that cannot be route names."""
    valid = tuple(name for name in names if isinstance(name, str))
    if len(valid) != len(names):
        invalid = [name for name in names if not isinstance(name, str)]
        logger.warning("Ignoring non-string %s.uri entries: %r", CONFIG_KEY, invalid)
    return valid
