"""Listener factories.

Build header listeners from the merged application configuration. The
config lookup lives here so the listeners only ever see a list of
patterns.
"""

from collections.abc import Mapping
from typing import Any

from apiver.config import VersioningConfig
from apiver.listeners.accept import AcceptListener
from apiver.listeners.content_type import ContentTypeListener


def content_type_listener_factory(config: Mapping[str, Any] | None = None) -> ContentTypeListener:
    """Return a ContentTypeListener with the rules under ``api-tools-versioning.content-type``.

    Raises:
        InvalidArgumentError: If a configured rule is not a string.
    """
    return ContentTypeListener(VersioningConfig.from_mapping(config).content_types)


def accept_listener_factory(config: Mapping[str, Any] | None = None) -> AcceptListener:
    """Return an AcceptListener with the same configured rules."""
    return AcceptListener(VersioningConfig.from_mapping(config).content_types)
