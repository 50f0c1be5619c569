"""RouteMatch: the parameters of one matched route."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(slots=True)
class RouteMatch:
    """Result of a successful route match.

    Created by the router once per request. Listeners running after
    routing may add or overwrite parameters before dispatch reads them.
    """

    name: str | None = None
    params: dict[str, Any] = field(default_factory=dict)

    def get_param(self, name: str, default: Any = None) -> Any:
        """Return the parameter *name*, or *default* if unset."""
        return self.params.get(name, default)

    def set_param(self, name: str, value: Any) -> None:
        """Set *name*, replacing any existing value."""
        self.params[name] = value
