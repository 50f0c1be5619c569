"""apiver exception hierarchy.

Shared across listeners, factories, and the config layer so every
module raises and catches the same types.
"""


class ApiverError(Exception):
    """Base for all apiver-specific errors."""


class InvalidArgumentError(ApiverError, TypeError):
    """Raised when a public method receives an argument of the wrong type.

    Raised immediately at the call site. Never raised while a request
    is being handled.
    """

    def __init__(self, method: str, expected: str, received: object) -> None:
        self.method = method
        self.received_type = type(received).__name__
        super().__init__(
            f"{method} expects {expected} as an argument; received {self.received_type}"
        )
