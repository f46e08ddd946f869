"""Error types raised while validating or dispatching an event."""

from typing import Any


class NotifierError(Exception):
    """Base class for all event-notifier errors."""


class ConfigurationError(NotifierError):
    """An event definition is missing fields or has invalid values."""

    def __init__(self, errors: list[str]):
        self.errors = list(errors)
        super().__init__("Invalid event configuration: " + "; ".join(self.errors))


class TransportError(NotifierError):
    """No usable response was received (connection failure, timeout, bad encoding...)."""

    def __init__(self, message: str, method: str, url: str, index: int):
        super().__init__(message)
        self.method = method
        self.url = url
        self.index = index


class ResponseError(NotifierError):
    """The endpoint answered with a non-success status."""

    def __init__(
        self,
        message: str,
        status_code: int,
        body: Any,
        method: str,
        url: str,
        index: int,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.body = body
        self.method = method
        self.url = url
        self.index = index
