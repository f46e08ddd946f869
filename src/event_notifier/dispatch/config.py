"""Event definition validation and the request configuration it produces."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from event_notifier.dispatch.errors import ConfigurationError

HTTP_METHODS = ("GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS")

REQUIRED_FIELDS = ("eventRequestUrl", "eventRequestType", "eventRequestData", "eventData")


def validate_event(event: Any) -> tuple[bool, list[str]]:
    """Validate an event definition structure.

    Args:
        event: Mapping with ``eventRequestUrl``, ``eventRequestType``,
            ``eventRequestData``, ``eventData`` and optionally
            ``eventRequestHeaders``.

    Returns:
        (valid, errors) tuple.
    """
    if not isinstance(event, Mapping):
        return False, [f"Event must be a mapping, got {type(event).__name__}"]

    errors = []

    for name in REQUIRED_FIELDS:
        if event.get(name) is None:
            errors.append(f"Missing required field: {name}")

    url = event.get("eventRequestUrl")
    if url is not None:
        if not isinstance(url, str) or not url.strip():
            errors.append("eventRequestUrl must be a non-empty string")
        elif not url.startswith(("http://", "https://")):
            errors.append(f"eventRequestUrl '{url}' must start with http:// or https://")

    method = event.get("eventRequestType")
    if method is not None:
        if not isinstance(method, str) or method.upper() not in HTTP_METHODS:
            errors.append(
                f"Invalid eventRequestType: {method!r} (expected one of {', '.join(HTTP_METHODS)})"
            )

    headers = event.get("eventRequestHeaders")
    if headers is not None:
        if not isinstance(headers, Mapping):
            errors.append("eventRequestHeaders must be a mapping")
        else:
            for key, value in headers.items():
                if not isinstance(key, str) or not isinstance(value, str):
                    errors.append(f"Header {key!r} must map a string to a string")

    recipients = event.get("eventData")
    if recipients is not None:
        if not isinstance(recipients, list):
            errors.append("eventData must be a list of mappings")
        else:
            for i, item in enumerate(recipients):
                if not isinstance(item, Mapping):
                    errors.append(f"eventData[{i}] must be a mapping")

    return len(errors) == 0, errors


@dataclass(frozen=True)
class RequestConfig:
    """Where and how each notification is sent."""

    url: str
    method: str
    body_template: Any
    headers: dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        errors = []
        if not self.url:
            errors.append("url is required")
        if not self.method:
            errors.append("method is required")
        if errors:
            raise ConfigurationError(errors)
        object.__setattr__(self, "method", self.method.upper())

    @classmethod
    def from_event(cls, event: Mapping) -> "RequestConfig":
        """Build a config from an event definition, validating it first.

        Raises:
            ConfigurationError: If the event fails validation.
        """
        ok, errors = validate_event(event)
        if not ok:
            raise ConfigurationError(errors)
        return cls(
            url=event["eventRequestUrl"],
            method=event["eventRequestType"],
            body_template=event["eventRequestData"],
            headers=dict(event.get("eventRequestHeaders") or {}),
        )
