"""event-notifier: send a templated HTTP notification to a list of recipients."""

from event_notifier.dispatch import (
    ConfigurationError,
    Event,
    NotifierError,
    RequestConfig,
    ResponseError,
    TransportError,
    render_bodies,
    validate_event,
)
from event_notifier.template import find_placeholders, resolve

__all__ = [
    "Event",
    "RequestConfig",
    "render_bodies",
    "resolve",
    "find_placeholders",
    "validate_event",
    "NotifierError",
    "ConfigurationError",
    "TransportError",
    "ResponseError",
]
