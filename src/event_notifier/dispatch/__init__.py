"""Dispatch module: validate an event and send it to every recipient."""

from event_notifier.dispatch.config import HTTP_METHODS, RequestConfig, validate_event
from event_notifier.dispatch.dispatcher import Event, dispatch, render_bodies
from event_notifier.dispatch.errors import (
    ConfigurationError,
    NotifierError,
    ResponseError,
    TransportError,
)

__all__ = [
    "HTTP_METHODS",
    "RequestConfig",
    "validate_event",
    "Event",
    "dispatch",
    "render_bodies",
    "NotifierError",
    "ConfigurationError",
    "TransportError",
    "ResponseError",
]
