"""Template module: placeholder substitution for request bodies."""

from event_notifier.template.resolver import find_placeholders, lookup, resolve

__all__ = ["resolve", "lookup", "find_placeholders"]
