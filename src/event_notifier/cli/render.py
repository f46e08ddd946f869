"""Render and placeholder CLI commands (no requests are sent)."""

import argparse
import json


def cmd_render(args: argparse.Namespace) -> int:
    from event_notifier.cli import _load_event_args
    from event_notifier.dispatch import ConfigurationError, Event

    event = _load_event_args(args)
    if event is None:
        return 1

    try:
        bodies = Event(event).render()
    except ConfigurationError as e:
        print(f"ERROR: {e}")
        return 1

    print(json.dumps(bodies, indent=2, ensure_ascii=False))
    return 0


def cmd_placeholders(args: argparse.Namespace) -> int:
    from event_notifier.cli import _load_event_args
    from event_notifier.template import find_placeholders

    event = _load_event_args(args)
    if event is None:
        return 1

    found = find_placeholders(event.get("eventRequestData"))
    if not found:
        print("No placeholders in eventRequestData.")
        return 0

    for path in found:
        print(f"  {{{{{path}}}}}")
    print(f"\n  {len(found)} placeholder(s)")
    return 0
