"""Validate CLI command."""

import argparse


def cmd_validate(args: argparse.Namespace) -> int:
    from event_notifier.cli import _load_event_args
    from event_notifier.dispatch.config import validate_event

    event = _load_event_args(args)
    if event is None:
        return 1

    ok, errors = validate_event(event)
    if ok:
        print(f"PASS: {args.file or 'event'} ({len(event['eventData'])} recipient(s))")
    else:
        print(f"FAIL: {args.file or 'event'}")
        for e in errors:
            print(f"  {e}")
    return 0 if ok else 1
