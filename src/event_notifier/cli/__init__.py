"""Command line interface for event-notifier.

Usage:
    event-notifier send [<file>] [--data <recipients-file>]
    event-notifier render [<file>] [--data <recipients-file>]
    event-notifier validate [<file>]
    event-notifier placeholders [<file>]

<file> falls back to $EVENT_NOTIFIER_EVENT_FILE when omitted.
"""

import argparse
import logging
import sys
from pathlib import Path

import yaml

from event_notifier.cli.render import cmd_placeholders, cmd_render
from event_notifier.cli.send import cmd_send
from event_notifier.cli.validate import cmd_validate
from event_notifier.paths import default_event_file

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        stream=sys.stderr,
        force=True,
    )


def _resolve_event_file(args: argparse.Namespace) -> Path | None:
    """Resolve the event file from args or environment."""
    raw = getattr(args, "file", None)
    if raw:
        return Path(raw).expanduser()
    return default_event_file()


def _load_event_args(args: argparse.Namespace) -> dict | None:
    """Load the event named by args, applying any --data override.

    Prints the problem and returns None when the files can't be read.
    """
    from event_notifier.loader import load_event, load_recipients

    path = _resolve_event_file(args)
    if path is None:
        print("ERROR: No event file given and EVENT_NOTIFIER_EVENT_FILE is not set")
        return None

    try:
        event = load_event(path)
        data_path = getattr(args, "data", None)
        if data_path:
            event["eventData"] = load_recipients(data_path)
    except (OSError, ValueError, yaml.YAMLError) as e:
        print(f"ERROR: {e}")
        return None
    return event


def _add_event_file(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "file", nargs="?", default=None,
        help="Event definition (.json, .yaml); defaults to $EVENT_NOTIFIER_EVENT_FILE",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="event-notifier",
        description="Send a templated HTTP notification to every recipient",
    )
    parser.add_argument(
        "--verbose", action="store_true",
        help="Log every request",
    )
    sub = parser.add_subparsers(dest="command")

    send = sub.add_parser("send", help="Send the event to every recipient")
    _add_event_file(send)
    send.add_argument(
        "--data", default=None,
        help="Recipient list file, replaces eventData",
    )

    render = sub.add_parser(
        "render", help="Print resolved request bodies without sending",
    )
    _add_event_file(render)
    render.add_argument(
        "--data", default=None,
        help="Recipient list file, replaces eventData",
    )

    val = sub.add_parser("validate", help="Validate an event definition")
    _add_event_file(val)

    ph = sub.add_parser(
        "placeholders", help="List placeholders used by the body template",
    )
    _add_event_file(ph)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    configure_logging(verbose=args.verbose)

    dispatch = {
        "send": cmd_send,
        "render": cmd_render,
        "validate": cmd_validate,
        "placeholders": cmd_placeholders,
    }
    return dispatch[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
