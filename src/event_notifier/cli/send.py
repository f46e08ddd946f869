"""Send CLI command."""

import argparse
import asyncio
import json
import logging

logger = logging.getLogger(__name__)


def cmd_send(args: argparse.Namespace) -> int:
    from event_notifier.cli import _load_event_args
    from event_notifier.dispatch import Event, NotifierError, ResponseError

    event = _load_event_args(args)
    if event is None:
        return 1

    try:
        notifier = Event(event)
        logger.info(
            "Sending %s %s to %d recipient(s)",
            notifier.request_type, notifier.request_url, len(notifier.recipients),
        )
        responses = asyncio.run(notifier.handle_event())
    except NotifierError as e:
        print(f"ERROR: {e}")
        if isinstance(e, ResponseError) and e.body:
            print(f"  Response: {json.dumps(e.body, ensure_ascii=False)}")
        return 1

    print(json.dumps(responses, indent=2, ensure_ascii=False))
    return 0
