"""Default file locations.

Environment variables:
    EVENT_NOTIFIER_EVENT_FILE: event definition used when none is given
"""

from __future__ import annotations

import os
from pathlib import Path


def default_event_file() -> Path | None:
    """Return the event file named by $EVENT_NOTIFIER_EVENT_FILE, if set."""
    env = os.environ.get("EVENT_NOTIFIER_EVENT_FILE")
    if env:
        return Path(env).expanduser()
    return None
