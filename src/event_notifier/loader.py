"""Load event definitions and recipient lists from JSON or YAML files."""

import json
from pathlib import Path
from typing import Any

import yaml

YAML_SUFFIXES = {".yaml", ".yml"}


def _read(path: Path) -> Any:
    with open(path, encoding="utf-8") as f:
        if path.suffix.lower() in YAML_SUFFIXES:
            return yaml.safe_load(f)
        return json.load(f)


def load_event(path: Path | str) -> dict:
    """Read an event definition file.

    Args:
        path: Path to a ``.json``, ``.yaml`` or ``.yml`` file.

    Returns:
        Parsed event dict.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        ValueError: If the file doesn't contain a mapping.
    """
    event_path = Path(path)
    data = _read(event_path)

    if not isinstance(data, dict):
        raise ValueError(f"Event file {event_path} is not a mapping")

    return data


def load_recipients(path: Path | str) -> list:
    """Read a recipient list file (a top-level list of mappings)."""
    recipients_path = Path(path)
    data = _read(recipients_path)

    if not isinstance(data, list):
        raise ValueError(f"Recipients file {recipients_path} is not a list")

    return data
