"""Placeholder substitution over JSON-like request templates.

A placeholder is ``{{dotted.path}}`` embedded anywhere in a string leaf.
Paths are looked up in a recipient record; anything that cannot be
resolved (or resolves to a falsy value) is left verbatim.
"""

import json
import math
import re
from collections.abc import Mapping
from typing import Any

PLACEHOLDER_RE = re.compile(r"\{\{(.*?)\}\}")

_MISSING = object()


def _split_path(expr: str) -> list[str]:
    return [segment.strip() for segment in expr.split(".")]


def _step(current: Any, segment: str) -> Any:
    if isinstance(current, Mapping):
        return current[segment] if segment in current else _MISSING
    if isinstance(current, (list, tuple)) and segment.isdecimal():
        index = int(segment)
        # Only canonical indexes: "1" resolves, "01" does not.
        if str(index) == segment and index < len(current):
            return current[index]
    return _MISSING


def lookup(record: Mapping, path: str) -> tuple[bool, Any]:
    """Walk a dot-separated path through a recipient record.

    Args:
        record: Recipient data to search.
        path: Dotted key path, e.g. ``"user.address.city"``. Whitespace
            around each segment is ignored.

    Returns:
        (found, value) tuple. ``value`` is None when not found.
    """
    current: Any = record
    for segment in _split_path(path):
        current = _step(current, segment)
        if current is _MISSING:
            return False, None
    return True, current


def _is_falsy(value: Any) -> bool:
    # Empty containers count as present values.
    if value is None or value is False:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, (int, float)):
        return value == 0 or (isinstance(value, float) and math.isnan(value))
    return False


def _stringify(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (Mapping, list, tuple)):
        return json.dumps(value, separators=(",", ":"), default=str)
    return str(value)


def _replace_in_string(text: str, record: Mapping) -> str:
    def _sub(match: re.Match) -> str:
        found, value = lookup(record, match.group(1))
        if not found or _is_falsy(value):
            return match.group(0)
        return _stringify(value)

    return PLACEHOLDER_RE.sub(_sub, text)


def resolve(template: Any, record: Mapping) -> Any:
    """Substitute placeholders throughout a request template.

    Strings have every ``{{path}}`` replaced with the matching value from
    *record*. Mappings and sequences are rebuilt with each item resolved.
    Any other scalar is returned as-is. The template is never mutated.

    A path that cannot be resolved, or that resolves to ``None``,
    ``False``, zero or ``""``, keeps its literal placeholder text.

    Args:
        template: JSON-like template value.
        record: Recipient data used for lookups.

    Returns:
        A new value tree with the same shape as *template*.
    """
    if isinstance(template, str):
        return _replace_in_string(template, record)
    if isinstance(template, Mapping):
        return {key: resolve(value, record) for key, value in template.items()}
    if isinstance(template, (list, tuple)):
        return type(template)(resolve(item, record) for item in template)
    return template


def find_placeholders(template: Any) -> list[str]:
    """List placeholder paths used anywhere in a template.

    Paths are normalised (segments stripped and rejoined with ``.``) and
    returned in first-seen order without duplicates.
    """
    seen: dict[str, None] = {}

    def _walk(node: Any) -> None:
        if isinstance(node, str):
            for match in PLACEHOLDER_RE.finditer(node):
                seen.setdefault(".".join(_split_path(match.group(1))), None)
        elif isinstance(node, Mapping):
            for value in node.values():
                _walk(value)
        elif isinstance(node, (list, tuple)):
            for item in node:
                _walk(item)

    _walk(template)
    return list(seen)
