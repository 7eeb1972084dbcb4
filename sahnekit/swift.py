"""Storing lists of string records as JSON."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from os import PathLike
from typing import Any


@dataclass
class SwiftData:
    """A list of string-to-string records."""

    items: list[dict[str, str]] = field(default_factory=list)


def write_swift_data(filename: str | PathLike[str], data: SwiftData) -> None:
    """Write the records to a file as compact JSON."""
    with open(filename, "w", encoding="utf-8") as handle:
        json.dump(
            {"items": data.items},
            handle,
            ensure_ascii=False,
            separators=(",", ":"),
        )


def _validate_items(raw: Any) -> list[dict[str, str]]:
    if not isinstance(raw, dict) or "items" not in raw:
        raise ValueError("missing field 'items'")
    items = raw["items"]
    if not isinstance(items, list):
        raise ValueError("'items' must be a list")
    result = []
    for item in items:
        if not isinstance(item, dict) or not all(
            isinstance(value, str) for value in item.values()
        ):
            raise ValueError("every item must map strings to strings")
        result.append(dict(item))
    return result


def read_swift_data(filename: str | PathLike[str]) -> SwiftData:
    """Read records written by write_swift_data.

    Raises ValueError if the file is not JSON of the expected shape.
    """
    with open(filename, encoding="utf-8") as handle:
        raw = json.load(handle)
    return SwiftData(items=_validate_items(raw))