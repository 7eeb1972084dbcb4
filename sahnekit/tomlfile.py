"""Reading TOML documents with simple typed lookups."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass
from os import PathLike
from typing import Any


class TomlFileError(ValueError):
    """The file is not valid UTF-8 or not valid TOML."""


@dataclass
class TomlFile:
    """A parsed TOML document."""

    data: dict[str, Any]

    @classmethod
    def load(cls, path: str | PathLike[str]) -> "TomlFile":
        with open(path, "rb") as handle:
            raw = handle.read()
        try:
            text = raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise TomlFileError(f"invalid UTF-8 in {path}") from exc
        try:
            return cls(tomllib.loads(text))
        except tomllib.TOMLDecodeError as exc:
            raise TomlFileError(f"invalid TOML in {path}: {exc}") from exc

    def get_string(self, key: str) -> str | None:
        """Top-level string value for key, or None."""
        value = self.data.get(key)
        return value if isinstance(value, str) else None

    def get_integer(self, key: str) -> int | None:
        """Top-level integer value for key, or None."""
        value = self.data.get(key)
        if isinstance(value, int) and not isinstance(value, bool):
            return value
        return None