"""A simple "key = value" settings file."""

from __future__ import annotations

from dataclasses import dataclass, field
from os import PathLike


@dataclass
class ScalaFile:
    """Key/value pairs read from or written to a "key = value" file."""

    data: dict[str, str] = field(default_factory=dict)

    @classmethod
    def load(cls, filename: str | PathLike[str]) -> "ScalaFile":
        """Read a file; lines without "=" are ignored."""
        result = cls()
        with open(filename, encoding="utf-8") as handle:
            for line in handle:
                key, sep, value = line.partition("=")
                if sep:
                    result.data[key.strip()] = value.strip()
        return result

    def save(self, filename: str | PathLike[str]) -> None:
        """Write every pair as a "key = value" line."""
        with open(filename, "w", encoding="utf-8") as handle:
            for key, value in self.data.items():
                handle.write(f"{key} = {value}\n")

    def get(self, key: str) -> str | None:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value