"""Reading YAML documents with typed top-level lookups."""

from __future__ import annotations

from dataclasses import dataclass
from os import PathLike
from typing import Any, TypeVar

import yaml

T = TypeVar("T")


class YamlFileError(ValueError):
    """The file is not valid UTF-8 or not valid YAML."""


@dataclass
class YamlFile:
    """A parsed YAML document."""

    data: Any

    @classmethod
    def load_from_file(cls, path: str | PathLike[str]) -> "YamlFile":
        with open(path, "rb") as handle:
            raw = handle.read()
        try:
            text = raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise YamlFileError(f"invalid UTF-8 in {path}") from exc
        try:
            return cls(yaml.safe_load(text))
        except yaml.YAMLError as exc:
            raise YamlFileError(f"invalid YAML in {path}: {exc}") from exc

    def get_value(self, key: str, expected_type: type[T]) -> T | None:
        """Top-level value for key if it is of expected_type, else None.

        Integers are accepted where a float is asked for; booleans never
        count as integers.
        """
        if not isinstance(self.data, dict) or key not in self.data:
            return None
        value = self.data[key]
        if isinstance(value, bool) and expected_type is not bool:
            return None
        if expected_type is float and isinstance(value, int):
            return float(value)  # type: ignore[return-value]
        if isinstance(value, expected_type):
            return value
        return None