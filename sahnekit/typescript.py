"""Loading TypeScript sources and computing simple statistics."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from dataclasses import dataclass

MAX_SIZE = 1024 * 1024


@dataclass(frozen=True)
class TypeScriptAnalysis:
    line_count: int
    char_count: int


@dataclass
class TypeScriptFile:
    """A TypeScript source file and its text."""

    path: str
    content: str

    @classmethod
    def from_file(cls, path: str) -> "TypeScriptFile":
        with open(path, encoding="utf-8", newline="") as handle:
            return cls(str(path), handle.read())

    def parse(self) -> None:
        """Check the file; raise ValueError if it exceeds 1 MiB."""
        if len(self.content.encode("utf-8")) > MAX_SIZE:
            raise ValueError(f"File too large: {self.path}")

    def analyze(self) -> TypeScriptAnalysis:
        """Count lines and characters."""
        text = self.content
        if not text:
            line_count = 0
        else:
            line_count = text.count("\n") + (0 if text.endswith("\n") else 1)
        return TypeScriptAnalysis(line_count=line_count, char_count=len(text))


def process_typescript_file(path: str) -> TypeScriptAnalysis:
    """Load, check and analyse a file, reporting the results."""
    ts_file = TypeScriptFile.from_file(path)
    try:
        ts_file.parse()
    except ValueError as exc:
        print(f"Could not parse TypeScript file: {exc}", file=sys.stderr)
    else:
        print("TypeScript file parsed successfully.")
    analysis = ts_file.analyze()
    print(
        f"TypeScript file analysis: lines: {analysis.line_count}, "
        f"characters: {analysis.char_count}"
    )
    return analysis


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Analyse a TypeScript file.")
    parser.add_argument("path", nargs="?", default="example.ts")
    args = parser.parse_args(argv)
    try:
        process_typescript_file(args.path)
    except (OSError, UnicodeDecodeError) as exc:
        print(f"File processing error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())