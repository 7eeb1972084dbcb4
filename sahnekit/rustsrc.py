"""Finding function definitions in Rust source files."""

from __future__ import annotations

from os import PathLike


def find_function_definitions(filepath: str | PathLike[str]) -> list[str]:
    """Return the trimmed lines that start a function definition ("fn ")."""
    with open(filepath, encoding="utf-8") as handle:
        stripped = (line.strip() for line in handle)
        return [line for line in stripped if line.startswith("fn ")]


def process_rust_file(filepath: str | PathLike[str]) -> list[str]:
    """Print each function definition found in the file and return them."""
    definitions = find_function_definitions(filepath)
    for definition in definitions:
        print(f"Function definition found: {definition}")
    return definitions