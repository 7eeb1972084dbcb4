"""Preparing a RAR extraction: output directory and archive access."""

from __future__ import annotations

import sys
from os import PathLike
from pathlib import Path

PROBE_SIZE = 512


def extract_rar(rar_path: str | PathLike[str], output_path: str | PathLike[str]) -> int:
    """Make sure the output directory exists, then open the archive.

    Reads the first bytes of the archive and returns how many were read
    (at most 512). Directory and open errors are raised; a failed read is
    only reported and counts as zero bytes.
    """
    output = Path(output_path)
    if output.is_dir():
        print(f"Output directory already exists: {output}")
    else:
        output.mkdir(parents=True, exist_ok=True)
        print(f"Output directory created: {output}")

    with open(rar_path, "rb") as archive:
        print(f"RAR file opened: {rar_path}")
        try:
            count = len(archive.read(PROBE_SIZE))
        except OSError as exc:
            print(f"Error reading RAR file: {exc}", file=sys.stderr)
            count = 0
        else:
            print(f"Read {count} bytes from RAR file.")
    print("RAR file closed.")
    return count