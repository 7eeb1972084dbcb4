"""Reading and writing PCM WAV headers and sample data."""

from __future__ import annotations

import argparse
import struct
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from typing import BinaryIO

PCM_FORMAT = 1
_BASE_FMT_SIZE = 16
_U32 = struct.Struct("<I")
_U16 = struct.Struct("<H")
_FMT_BODY = struct.Struct("<HHIIHH")


class WavError(ValueError):
    """The stream is not a PCM WAV file this module understands."""


def _read_exact(reader: BinaryIO, size: int) -> bytes:
    chunks = []
    remaining = size
    while remaining > 0:
        chunk = reader.read(remaining)
        if not chunk:
            break
        chunks.append(chunk)
        remaining -= len(chunk)
    data = b"".join(chunks)
    if len(data) != size:
        raise EOFError(f"unexpected end of WAV data: wanted {size} bytes, got {len(data)}")
    return data


@dataclass
class WavHeader:
    """The format and data size of a PCM WAV file."""

    sample_rate: int
    bits_per_sample: int
    channel_count: int
    data_size: int

    @classmethod
    def read(cls, reader: BinaryIO) -> "WavHeader":
        """Read the RIFF, fmt and data chunk headers from a binary stream.

        Raises WavError for malformed or non-PCM files and EOFError when the
        stream ends early. The stream is left at the start of the samples.
        """
        riff = _read_exact(reader, 12)
        if riff[0:4] != b"RIFF" or riff[8:12] != b"WAVE":
            raise WavError("Invalid RIFF/WAVE header: Missing RIFF or WAVE identifiers")

        fmt_header = _read_exact(reader, 8)
        if fmt_header[0:4] != b"fmt ":
            raise WavError("Invalid fmt subchunk: Missing 'fmt ' identifier")
        (fmt_size,) = _U32.unpack(fmt_header[4:8])
        if fmt_size < _BASE_FMT_SIZE:
            raise WavError(f"Invalid fmt subchunk: size {fmt_size} is too small")

        (
            audio_format,
            channel_count,
            sample_rate,
            _byte_rate,
            _block_align,
            bits_per_sample,
        ) = _FMT_BODY.unpack(_read_exact(reader, _FMT_BODY.size))
        if audio_format != PCM_FORMAT:
            raise WavError(
                "Unsupported audio format: Only PCM format is supported, "
                f"found {audio_format}"
            )
        if fmt_size > _BASE_FMT_SIZE:
            _read_exact(reader, fmt_size - _BASE_FMT_SIZE)

        data_header = _read_exact(reader, 8)
        if data_header[0:4] != b"data":
            raise WavError("Invalid data subchunk: Missing 'data' identifier")
        (data_size,) = _U32.unpack(data_header[4:8])

        return cls(
            sample_rate=sample_rate,
            bits_per_sample=bits_per_sample,
            channel_count=channel_count,
            data_size=data_size,
        )

    def write(self, writer: BinaryIO) -> None:
        """Write a canonical 16-byte-fmt PCM header to a binary stream."""
        byte_rate = self.sample_rate * self.channel_count * self.bits_per_sample // 8
        block_align = self.channel_count * self.bits_per_sample // 8
        try:
            payload = b"".join(
                (
                    b"RIFF",
                    _U32.pack(36 + self.data_size),
                    b"WAVE",
                    b"fmt ",
                    _U32.pack(_BASE_FMT_SIZE),
                    _FMT_BODY.pack(
                        PCM_FORMAT,
                        self.channel_count,
                        self.sample_rate,
                        byte_rate,
                        block_align,
                        self.bits_per_sample,
                    ),
                    b"data",
                    _U32.pack(self.data_size),
                )
            )
        except struct.error as exc:
            raise WavError(f"header field out of range: {exc}") from exc
        writer.write(payload)


def read_wav_data(reader: BinaryIO, header: WavHeader) -> bytes:
    """Read exactly header.data_size bytes of samples."""
    return _read_exact(reader, header.data_size)


def write_wav_data(writer: BinaryIO, data: bytes) -> None:
    """Write raw sample bytes."""
    writer.write(data)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Write and read back a silent WAV file.")
    parser.add_argument("path", nargs="?", default="example.wav")
    args = parser.parse_args(argv)

    header = WavHeader(
        sample_rate=44100,
        bits_per_sample=16,
        channel_count=2,
        data_size=44100 * 2 * 2,
    )
    try:
        with open(args.path, "wb") as out:
            header.write(out)
            write_wav_data(out, bytes(header.data_size))

        with open(args.path, "rb") as inp:
            loaded = WavHeader.read(inp)
            data = read_wav_data(inp, loaded)
    except (OSError, WavError, EOFError) as exc:
        print(f"WAV error: {exc}", file=sys.stderr)
        return 1

    print(f"Sample Rate: {loaded.sample_rate}")
    print(f"Bits Per Sample: {loaded.bits_per_sample}")
    print(f"Channel Count: {loaded.channel_count}")
    print(f"Data Size: {loaded.data_size}")
    print(f"Data Length: {len(data)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())