"""Level-filtered log files tagged with the drive they run on."""

from __future__ import annotations

import argparse
import enum
import sys
import threading
from collections.abc import Callable, Sequence
from datetime import datetime
from os import PathLike
from pathlib import Path

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


class LogLevel(enum.IntEnum):
    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3


class DriveType(enum.Enum):
    HDD = "HDD"
    SSD = "SSD"
    SATA = "SATA"
    SAS = "SAS"
    NVME = "NVME"
    UFS = "UFS"
    EMMC = "EMMC"
    USB = "USB"
    UNKNOWN = "UNKNOWN"


class Logger:
    """Appends messages at or above a minimum level to a file."""

    def __init__(
        self,
        filename: str | PathLike[str],
        level: LogLevel,
        drive_type: DriveType,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.level = level
        self.drive_type = drive_type
        self._clock = clock
        self._lock = threading.Lock()
        self._file = open(filename, "a", encoding="utf-8")

    def __enter__(self) -> "Logger":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def log(self, level: LogLevel, message: str) -> bool:
        """Write the message if its level is high enough; return whether it was.

        Write failures are ignored.
        """
        if level < self.level:
            return False
        timestamp = self._clock().strftime(TIMESTAMP_FORMAT)
        line = f"[{timestamp}] {level.name} ({self.drive_type.value}) {message}\n"
        with self._lock:
            try:
                self._file.write(line)
                self._file.flush()
            except (OSError, ValueError):
                return False
        return True

    def close(self) -> None:
        with self._lock:
            self._file.close()


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Write sample drive log files.")
    parser.add_argument("directory", nargs="?", default=".")
    args = parser.parse_args(argv)
    base = Path(args.directory)
    samples = [
        ("hdd_logfile.log", LogLevel.DEBUG, DriveType.HDD, LogLevel.INFO,
         "An info message on the HDD."),
        ("ssd_logfile.log", LogLevel.WARNING, DriveType.SSD, LogLevel.WARNING,
         "A warning message on the SSD."),
        ("usb_logfile.log", LogLevel.ERROR, DriveType.USB, LogLevel.ERROR,
         "An error message on the USB drive."),
        ("nvme_logfile.log", LogLevel.ERROR, DriveType.NVME, LogLevel.ERROR,
         "An error message on the NVMe drive."),
    ]
    try:
        for filename, minimum, drive, level, message in samples:
            with Logger(base / filename, minimum, drive) as logger:
                logger.log(level, message)
    except OSError as exc:
        print(f"Log error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())