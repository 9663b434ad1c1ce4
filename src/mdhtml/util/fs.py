"""Line supplier and line consumer for file-backed conversions"""

import logging
from pathlib import Path
from typing import Iterable


logger = logging.getLogger(__name__)


def read_lines(path: Path, encoding: str = "utf-8") -> list[str]:
    """Return every line of path without its terminator.

    Only "\\n" ends a line and one trailing "\\r" is dropped, so form feeds and
    Unicode line separators stay inside the line they belong to.
    """
    with path.open(encoding=encoding, newline="") as fh:
        lines = fh.read().split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def write_lines(path: Path, lines: Iterable[str], encoding: str = "utf-8") -> int:
    """Write each line followed by a newline, creating parent dirs. Returns bytes written."""
    path.parent.mkdir(parents=True, exist_ok=True)
    total = 0
    with path.open("wb") as fh:
        for line in lines:
            data = f"{line}\n".encode(encoding)
            fh.write(data)
            total += len(data)
            logger.debug("Written %d bytes", len(data))
    return total
