from __future__ import annotations

import logging
from pathlib import Path
from typing import BinaryIO

LOGGER = logging.getLogger(__name__)

BINARY = "binary"
TEXT = "text"
UNKNOWN_FORMAT = "unknown format"

_PRINTABLE = frozenset(range(32, 127))


class ContentClassifier:
    """Labels files that have no extension by sampling their leading lines.

    A file is ``binary`` when any sampled line holds a byte outside printable
    ASCII, ``text`` otherwise, and ``unknown format`` when it cannot be read.
    """

    def __init__(self, max_lines: int = 10, max_line_bytes: int = 64 * 1024) -> None:
        self._max_lines = max_lines
        self._max_line_bytes = max_line_bytes

    def classify(self, path: Path | str) -> str:
        try:
            with open(path, "rb") as handle:
                for _ in range(self._max_lines):
                    line = handle.readline(self._max_line_bytes)
                    if not line:
                        break
                    if not self._is_printable(line):
                        return BINARY
                    if not line.endswith(b"\n"):
                        self._skip_rest_of_line(handle)
        except OSError as exc:
            LOGGER.debug("Cannot sample %s: %s", path, exc)
            return UNKNOWN_FORMAT
        return TEXT

    def _skip_rest_of_line(self, handle: BinaryIO) -> None:
        # only the first max_line_bytes of a long line are sampled
        while True:
            chunk = handle.readline(self._max_line_bytes)
            if not chunk or chunk.endswith(b"\n"):
                return

    @staticmethod
    def _is_printable(line: bytes) -> bool:
        line = line.rstrip(b"\n")
        if line.endswith(b"\r"):
            line = line[:-1]
        return all(byte in _PRINTABLE for byte in line)
