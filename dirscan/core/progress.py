from __future__ import annotations

import sys
import threading
from collections.abc import Callable
from typing import TextIO

FRAMES = ("◐", "◓", "◑", "◒")


class ProgressTicker:
    """Redraws a one-line scan status on a background thread until stopped."""

    def __init__(
        self,
        counts: Callable[[], tuple[int, int]],
        elapsed: Callable[[], float],
        stream: TextIO | None = None,
        interval: float = 0.25,
    ) -> None:
        self._counts = counts
        self._elapsed = elapsed
        self._stream = stream or sys.stderr
        self._interval = interval
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None

    def line(self, frame: str) -> str:
        files, directories = self._counts()
        seconds = self._elapsed()
        rate = files / seconds if seconds > 0 else 0.0
        return (
            f"\r{frame} Scanning... Files scanned: {files} "
            f"Directories scanned: {directories} Rate: {rate:.0f} files/second \033[0K"
        )

    def start(self) -> None:
        self._thread = threading.Thread(target=self._run, name="dirscan-progress", daemon=True)
        self._thread.start()

    def stop(self) -> None:
        self._stop.set()
        if self._thread is not None:
            self._thread.join()
            self._thread = None
            self._stream.write("\n")
            self._stream.flush()

    def _run(self) -> None:
        index = 0
        while True:
            self._stream.write(self.line(FRAMES[index % len(FRAMES)]))
            self._stream.flush()
            index += 1
            if self._stop.wait(self._interval):
                return
