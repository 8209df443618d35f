from __future__ import annotations

import logging
import os
import signal
import threading
from types import FrameType

from ..core.log_setup import REPORT_LOGGER_NAME, configure_logging
from ..core.owner_resolver import OwnerResolver
from ..core.progress import ProgressTicker
from ..core.protocols import ClockProtocol, ScannerProtocol
from ..core.reporter import SummaryReporter
from ..core.scan_config import ScanConfig
from .base import Command

LOGGER = logging.getLogger(__name__)
REPORT_LOGGER = logging.getLogger(REPORT_LOGGER_NAME)

INTERRUPTED_EXIT_CODE = 130


class ScanCommand(Command):
    def __init__(
        self,
        config: ScanConfig,
        scanner: ScannerProtocol,
        clock: ClockProtocol,
    ) -> None:
        self._config = config
        self._scanner = scanner
        self._clock = clock
        self._received_signal: str | None = None

    def run(self) -> int:
        configure_logging(
            self._config.verbose,
            self._config.log_file,
            progress=self._config.progress,
        )
        LOGGER.info("Scanning directory: %s", self._config.directory)
        LOGGER.info("Scanning as user: %s", OwnerResolver().resolve(os.getuid()))
        LOGGER.debug("Workers: %d", self._config.workers)

        started = self._clock.monotonic()
        ticker: ProgressTicker | None = None
        if self._config.progress:
            ticker = ProgressTicker(
                self._scanner.counts,
                lambda: self._clock.monotonic() - started,
            )
            ticker.start()

        previous_handlers = self._install_signal_handlers()
        try:
            result = self._scanner.scan(str(self._config.directory))
        finally:
            self._restore_signal_handlers(previous_handlers)
            if ticker is not None:
                ticker.stop()

        if self._received_signal is not None:
            LOGGER.info("Received signal: %s, stopped scan", self._received_signal)
        if result.cancelled:
            print("\nScan interrupted, exiting without a report.")
            LOGGER.info("Goodbye")
            return INTERRUPTED_EXIT_CODE

        reporter = SummaryReporter(
            verbose=self._config.verbose,
            extensions_only=self._config.extensions_only,
            users_only=self._config.users_only,
        )
        for line in reporter.render(result):
            print(line)
            REPORT_LOGGER.info(line)
        return 0

    def _interrupt(self, signum: int, frame: FrameType | None) -> None:
        self._received_signal = signal.Signals(signum).name
        self._scanner.cancel.set()

    def _install_signal_handlers(self) -> dict[int, object]:
        if threading.current_thread() is not threading.main_thread():
            return {}
        previous: dict[int, object] = {}
        for signum in (signal.SIGINT, signal.SIGTERM):
            previous[signum] = signal.signal(signum, self._interrupt)
        return previous

    def _restore_signal_handlers(self, previous: dict[int, object]) -> None:
        for signum, handler in previous.items():
            signal.signal(signum, handler)  # type: ignore[arg-type]
