from __future__ import annotations

import logging
import os
import queue
import threading
from concurrent.futures import ThreadPoolExecutor

from .aggregator import Aggregator
from .classifier import ContentClassifier
from .inspector import FileInspector
from .models import ScanResult
from .owner_resolver import OwnerResolver
from .protocols import ClockProtocol, OwnerResolverProtocol
from .walker import DirectoryWalker

LOGGER = logging.getLogger(__name__)

_DONE = None


def clamp_workers(requested: int | None, cpu_count: int | None = None) -> int:
    cpus = cpu_count or os.cpu_count() or 1
    if requested is None:
        return cpus
    return max(1, min(requested, 2 * cpus))


class DirectoryScanner:
    """Walks a tree on the calling thread and inspects files on a worker pool.

    The walker is the single producer. Paths go through a bounded queue to
    ``workers`` consumers, each of which feeds the shared aggregator. The scan
    returns only after every worker has drained its share of the queue.
    """

    def __init__(
        self,
        clock: ClockProtocol,
        *,
        workers: int | None = None,
        excluded_prefixes: tuple[str, ...] = (),
        classifier: ContentClassifier | None = None,
        owners: OwnerResolverProtocol | None = None,
        queue_size: int = 4096,
    ) -> None:
        self._clock = clock
        self._workers = clamp_workers(workers)
        self._excluded = excluded_prefixes
        self._classifier = classifier or ContentClassifier()
        self._owners = owners
        self._queue_size = queue_size
        self.cancel = threading.Event()
        self.aggregator: Aggregator | None = None

    @property
    def workers(self) -> int:
        return self._workers

    def counts(self) -> tuple[int, int]:
        if self.aggregator is None:
            return 0, 0
        return self.aggregator.total_files, self.aggregator.total_directories

    def scan(self, root: str) -> ScanResult:
        aggregator = Aggregator(self._clock.now_iso())
        self.aggregator = aggregator
        inspector = FileInspector(self._classifier, self._owners or OwnerResolver())
        walker = DirectoryWalker(self._excluded, on_directory=aggregator.add_directory)
        paths: queue.Queue[str | None] = queue.Queue(maxsize=self._queue_size)

        started = self._clock.monotonic()
        LOGGER.debug("Scanning %s with %d workers", root, self._workers)
        with ThreadPoolExecutor(
            max_workers=self._workers, thread_name_prefix="dirscan-worker"
        ) as executor:
            futures = [
                executor.submit(self._consume, paths, inspector, aggregator)
                for _ in range(self._workers)
            ]
            try:
                for path in walker.walk(root, self.cancel):
                    if not self._put(paths, path):
                        break
            finally:
                for _ in futures:
                    self._put(paths, _DONE, force=True)
            for future in futures:
                future.result()

        elapsed = self._clock.monotonic() - started
        return aggregator.result(elapsed, cancelled=self.cancel.is_set())

    def _put(self, paths: queue.Queue[str | None], item: str | None, force: bool = False) -> bool:
        while True:
            if not force and self.cancel.is_set():
                return False
            try:
                paths.put(item, timeout=0.1)
                return True
            except queue.Full:
                if force and self.cancel.is_set():
                    # cancelled workers stop draining the queue
                    self._discard_one(paths)

    @staticmethod
    def _discard_one(paths: queue.Queue[str | None]) -> None:
        try:
            paths.get_nowait()
        except queue.Empty:
            pass

    def _consume(
        self,
        paths: queue.Queue[str | None],
        inspector: FileInspector,
        aggregator: Aggregator,
    ) -> None:
        while True:
            try:
                path = paths.get(timeout=0.1)
            except queue.Empty:
                if self.cancel.is_set():
                    return
                continue
            if path is _DONE or self.cancel.is_set():
                return
            try:
                observation = inspector.inspect(path)
                if observation is not None:
                    aggregator.add(observation)
            except Exception:
                LOGGER.exception("Worker failed on %s", path)
                self.cancel.set()
                raise
