from __future__ import annotations

import logging
import os
import threading
from collections.abc import Callable, Iterable, Iterator

LOGGER = logging.getLogger(__name__)

PSEUDO_FILESYSTEMS = ("/proc", "/sys", "/run", "/dev")


class DirectoryWalker:
    """Depth-first traversal yielding the path of every regular file.

    Symlinks are never followed and never counted. Directories at or below
    an excluded prefix are neither counted nor descended into.
    """

    def __init__(
        self,
        excluded_prefixes: Iterable[str] = (),
        on_directory: Callable[[], None] | None = None,
    ) -> None:
        self._excluded = tuple(
            os.path.normpath(os.path.abspath(prefix)) for prefix in excluded_prefixes
        )
        self._on_directory = on_directory or (lambda: None)

    def is_excluded(self, path: str) -> bool:
        normalized = os.path.normpath(os.path.abspath(path))
        for prefix in self._excluded:
            if normalized == prefix:
                return True
            if normalized.startswith(prefix.rstrip(os.sep) + os.sep):
                return True
        return False

    def walk(self, root: str, cancel: threading.Event | None = None) -> Iterator[str]:
        if self.is_excluded(root):
            LOGGER.debug("Skipping excluded directory %s", root)
            return
        if not os.path.isdir(root):
            LOGGER.debug("Error walking directory %s: not a directory, skipping", root)
            return

        self._on_directory()
        pending = [root]
        while pending:
            if cancel is not None and cancel.is_set():
                return
            directory = pending.pop()
            LOGGER.debug("Walking directory %s", directory)
            try:
                with os.scandir(directory) as entries:
                    children = list(entries)
            except OSError as exc:
                LOGGER.debug("Error walking directory %s: %s, skipping", directory, exc)
                continue

            subdirectories: list[str] = []
            for entry in children:
                if cancel is not None and cancel.is_set():
                    return
                try:
                    if entry.is_symlink():
                        continue
                    if entry.is_dir(follow_symlinks=False):
                        if self.is_excluded(entry.path):
                            LOGGER.debug("Skipping excluded directory %s", entry.path)
                            continue
                        self._on_directory()
                        subdirectories.append(entry.path)
                    elif entry.is_file(follow_symlinks=False):
                        yield entry.path
                except OSError as exc:
                    LOGGER.debug("Error inspecting %s: %s, skipping", entry.path, exc)

            pending.extend(reversed(subdirectories))
