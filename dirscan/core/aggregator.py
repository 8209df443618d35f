from __future__ import annotations

import threading

from .models import ExtensionGroup, FileObservation, RunTotals, ScanResult, UserGroup


class Aggregator:
    """Folds file observations into the by-extension and by-user groupings.

    One instance per scan. A single lock covers both groupings and the run
    totals, so each observation lands in both views before the next one is
    applied and the cross counts always agree.
    """

    def __init__(self, start_time: str) -> None:
        self._lock = threading.Lock()
        self._extensions: dict[str, ExtensionGroup] = {}
        self._users: dict[str, UserGroup] = {}
        self._totals = RunTotals(start_time=start_time)

    def add(self, observation: FileObservation) -> None:
        with self._lock:
            extension_group = self._extensions.get(observation.extension)
            if extension_group is None:
                extension_group = self._extensions[observation.extension] = ExtensionGroup(
                    observation.extension)
            extension_group.add(observation)

            user_group = self._users.get(observation.owner)
            if user_group is None:
                user_group = self._users[observation.owner] = UserGroup(observation.owner)
            user_group.add(observation)

            self._totals.total_files += 1
            self._totals.total_capacity += observation.size

    def add_directory(self) -> None:
        with self._lock:
            self._totals.total_directories += 1

    @property
    def total_files(self) -> int:
        return self._totals.total_files

    @property
    def total_directories(self) -> int:
        return self._totals.total_directories

    def result(self, elapsed_seconds: float = 0.0, cancelled: bool = False) -> ScanResult:
        with self._lock:
            extensions = sorted(
                self._extensions.values(),
                key=lambda group: (-group.total_size, group.label),
            )
            users = sorted(
                self._users.values(),
                key=lambda group: (-group.total_size, group.name),
            )
            return ScanResult(
                extensions=extensions,
                users=users,
                totals=self._totals,
                elapsed_seconds=elapsed_seconds,
                cancelled=cancelled,
            )
