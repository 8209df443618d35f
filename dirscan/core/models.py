from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class FileObservation:
    path: str
    size: int
    owner: str
    extension: str


@dataclass
class BreakdownEntry:
    """Size and count for one nested key inside a group."""

    key: str
    size: int = 0
    count: int = 0

    def add(self, size: int) -> None:
        self.size += size
        self.count += 1


@dataclass
class ExtensionGroup:
    label: str
    total_size: int = 0
    file_count: int = 0
    users: dict[str, BreakdownEntry] = field(default_factory=dict)

    def add(self, observation: FileObservation) -> None:
        self.total_size += observation.size
        self.file_count += 1
        entry = self.users.get(observation.owner)
        if entry is None:
            entry = self.users[observation.owner] = BreakdownEntry(observation.owner)
        entry.add(observation.size)


@dataclass
class UserGroup:
    name: str
    total_size: int = 0
    file_count: int = 0
    extensions: dict[str, BreakdownEntry] = field(default_factory=dict)

    def add(self, observation: FileObservation) -> None:
        self.total_size += observation.size
        self.file_count += 1
        entry = self.extensions.get(observation.extension)
        if entry is None:
            entry = self.extensions[observation.extension] = BreakdownEntry(
                observation.extension)
        entry.add(observation.size)


@dataclass
class RunTotals:
    start_time: str
    total_files: int = 0
    total_directories: int = 0
    total_capacity: int = 0


@dataclass
class ScanResult:
    extensions: list[ExtensionGroup]
    users: list[UserGroup]
    totals: RunTotals
    elapsed_seconds: float = 0.0
    cancelled: bool = False

    @property
    def files_per_second(self) -> float:
        if self.elapsed_seconds <= 0:
            return 0.0
        return self.totals.total_files / self.elapsed_seconds
