from __future__ import annotations

from collections.abc import Iterable

from .models import BreakdownEntry, ScanResult
from .size_formatter import SizeFormatter


def _by_size(entries: Iterable[BreakdownEntry]) -> list[BreakdownEntry]:
    return sorted(entries, key=lambda entry: (-entry.size, entry.key))


class SummaryReporter:
    def __init__(
        self,
        *,
        verbose: bool = False,
        extensions_only: bool = False,
        users_only: bool = False,
    ) -> None:
        self._verbose = verbose
        self._show_users = not extensions_only
        self._show_extensions = not users_only

    def render(self, result: ScanResult) -> list[str]:
        totals = result.totals
        lines: list[str] = [
            f"Scan started: {totals.start_time}",
            (
                f"Total capacity: {SizeFormatter.human_readable(totals.total_capacity)} "
                f"Total files: {totals.total_files}, "
                f"Total directories: {totals.total_directories}"
            ),
            f"Total scanning time: {result.elapsed_seconds:.3f}s",
            f"Scan rate: {result.files_per_second:.0f} files/second",
        ]

        if self._show_users:
            lines.extend(["", "Consumption by user:"])
            lines.extend(self._user_lines(result))

        if self._show_extensions:
            lines.extend(["", "Consumption by file type/extension:"])
            lines.extend(self._extension_lines(result))

        return lines

    def _user_lines(self, result: ScanResult) -> list[str]:
        if not result.users:
            return ["\t(none)"]
        lines: list[str] = []
        for group in result.users:
            lines.append(
                f"\t{group.name}: Capacity: {SizeFormatter.human_readable(group.total_size)}, "
                f"#of files: {group.file_count}, "
                f"average file size: {SizeFormatter.average(group.total_size, group.file_count)}"
            )
            if self._verbose:
                lines.extend(
                    f"\t\t{entry.key}: {SizeFormatter.human_readable(entry.size)} "
                    f"#of files: {entry.count} "
                    f"average file size: {SizeFormatter.average(entry.size, entry.count)}"
                    for entry in _by_size(group.extensions.values())
                )
        return lines

    def _extension_lines(self, result: ScanResult) -> list[str]:
        if not result.extensions:
            return ["\t(none)"]
        lines: list[str] = []
        for group in result.extensions:
            lines.append(
                f"\t{group.label}: {SizeFormatter.human_readable(group.total_size)}, "
                f"#of files {group.file_count}, "
                f"average filesize: {SizeFormatter.average(group.total_size, group.file_count)}"
            )
            if self._verbose:
                lines.extend(
                    f"\t\t{entry.key}: Capacity {SizeFormatter.human_readable(entry.size)}, "
                    f"#of files {entry.count}, "
                    f"average filesize: {SizeFormatter.average(entry.size, entry.count)}"
                    for entry in _by_size(group.users.values())
                )
        return lines
