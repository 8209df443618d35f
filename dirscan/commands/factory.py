from __future__ import annotations

from argparse import Namespace
from collections.abc import Callable
from pathlib import Path

from ..core.clock import Clock
from ..core.config_loader import ConfigLoader
from ..core.protocols import ClockProtocol, ScannerProtocol
from ..core.scan_config import ScanConfig
from ..core.scanner import DirectoryScanner
from .base import Command
from .info_command import InfoCommand
from .scan_command import ScanCommand


def build_scanner(config: ScanConfig, clock: ClockProtocol) -> ScannerProtocol:
    return DirectoryScanner(
        clock,
        workers=config.workers,
        excluded_prefixes=tuple(config.excluded_prefixes),
    )


class CommandFactory:
    def __init__(
        self,
        project_root: Path,
        *,
        config_loader: ConfigLoader | None = None,
        clock: ClockProtocol | None = None,
        scanner_factory: Callable[[ScanConfig, ClockProtocol], ScannerProtocol] | None = None,
    ) -> None:
        self._config_loader = config_loader or ConfigLoader(project_root)
        self._clock = clock or Clock()
        self._scanner_factory = scanner_factory or build_scanner

    def create(self, action: str, args: Namespace) -> Command:
        if action == "info":
            return InfoCommand()
        if action == "scan":
            config = self._config_loader.load(args)
            scanner = self._scanner_factory(config, self._clock)
            return ScanCommand(config, scanner, self._clock)
        raise SystemExit(f"Unsupported action: {action}")
