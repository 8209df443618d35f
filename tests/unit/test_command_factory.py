from __future__ import annotations

from argparse import Namespace
from pathlib import Path
from typing import cast

import pytest

from dirscan.commands.base import Command
from dirscan.commands.factory import CommandFactory, build_scanner
from dirscan.commands.info_command import InfoCommand
from dirscan.commands.scan_command import ScanCommand
from dirscan.core.config_loader import ConfigLoader
from dirscan.core.scan_config import ScanConfig
from dirscan.core.scanner import DirectoryScanner
from tests.conftest import FixedClock


class LoaderStub:
    def __init__(self, config: ScanConfig) -> None:
        self.config = config
        self.calls: list[Namespace] = []

    def load(self, args: Namespace) -> ScanConfig:
        self.calls.append(args)
        return self.config


def test_create_returns_expected_command_types(
    sample_config: ScanConfig,
    fixed_clock: FixedClock,
) -> None:
    loader = LoaderStub(sample_config)
    built: list[ScanConfig] = []

    def scanner_factory(config: ScanConfig, clock: FixedClock) -> DirectoryScanner:
        built.append(config)
        return DirectoryScanner(clock, workers=config.workers)

    factory = CommandFactory(
        Path("/unused"),
        config_loader=cast(ConfigLoader, loader),
        clock=fixed_clock,
        scanner_factory=scanner_factory,
    )
    scan_args = Namespace(directory="/data")

    scan_cmd = factory.create("scan", scan_args)
    info_cmd = factory.create("info", Namespace())

    assert isinstance(scan_cmd, ScanCommand)
    assert isinstance(info_cmd, InfoCommand)
    assert all(isinstance(cmd, Command) for cmd in (scan_cmd, info_cmd))
    assert loader.calls == [scan_args]
    assert built == [sample_config]


def test_create_raises_for_unsupported_action(
    sample_config: ScanConfig,
    fixed_clock: FixedClock,
) -> None:
    factory = CommandFactory(
        Path("/unused"),
        config_loader=cast(ConfigLoader, LoaderStub(sample_config)),
        clock=fixed_clock,
    )

    with pytest.raises(SystemExit, match="Unsupported action"):
        factory.create("unsupported", Namespace())


def test_build_scanner_applies_config(sample_config: ScanConfig, fixed_clock: FixedClock) -> None:
    sample_config.workers = 1
    sample_config.excluded_prefixes = ["/proc"]

    scanner = build_scanner(sample_config, fixed_clock)

    assert isinstance(scanner, DirectoryScanner)
    assert scanner.workers == 1


def test_command_base_requires_run() -> None:
    with pytest.raises(TypeError):
        Command()  # type: ignore[abstract]
