from __future__ import annotations

import logging
import os
from pathlib import Path

import pytest

from dirscan.core.log_setup import LOGGER_NAME, REPORT_LOGGER_NAME
from dirscan.core.scan_config import ScanConfig


class FixedClock:
    def __init__(self, step: float = 0.5) -> None:
        self._iso = "2026-02-16T01:02:03Z"
        self._step = step
        self._ticks = 0

    def now_iso(self) -> str:
        return self._iso

    def monotonic(self) -> float:
        self._ticks += 1
        return self._ticks * self._step


class FixedOwners:
    """Resolves every uid to the same name without touching the user database."""

    def __init__(self, name: str = "alice") -> None:
        self._name = name

    def resolve(self, uid: int) -> str:
        return self._name


@pytest.fixture(autouse=True)
def reset_dirscan_logger():
    yield
    for name in (LOGGER_NAME, REPORT_LOGGER_NAME):
        logger = logging.getLogger(name)
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
        logger.setLevel(logging.NOTSET)


@pytest.fixture
def fixed_clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    root = tmp_path / "tree"
    docs = root / "docs"
    src = root / "src" / "pkg"
    empty = root / "empty"
    docs.mkdir(parents=True)
    src.mkdir(parents=True)
    empty.mkdir()

    (docs / "readme.txt").write_bytes(b"r" * 100)
    (docs / "notes.txt").write_bytes(b"n" * 50)
    (src / "main.py").write_bytes(b"p" * 300)
    (src / "Makefile").write_bytes(b"all:\n\techo hi\n")
    (root / "blob").write_bytes(b"\x7fELF\x00\x01\x02")
    (root / "archive.tar.gz").write_bytes(b"z" * 1024)
    return root


@pytest.fixture
def sample_config(tmp_path: Path) -> ScanConfig:
    directory = tmp_path / "scan-root"
    directory.mkdir(parents=True, exist_ok=True)
    return ScanConfig(
        directory=directory,
        workers=2,
        log_dir=tmp_path / "logs",
    )


def current_user_can_bypass_permissions() -> bool:
    return os.geteuid() == 0
