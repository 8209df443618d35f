from __future__ import annotations

import platform
import sys
from importlib.metadata import PackageNotFoundError, version

from .base import Command

PACKAGE_NAME = "dirscan"


def package_version() -> str:
    try:
        return version(PACKAGE_NAME)
    except PackageNotFoundError:
        return "unknown"


class InfoCommand(Command):
    def run(self) -> int:
        print(f"Package:\t{PACKAGE_NAME}")
        print(f"Version:\t{package_version()}")
        print(f"Python:\t\t{sys.version.split()[0]}")
        print(f"On:\t\t{platform.system()} {platform.machine()}")
        return 0
