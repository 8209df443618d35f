#!/usr/bin/env python3

from __future__ import annotations

import argparse
from pathlib import Path

from .commands.factory import CommandFactory


class CliApplication:
    def __init__(self, project_root: Path) -> None:
        self._factory = CommandFactory(project_root)

    def build_parser(self) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(
            prog="dirscan",
            description="Directory capacity usage by file extension and by user",
        )
        subparsers = parser.add_subparsers(dest="action", required=True)

        scan_parser = subparsers.add_parser(
            "scan",
            help="Scan a directory tree and print the summary.",
        )
        scan_parser.add_argument(
            "directory",
            nargs="?",
            default=None,
            help="Directory to scan (default: /home)",
        )
        scan_parser.add_argument(
            "-w",
            "--workers",
            type=int,
            default=None,
            help="Number of worker threads (default: CPU count)",
        )
        scan_parser.add_argument(
            "-v",
            "--verbose",
            action="store_true",
            help="Enable verbose and detailed output",
        )
        scan_parser.add_argument(
            "-f",
            "--extensions-only",
            action="store_true",
            help="Print only the file types/extensions information",
        )
        scan_parser.add_argument(
            "-u",
            "--users-only",
            action="store_true",
            help="Print only the user information",
        )
        scan_parser.add_argument(
            "-x",
            "--exclude",
            action="append",
            default=[],
            metavar="PREFIX",
            help="Skip directories under this path (repeatable)",
        )
        scan_parser.add_argument(
            "--skip-pseudo-fs",
            action="store_true",
            help="Skip /proc, /sys, /run and /dev",
        )
        scan_parser.add_argument(
            "-l",
            "--log",
            action="store_true",
            help="Also write log messages to dirscan.log",
        )
        scan_parser.add_argument(
            "-t",
            "--log-dir",
            default=None,
            help="Log file target directory (default: /tmp)",
        )
        scan_parser.add_argument(
            "-p",
            "--progress",
            action="store_true",
            help="Show a progress line while scanning",
        )
        scan_parser.add_argument(
            "--env-file",
            default=None,
            help="Optional path to env file (default: config/dirscan.env)",
        )

        subparsers.add_parser(
            "info",
            help="Print build and version information.",
        )
        return parser

    def run(self, argv: list[str] | None = None) -> int:
        args = self.build_parser().parse_args(argv)
        command = self._factory.create(args.action, args)
        return command.run()


def main() -> int:
    project_root = Path(__file__).resolve().parent.parent
    app = CliApplication(project_root)
    return app.run()


if __name__ == "__main__":
    raise SystemExit(main())
