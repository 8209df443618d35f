from __future__ import annotations

import os
from argparse import Namespace
from pathlib import Path

from .scan_config import ScanConfig
from .scanner import clamp_workers
from .walker import PSEUDO_FILESYSTEMS

DEFAULT_DIRECTORY = "/home"
DEFAULT_LOG_DIR = "/tmp"


class ConfigLoader:
    def __init__(self, project_root: Path) -> None:
        self._project_root = project_root

    @property
    def default_env_file(self) -> Path:
        return self._project_root / "config" / "dirscan.env"

    def load(self, args: Namespace) -> ScanConfig:
        env_path = getattr(args, "env_file", None)
        env_file = Path(env_path).expanduser() if env_path else self.default_env_file
        env_values: dict[str, str] = {}
        if env_file.is_file():
            env_values = self._parse_env_file(env_file)
        elif env_path:
            raise SystemExit(f"Missing env file: {env_file}")

        directory = Path(
            getattr(args, "directory", None)
            or env_values.get("SCAN_DIRECTORY")
            or DEFAULT_DIRECTORY
        ).expanduser()
        if not directory.exists():
            raise SystemExit(f"Directory to scan does not exist: {directory}")
        if not directory.is_dir():
            raise SystemExit(f"Not a directory: {directory}")

        excluded = list(getattr(args, "exclude", None) or [])
        excluded.extend(
            item for item in env_values.get("SCAN_EXCLUDE", "").split(":") if item
        )
        if getattr(args, "skip_pseudo_fs", False):
            excluded.extend(PSEUDO_FILESYSTEMS)

        log_dir = Path(
            getattr(args, "log_dir", None)
            or env_values.get("LOG_DIR")
            or DEFAULT_LOG_DIR
        ).expanduser()

        return ScanConfig(
            directory=directory,
            workers=self._resolve_workers(getattr(args, "workers", None), env_values),
            verbose=bool(getattr(args, "verbose", False)),
            extensions_only=bool(getattr(args, "extensions_only", False)),
            users_only=bool(getattr(args, "users_only", False)),
            excluded_prefixes=excluded,
            log_enabled=bool(getattr(args, "log", False)),
            log_dir=log_dir,
            progress=bool(getattr(args, "progress", False)),
            env_file=env_file if env_values else None,
        )

    def _resolve_workers(self, requested: int | None, env_values: dict[str, str]) -> int:
        if requested is None and env_values.get("SCAN_WORKERS"):
            raw = env_values["SCAN_WORKERS"]
            try:
                requested = int(raw)
            except ValueError as exc:
                raise SystemExit(f"Invalid SCAN_WORKERS value: {raw}") from exc
        if requested is not None and requested < 1:
            raise SystemExit(f"Worker count must be a positive integer: {requested}")
        return clamp_workers(requested)

    def _parse_env_file(self, env_file: Path) -> dict[str, str]:
        values: dict[str, str] = {}
        for raw_line in env_file.read_text(encoding="utf-8").splitlines():
            line = raw_line.strip()
            if not line or line.startswith("#"):
                continue
            if "=" not in line:
                continue
            key, value = line.split("=", 1)
            cleaned = value.strip().strip('"').strip("'")
            values[key.strip()] = os.path.expandvars(cleaned)
        return values
