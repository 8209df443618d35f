from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class ScanConfig:
    directory: Path
    workers: int
    verbose: bool = False
    extensions_only: bool = False
    users_only: bool = False
    excluded_prefixes: list[str] = field(default_factory=list)
    log_enabled: bool = False
    log_dir: Path = Path("/tmp")
    progress: bool = False
    env_file: Path | None = None

    @property
    def log_file(self) -> Path | None:
        if not self.log_enabled:
            return None
        return self.log_dir / "dirscan.log"
