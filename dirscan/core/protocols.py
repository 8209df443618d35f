from __future__ import annotations

import threading
from typing import Protocol

from .models import ScanResult


class ClockProtocol(Protocol):
    def now_iso(self) -> str:
        ...

    def monotonic(self) -> float:
        ...


class ScannerProtocol(Protocol):
    cancel: threading.Event

    def counts(self) -> tuple[int, int]:
        ...

    def scan(self, root: str) -> ScanResult:
        ...


class OwnerResolverProtocol(Protocol):
    def resolve(self, uid: int) -> str:
        ...
