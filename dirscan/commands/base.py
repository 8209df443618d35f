from __future__ import annotations

from abc import ABC, abstractmethod


class Command(ABC):
    """One CLI action. ``run`` returns the process exit code."""

    @abstractmethod
    def run(self) -> int:
        raise NotImplementedError
