from __future__ import annotations

import re

from dirscan.core.clock import Clock


def test_now_iso_returns_iso8601_with_timezone() -> None:
    value = Clock().now_iso()

    assert "T" in value
    assert re.search(r"[+-]\d{2}:\d{2}$", value) is not None


def test_monotonic_never_goes_backwards() -> None:
    clock = Clock()
    first = clock.monotonic()

    assert clock.monotonic() >= first
