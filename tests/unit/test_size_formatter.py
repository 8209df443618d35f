from __future__ import annotations

import pytest

from dirscan.core.size_formatter import SizeFormatter


@pytest.mark.parametrize(
    ("size", "expected"),
    [
        (0, "0 B"),
        (1, "1 B"),
        (1023, "1023 B"),
        (1024, "1.0 KiB"),
        (1536, "1.5 KiB"),
        (1048576, "1.0 MiB"),
        (5 * 1024**3, "5.0 GiB"),
        (3 * 1024**4 // 2, "1.5 TiB"),
        (1024**5, "1.0 PiB"),
        (1024**6, "1.0 EiB"),
        (1024**7, "1.0 ZiB"),
    ],
)
def test_human_readable(size: int, expected: str) -> None:
    assert SizeFormatter.human_readable(size) == expected


def test_human_readable_stays_in_largest_unit() -> None:
    assert SizeFormatter.human_readable(2048 * 1024**7) == "2048.0 ZiB"


def test_average_size_guards_zero_files() -> None:
    assert SizeFormatter.average_size(1000, 0) == 0.0
    assert SizeFormatter.average(1000, 0) == "0 B"


def test_average_size_rounds_to_two_decimals() -> None:
    assert SizeFormatter.average_size(10, 3) == 3.33
    assert SizeFormatter.average(3072, 2) == "1.5 KiB"
    assert SizeFormatter.average(10, 3) == "3 B"
