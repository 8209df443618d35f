from __future__ import annotations


class SizeFormatter:
    _unit = 1024
    _prefixes = "KMGTPEZ"

    @classmethod
    def human_readable(cls, size: int) -> str:
        if size < cls._unit:
            return f"{size} B"
        value = float(size)
        index = -1
        while value >= cls._unit and index < len(cls._prefixes) - 1:
            value /= cls._unit
            index += 1
        return f"{value:.1f} {cls._prefixes[index]}iB"

    @staticmethod
    def average_size(total_size: int, file_count: int) -> float:
        if file_count <= 0:
            return 0.0
        return round(total_size / file_count, 2)

    @classmethod
    def average(cls, total_size: int, file_count: int) -> str:
        return cls.human_readable(int(cls.average_size(total_size, file_count)))
