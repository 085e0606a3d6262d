from dataclasses import dataclass
from typing import Any

@dataclass(frozen=True, order=True)
class RangeKey:
    """Closed range [start, end], ordered by start then end"""
    start: Any
    end: Any

    def __contains__(self, point):
        return self.start <= point <= self.end

    def overlaps(self, other: "RangeKey"):
        return not (self.end < other.start or other.end < self.start)

    def __str__(self):
        return f"({self.start},{self.end})"
