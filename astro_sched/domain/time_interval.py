"""Time-of-day parsing and the interval value object tasks occupy."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import time


CLOCK_FORMAT = "HH:mm"

_CLOCK_PATTERN = re.compile(r"([01][0-9]|2[0-3]):([0-5][0-9])")


def parse_clock_time(text: str) -> time:
    """Parse strict zero-padded 24-hour ``HH:mm`` text into a time of day.

    Raises ``ValueError`` for anything else ("9:30", "25:00", "10:60", " 09:30", "09:30\\n").
    """
    match = _CLOCK_PATTERN.fullmatch(text)
    if match is None:
        raise ValueError(f"Invalid time format {text!r}; expected {CLOCK_FORMAT}")
    return time(hour=int(match.group(1)), minute=int(match.group(2)))


def format_clock_time(value: time) -> str:
    return value.strftime("%H:%M")


@dataclass(frozen=True, slots=True)
class TimeInterval:
    """Half-open [start, end) span within a single day."""

    start: time
    end: time

    def __post_init__(self) -> None:
        if self.end <= self.start:
            raise ValueError("End time must be after start time")

    def overlaps(self, other: TimeInterval) -> bool:
        # Touching endpoints do not overlap.
        return self.start < other.end and self.end > other.start

    def __str__(self) -> str:
        return f"{format_clock_time(self.start)} - {format_clock_time(self.end)}"
