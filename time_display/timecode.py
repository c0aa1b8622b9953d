"""
StopwatchTime - fixed-point elapsed time with microsecond precision

Parses "M:SS.CC" style text, adds, orders, and renders the canonical
fixed-width stopwatch reading consumed by the glyph renderer.
"""

import math
import re
from dataclasses import dataclass
from typing import Union

from .config import MAX_TICKS, TICKS_PER_MINUTE, TICKS_PER_SECOND
from .errors import TimeParseError, TimeRangeError

_MINUTES_RE = re.compile(r"\+?[0-9]+")
_SECONDS_RE = re.compile(r"\+?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")

Seconds = Union[int, float]


def _checked_ticks(ticks: int) -> int:
    if ticks < 0:
        raise TimeRangeError(f"Invalid time: {ticks} ticks is negative")
    if ticks > MAX_TICKS:
        raise TimeRangeError(f"Invalid time: {ticks} ticks exceeds {MAX_TICKS}")
    return ticks


def _seconds_to_ticks(seconds: Seconds) -> int:
    try:
        finite = math.isfinite(seconds)
    except OverflowError as e:
        raise TimeRangeError("Invalid time: seconds value exceeds the tick range") from e
    if not finite:
        raise TimeRangeError(f"Invalid time: {seconds} seconds is not finite")
    return _checked_ticks(round(seconds * TICKS_PER_SECOND))


@dataclass(frozen=True, order=True)
class StopwatchTime:
    """Elapsed time counted in microsecond ticks"""

    ticks: int = 0

    def __post_init__(self):
        if isinstance(self.ticks, bool) or not isinstance(self.ticks, int):
            raise TypeError(f"ticks must be int, got {type(self.ticks).__name__}")
        _checked_ticks(self.ticks)

    @classmethod
    def zero(cls) -> 'StopwatchTime':
        return cls(0)

    @classmethod
    def from_seconds(cls, seconds: Seconds) -> 'StopwatchTime':
        """Convert a seconds value, rounding to the nearest tick"""
        return cls(_seconds_to_ticks(seconds))

    @classmethod
    def parse(cls, text: str) -> 'StopwatchTime':
        """
        Parse "SS.CC" or "M:SS.CC".

        Minutes and seconds are independent fields: "1:75.0" is accepted
        and equals "2:15".

        Raises:
            TimeParseError: too many parts or a malformed component
        """
        parts = text.split(':')

        if len(parts) == 1:
            minutes, seconds = "0", parts[0]
        elif len(parts) == 2:
            minutes, seconds = parts
        else:
            raise TimeParseError(f"Invalid time: \"{text}\" has too many parts.", text)

        if not _MINUTES_RE.fullmatch(minutes):
            raise TimeParseError(f"Invalid minutes: \"{minutes}\"", text)
        if not _SECONDS_RE.fullmatch(seconds):
            raise TimeParseError(f"Invalid seconds: \"{seconds}\"", text)

        try:
            ticks = int(minutes) * TICKS_PER_MINUTE + _seconds_to_ticks(float(seconds))
            return cls(_checked_ticks(ticks))
        except TimeRangeError as e:
            raise TimeParseError(f"Invalid time: \"{text}\" is out of range", text) from e

    @property
    def minutes(self) -> int:
        return self.ticks // TICKS_PER_MINUTE

    @property
    def seconds(self) -> float:
        """Seconds within the current minute, in [0, 60)"""
        return (self.ticks % TICKS_PER_MINUTE) / TICKS_PER_SECOND

    @property
    def total_seconds(self) -> float:
        return self.ticks / TICKS_PER_SECOND

    def render(self) -> str:
        """
        Canonical fixed-width reading, e.g. "  : 3.21", " 5:43.21".

        Seconds that round to "60.00" carry into the minute field.
        """
        minutes = self.minutes
        seconds = self.seconds

        sec_part = f"{seconds:05.2f}" if minutes else f"{seconds:5.2f}"
        if sec_part == "60.00":
            minutes += 1
            sec_part = "00.00"

        if minutes == 0:
            return f"  :{sec_part}"
        return f"{minutes:>2}:{sec_part}"

    def __str__(self) -> str:
        return self.render()

    def __add__(self, other):
        if isinstance(other, StopwatchTime):
            return StopwatchTime(_checked_ticks(self.ticks + other.ticks))
        if isinstance(other, (int, float)) and not isinstance(other, bool):
            return self + StopwatchTime.from_seconds(other)
        return NotImplemented

    __radd__ = __add__
