"""Parsing and formatting of a single crontab time field."""

from __future__ import annotations

import copy as _copy
import re
from typing import Iterable, Sequence

_DAYS = ("sun", "mon", "tue", "wed", "thu", "fri", "sat")
_MONTHS = ("", "jan", "feb", "mar", "apr", "may", "jun",
           "jul", "aug", "sep", "oct", "nov", "dec")
_INTEGER = re.compile(r"[+-]?\d+")


def field_to_value(entry: str) -> int:
    """Convert a field element (number, day or month name) to its value.

    Unrecognised text yields 0.
    """
    lower = entry.lower()
    if lower in _DAYS:
        return _DAYS.index(lower)
    if lower in _MONTHS:
        return _MONTHS.index(lower)
    text = entry.strip()
    if _INTEGER.fullmatch(text):
        return int(text)
    return 0


def _mid(text: str, pos: int, length: int = -1) -> str:
    """Substring from ``pos``; a negative length means up to the end."""
    if length < 0:
        return text[pos:]
    return text[pos:pos + length]


class CronUnit:
    """A crontab field such as ``0-3,5,6,10-30/5`` over a range of values."""

    SHORT_FORMAT = False
    LONG_FORMAT = True

    def __init__(self, minimum: int, maximum: int, token: str = "") -> None:
        self._min = minimum
        self._max = maximum
        self._enabled: list[bool] = []
        self._initial_enabled: list[bool] = []
        self._initial_token = ""
        self._dirty = False
        self.initialize(token)

    @property
    def minimum(self) -> int:
        return self._min

    @property
    def maximum(self) -> int:
        return self._max

    def initialize(self, token: str = "") -> None:
        """Reset the field and parse ``token`` as its initial state."""
        self._enabled = [False] * (self._max + 1)
        self._initial_enabled = [False] * (self._max + 1)
        self._parse(token)
        self._initial_token = token
        self._dirty = False

    def _parse(self, token: str) -> None:
        rest = token + ","
        while (comma := rest.find(",")) > 0:
            element = rest[:comma]

            slash = element.find("/")
            if slash == -1:
                step = 1
                slash = len(element)
            else:
                step = max(field_to_value(element[slash + 1:]), 1)

            dash = element.find("-")
            if dash == -1:
                if element[:slash] == "*":
                    begin, end = self._min, self._max
                else:
                    begin = end = field_to_value(element[:slash])
            else:
                begin = field_to_value(element[:dash])
                end = field_to_value(_mid(element, dash + 1, slash - dash - 1))

            begin = max(begin, 0)
            end = min(end, self._max)

            for i in range(begin, end + 1, step):
                self._enabled[i] = True
                self._initial_enabled[i] = True

            rest = rest[comma + 1:]

    def _range(self) -> range:
        return range(self._min, self._max + 1)

    def export_unit(self) -> str:
        """Return the crontab text for this field."""
        if not self._dirty:
            return self._initial_token
        if self.is_all_enabled():
            return "*"
        return ",".join(str(num) for num in self._range() if self._enabled[num])

    def describe_with(self, labels: Sequence[str]) -> str:
        """Describe the enabled values using ``labels`` indexed by value."""
        chosen = [labels[i] for i in self._range() if self._enabled[i]]
        total = len(chosen)
        parts: list[str] = []
        for count, label in enumerate(chosen, start=1):
            parts.append(label)
            remaining = total - count
            if remaining == 1:
                parts.append(", and " if total > 2 else " and ")
            elif remaining > 1:
                parts.append(", ")
        return "".join(parts)

    def is_enabled(self, pos: int) -> bool:
        if not 0 <= pos < len(self._enabled):
            raise IndexError(f"position {pos} out of range")
        return self._enabled[pos]

    def is_all_enabled(self) -> bool:
        return all(self._enabled[i] for i in self._range())

    def set_enabled(self, pos: int, value: bool) -> None:
        if not 0 <= pos < len(self._enabled):
            raise IndexError(f"position {pos} out of range")
        self._enabled[pos] = value
        self._dirty = True

    def is_dirty(self) -> bool:
        return self._dirty

    def enabled_count(self) -> int:
        return sum(1 for i in self._range() if self._enabled[i])

    def apply(self) -> None:
        """Make the current state the new initial state."""
        self._initial_token = self.export_unit()
        for i in self._range():
            self._initial_enabled[i] = self._enabled[i]
        self._dirty = False

    def cancel(self) -> None:
        """Revert to the initial (or last applied) state."""
        for i in self._range():
            self._enabled[i] = self._initial_enabled[i]
        self._dirty = False

    def find_period(self, periods: Iterable[int]) -> int:
        """Return the first period matching the enabled values exactly, else 0."""
        for period in periods:
            if all(self.is_enabled(i) == (i % period == 0) for i in self._range()):
                return period
        return 0

    def copy(self) -> "CronUnit":
        """Copy the enabled values; the copy has an empty initial state and is dirty."""
        clone = _copy.copy(self)
        clone._enabled = list(self._enabled)
        clone._initial_enabled = [False] * (self._max + 1)
        clone._initial_token = ""
        clone._dirty = True
        return clone