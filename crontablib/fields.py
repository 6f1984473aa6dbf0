"""The five crontab time fields: minute, hour, day of month, month, day of week."""

from __future__ import annotations

from typing import Sequence

from crontablib.unit import CronUnit


def _label(names: Sequence[str], ndx: int) -> str:
    if not 0 <= ndx < len(names):
        raise IndexError(f"index {ndx} out of range")
    return names[ndx]


def _export_with_period(unit: CronUnit, period: int) -> str:
    if period not in (0, 1):
        return f"*/{period}"
    return CronUnit.export_unit(unit)


class Minute(CronUnit):
    """Minutes of the hour, 0 to 59."""

    MINIMUM = 0
    MAXIMUM = 59
    PERIODS = (1, 2, 5, 10, 15, 20, 30)

    def __init__(self, token: str = "") -> None:
        super().__init__(self.MINIMUM, self.MAXIMUM, token)

    def find_period(self) -> int:  # type: ignore[override]
        """Return the step that matches the enabled minutes exactly, else 0."""
        return CronUnit.find_period(self, self.PERIODS)

    def export_unit(self) -> str:
        return _export_with_period(self, self.find_period())


class Hour(CronUnit):
    """Hours of the day, 0 to 23."""

    MINIMUM = 0
    MAXIMUM = 23
    PERIODS = (2, 3, 4, 6, 8)

    def __init__(self, token: str = "") -> None:
        super().__init__(self.MINIMUM, self.MAXIMUM, token)

    def find_period(self) -> int:  # type: ignore[override]
        """Return the step that matches the enabled hours exactly, else 0."""
        return CronUnit.find_period(self, self.PERIODS)

    def export_unit(self) -> str:
        return _export_with_period(self, self.find_period())


_DAY_OF_MONTH_NAMES = (
    "", "1st", "2nd", "3rd", "4th", "5th", "6th", "7th", "8th", "9th", "10th",
    "11th", "12th", "13th", "14th", "15th", "16th", "17th", "18th", "19th",
    "20th", "21st", "22nd", "23rd", "24th", "25th", "26th", "27th", "28th",
    "29th", "30th", "31st",
)


class DayOfMonth(CronUnit):
    """Days of the month, 1 to 31."""

    MINIMUM = 1
    MAXIMUM = 31

    def __init__(self, token: str = "") -> None:
        super().__init__(self.MINIMUM, self.MAXIMUM, token)

    def describe(self) -> str:
        """Natural language description of the enabled days."""
        if self.enabled_count() == self.MAXIMUM:
            return "every day "
        return self.describe_with(_DAY_OF_MONTH_NAMES)

    @staticmethod
    def name(ndx: int) -> str:
        """Ordinal name of a day of the month."""
        return _label(_DAY_OF_MONTH_NAMES, ndx)


_DAY_OF_WEEK_SHORT = ("", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_DAY_OF_WEEK_LONG = ("", "Monday", "Tuesday", "Wednesday", "Thursday",
                     "Friday", "Saturday", "Sunday")


class DayOfWeek(CronUnit):
    """Days of the week, 1 (Monday) to 7 (Sunday); 0 is read as Sunday."""

    MINIMUM = 1
    MAXIMUM = 7

    def __init__(self, token: str = "") -> None:
        super().__init__(self.MINIMUM, self.MAXIMUM, "")
        CronUnit.initialize(self, token)
        if self.is_enabled(0):
            self.set_enabled(0, False)
            self.set_enabled(7, True)

    def initialize(self, token: str = "") -> None:
        """Parse ``token``, folding Sunday-as-0 into 7 and keeping that as applied."""
        super().initialize(token)
        if self.is_enabled(0):
            self.set_enabled(0, False)
            self.set_enabled(7, True)
            self.apply()

    def describe(self) -> str:
        """Natural language description of the enabled days."""
        if self.enabled_count() == self.MAXIMUM:
            return "every day "
        return self.describe_with(_DAY_OF_WEEK_SHORT)

    @staticmethod
    def name(ndx: int, short: bool = False) -> str:
        """Name of a day of the week, short or long."""
        return _label(_DAY_OF_WEEK_SHORT if short else _DAY_OF_WEEK_LONG, ndx)


_MONTH_NAMES = ("", "January", "February", "March", "April", "May", "June",
                "July", "August", "September", "October", "November",
                "December")


class Month(CronUnit):
    """Months of the year, 1 to 12."""

    MINIMUM = 1
    MAXIMUM = 12

    def __init__(self, token: str = "") -> None:
        super().__init__(self.MINIMUM, self.MAXIMUM, token)

    def describe(self) -> str:
        """Natural language description of the enabled months."""
        if self.enabled_count() == self.MAXIMUM:
            return "every month"
        return self.describe_with(_MONTH_NAMES)

    @staticmethod
    def name(ndx: int) -> str:
        """Name of a month."""
        return _label(_MONTH_NAMES, ndx)