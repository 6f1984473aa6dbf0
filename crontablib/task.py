"""Scheduled task entries of a crontab."""

from __future__ import annotations

import re

from crontablib.fields import DayOfMonth, DayOfWeek, Hour, Minute, Month
from crontablib.helper import export_comment

_WHITESPACE = re.compile(r"[ \t]")

_SHORTCUTS = (
    ("yearly", "0 0 1 1 *"),
    ("annually", "0 0 1 1 *"),
    ("monthly", "0 0 1 * *"),
    ("weekly", "0 0 * * 0"),
    ("daily", "0 0 * * *"),
    ("hourly", "0 * * * *"),
)


def _find_space(text: str) -> int:
    match = _WHITESPACE.search(text)
    return -1 if match is None else match.start()


def _head(text: str, pos: int) -> str:
    """Text before ``pos``; the whole text when ``pos`` is negative."""
    return text if pos < 0 else text[:pos]


def _rest(text: str, pos: int) -> str:
    """At most ``len(text) - 1`` characters starting at ``pos``."""
    return text[pos:pos + len(text) - 1]


def _skip_spaces(text: str, pos: int) -> int:
    while pos + 1 < len(text) and text[pos + 1] == " ":
        pos += 1
    return pos


def _advance(text: str, pos: int) -> tuple[str, int]:
    """Move past the current token and its following spaces."""
    pos = _skip_spaces(text, pos)
    text = _rest(text, pos + 1)
    return text, _find_space(text)


class CronTask:
    """A scheduled command line of a crontab, possibly disabled with ``#``."""

    def __init__(self, token: str, comment: str = "", user_login: str = "",
                 system_crontab: bool = False) -> None:
        self.system_crontab = system_crontab
        self.minute = Minute()
        self.hour = Hour()
        self.day_of_month = DayOfMonth()
        self.month = Month()
        self.day_of_week = DayOfWeek()

        text = token
        if text.startswith("#\\"):
            text = text[2:]
            self.enabled = False
        elif text.startswith("#"):
            text = text[1:]
            self.enabled = False
        else:
            self.enabled = True

        # A leading '-' is the obsolete "silence" option; it is dropped.
        if text.startswith("-"):
            text = text[1:]

        self.reboot = False
        if text.startswith("@"):
            for keyword, schedule in _SHORTCUTS:
                if text[1:1 + len(keyword)] == keyword:
                    text = schedule + text[1 + len(keyword):]
                    break
            else:
                if text[1:7] == "reboot":
                    text = text[7:]
                    self.reboot = True

        pos = _find_space(text)
        if not self.reboot:
            units = (self.minute, self.hour, self.day_of_month,
                     self.month, self.day_of_week)
            units[0].initialize(_head(text, pos))
            for unit in units[1:]:
                text, pos = _advance(text, pos)
                unit.initialize(_head(text, pos))

        if self.system_crontab:
            text, pos = _advance(text, pos)
            self.user_login = _head(text, pos)
        else:
            self.user_login = user_login

        self.command = _rest(text, pos + 1).lstrip(" \t")
        self.comment = comment
        self._initial = self._snapshot()

    def _units(self) -> tuple:
        return (self.month, self.day_of_month, self.day_of_week,
                self.hour, self.minute)

    def _snapshot(self) -> tuple[str, str, str, bool, bool]:
        return (self.user_login, self.command, self.comment,
                self.enabled, self.reboot)

    def export_task(self) -> str:
        """Return the crontab text for this task, comment included."""
        parts = [export_comment(self.comment)]
        if not self.enabled:
            parts.append("#\\")
        parts.append(self.scheduling_cron_format())
        parts.append("\t")
        if self.system_crontab:
            parts.append(self.user_login + "\t")
        parts.append(self.command + "\n")
        return "".join(parts)

    def scheduling_cron_format(self) -> str:
        """The five time fields in crontab syntax, or ``@reboot``."""
        if self.reboot:
            return "@reboot"
        return " ".join(unit.export_unit() for unit in (
            self.minute, self.hour, self.day_of_month,
            self.month, self.day_of_week))

    def apply(self) -> None:
        """Make the current values the new initial values."""
        for unit in self._units():
            unit.apply()
        self._initial = self._snapshot()

    def cancel(self) -> None:
        """Revert to the initial (or last applied) values."""
        for unit in self._units():
            unit.cancel()
        (self.user_login, self.command, self.comment,
         self.enabled, self.reboot) = self._initial

    def is_dirty(self) -> bool:
        return (any(unit.is_dirty() for unit in self._units())
                or self._snapshot() != self._initial)

    def describe(self) -> str:
        """Natural language description of the schedule."""
        if self.reboot:
            return "at system startup"
        return f"{self._time_format()}, {self._date_format()}"

    def _describe_day_of_week(self) -> str:
        return f"every {self.day_of_week.describe()}"

    def _describe_day_of_month(self) -> str:
        return f"{self.day_of_month.describe()} of {self.month.describe()}"

    def _date_format(self) -> str:
        every_dom = self.day_of_month.enabled_count() == DayOfMonth.MAXIMUM
        every_dow = self.day_of_week.enabled_count() == DayOfWeek.MAXIMUM
        if every_dom and every_dow:
            return "every day "
        if every_dom:
            return self._describe_day_of_week()
        if every_dow:
            return self._describe_day_of_month()
        return (f"{self._describe_day_of_month()} as well as "
                f"{self._describe_day_of_week()}")

    def _describe_hours(self) -> str:
        times = [f"{h:02d}:{m:02d}"
                 for h in range(24) if self.hour.is_enabled(h)
                 for m in range(60) if self.minute.is_enabled(m)]
        total = self.minute.enabled_count() * self.hour.enabled_count()
        parts: list[str] = []
        for count, entry in enumerate(times, start=1):
            parts.append(entry)
            remaining = total - count
            if remaining == 1:
                parts.append(", and " if total > 2 else " and ")
            elif remaining > 1:
                parts.append(", ")
        return "at " + "".join(parts)

    def _time_format(self) -> str:
        if self.hour.is_all_enabled() and self.minute.find_period() != 0:
            return "Every minute"
        return self._describe_hours()

    def copy(self) -> "CronTask":
        """Copy the values; the copy has an empty initial state."""
        clone = CronTask.__new__(CronTask)
        clone.system_crontab = self.system_crontab
        clone.minute = self.minute.copy()
        clone.hour = self.hour.copy()
        clone.day_of_month = self.day_of_month.copy()
        clone.month = self.month.copy()
        clone.day_of_week = self.day_of_week.copy()
        clone.user_login = self.user_login
        clone.command = self.command
        clone.comment = self.comment
        clone.enabled = self.enabled
        clone.reboot = self.reboot
        clone._initial = ("", "", "", True, False)
        return clone

    def unquote_command(self) -> tuple[str, bool]:
        """Return the command without surrounding quotes and whether it was quoted.

        An unterminated quote yields an empty command.
        """
        full = self.command.strip()
        for quote in ('"', "'"):
            if full.startswith(quote):
                closing = full.find(quote, 1)
                if closing == -1:
                    return "", False
                return full[1:closing], True
        return full, False

    def decrypt_binary_command(self, command: str) -> str:
        """Extract the program from an unquoted command, honouring ``\\ `` escapes."""
        end = len(command)
        for i, char in enumerate(command):
            if char == " " and (i == 0 or command[i - 1] != "\\"):
                end = i
                break
        return command[:end].replace("\\", "")

    def separate_path_command(self, command: str, quoted: bool) -> list[str]:
        """Split the program into its folder and file name.

        A program found through ``PATH`` has an empty folder.
        """
        full = command if quoted else self.decrypt_binary_command(command)
        if command.startswith("/"):
            if not full:
                return []
            path, _, binary = full.rpartition("/")
            return [path, binary]
        return ["", full]

    def complete_command_path(self) -> str:
        """Full path of the program the task runs, or an empty string."""
        command, quoted = self.unquote_command()
        if not command:
            return ""
        parts = self.separate_path_command(command, quoted)
        if not parts:
            return ""
        return "/".join(parts)

    def __repr__(self) -> str:
        return (f"CronTask({self.scheduling_cron_format()!r}, {self.command!r}, "
                f"enabled={self.enabled}, user_login={self.user_login!r})")