"""Environment variable entries of a crontab."""

from __future__ import annotations

import re

from crontablib.helper import export_comment

_SEPARATOR = re.compile(r"[ =]")

_ICONS = {
    "MAILTO": "mail-message",
    "SHELL": "utilities-terminal",
    "HOME": "go-home",
    "PATH": "folder",
    "LD_CONFIG_PATH": "application-x-sharedlib",
}

_INFORMATION = {
    "HOME": "Override default home folder.",
    "MAILTO": "Email output to specified account.",
    "SHELL": "Override default shell.",
    "PATH": "Folders to search for program files.",
    "LD_CONFIG_PATH": "Dynamic libraries location.",
}


class CronVariable:
    """A ``NAME=value`` line of a crontab, possibly disabled with ``#\\``."""

    def __init__(self, token: str, comment: str = "", user_login: str = "") -> None:
        if token.startswith("#\\"):
            token = token[2:]
            self.enabled = False
        else:
            self.enabled = True

        match = _SEPARATOR.search(token)
        if match is None:
            # Without a separator the whole text serves as name and value.
            self.variable = token
            self.value = token
        else:
            self.variable = token[:match.start()]
            self.value = token[match.start() + 1:]
        self.comment = comment
        self.user_login = user_login
        self._initial = self._snapshot()

    def _snapshot(self) -> tuple[str, str, str, str, bool]:
        return (self.variable, self.value, self.comment, self.user_login, self.enabled)

    def export_variable(self) -> str:
        """Return the crontab text for this variable, comment included."""
        prefix = "" if self.enabled else "#\\"
        return f"{export_comment(self.comment)}{prefix}{self.variable}={self.value}\n"

    def apply(self) -> None:
        """Make the current values the new initial values."""
        self._initial = self._snapshot()

    def cancel(self) -> None:
        """Revert to the initial (or last applied) values."""
        (self.variable, self.value, self.comment,
         self.user_login, self.enabled) = self._initial

    def is_dirty(self) -> bool:
        return self._snapshot() != self._initial

    def information(self) -> str:
        """Short explanation of what the variable does."""
        return _INFORMATION.get(self.variable, "Local Variable")

    def icon_name(self) -> str:
        """Theme icon name suited to the variable."""
        return _ICONS.get(self.variable, "text-plain")

    def copy(self) -> "CronVariable":
        """Copy the values; the copy has an empty initial state."""
        clone = CronVariable.__new__(CronVariable)
        clone.variable = self.variable
        clone.value = self.value
        clone.comment = self.comment
        clone.user_login = self.user_login
        clone.enabled = self.enabled
        clone._initial = ("", "", "", "", True)
        return clone

    def __repr__(self) -> str:
        return (f"CronVariable({self.variable!r}, {self.value!r}, "
                f"enabled={self.enabled}, user_login={self.user_login!r})")