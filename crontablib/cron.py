"""A single crontab: its variables and tasks, parsing, export and saving."""

from __future__ import annotations

import re
from datetime import datetime
from pathlib import Path
from typing import Union

from crontablib.status import SaveStatus
from crontablib.task import CronTask
from crontablib.variable import CronVariable

_FIRST_TEXT = re.compile(r"\w")
_WHITESPACE = re.compile(r"[ \t]")

PathLike = Union[str, Path]


def _find(pattern: re.Pattern, text: str) -> int:
    match = pattern.search(text)
    return -1 if match is None else match.start()


class CronTable:
    """The tasks and environment variables of one crontab file."""

    def __init__(self, user_login: str = "", user_real_name: str = "",
                 system_cron: bool = False, multi_user_cron: bool = False,
                 current_user_cron: bool = False) -> None:
        self.user_login = user_login
        self.user_real_name = user_real_name
        self.system_cron = system_cron
        self.multi_user_cron = multi_user_cron
        self.current_user_cron = current_user_cron
        self._tasks: list[CronTask] = []
        self._variables: list[CronVariable] = []
        self._initial_task_count = 0
        self._initial_variable_count = 0

    def parse_text(self, text: str) -> None:
        """Read crontab text, appending its entries.

        The resulting numbers of tasks and variables become the unmodified state.
        """
        comment = ""
        leading_comment = True

        for line in text.splitlines():
            # Comments start with '#', disabled entries with '#\'.
            if line.startswith("#") and line[1:2] != "\\":
                # Leading comments with a space after '#' are not ours.
                if leading_comment and line.startswith("# "):
                    continue
                leading_comment = False
                first_text = _find(_FIRST_TEXT, line)
                if first_text < 0:
                    comment = ""
                elif first_text < 10:
                    stripped = line[1:].strip()
                    comment = stripped if not comment else f"{comment}\n{stripped}"
                else:
                    comment = ""
                continue

            first_space = _find(_WHITESPACE, line)
            first_equals = line.find("=")

            if first_equals > 0 and (first_space == -1 or first_space > first_equals):
                self._variables.append(CronVariable(line, comment, self.user_login))
                comment = ""
            elif first_space > 0:
                self._tasks.append(
                    CronTask(line, comment, self.user_login, self.multi_user_cron))
                comment = ""

        self._initial_task_count = len(self._tasks)
        self._initial_variable_count = len(self._variables)

    def parse_file(self, path: PathLike) -> None:
        """Read a crontab file; a file that cannot be read adds nothing."""
        try:
            text = Path(path).read_text()
        except OSError:
            return
        self.parse_text(text)

    def assign_from(self, source: "CronTable") -> None:
        """Replace this table's entries with copies of those of ``source``."""
        self._variables = [variable.copy() for variable in source.variables()]
        self._tasks = [task.copy() for task in source.tasks()]

    def tasks(self) -> list[CronTask]:
        return list(self._tasks)

    def variables(self) -> list[CronVariable]:
        return list(self._variables)

    def add_task(self, task: CronTask) -> None:
        """Append a task, adapting it to this table's owner."""
        if self.system_cron:
            task.system_crontab = True
        else:
            task.user_login = self.user_login
            task.system_crontab = False
        self._tasks.append(task)

    def add_variable(self, variable: CronVariable) -> None:
        """Append a variable, adapting it to this table's owner."""
        variable.user_login = "root" if self.system_cron else self.user_login
        self._variables.append(variable)

    def modify_task(self, task: CronTask) -> None:
        """Nothing needs to happen when a task of a single table changes."""

    def modify_variable(self, variable: CronVariable) -> None:
        """Nothing needs to happen when a variable of a single table changes."""

    def remove_task(self, task: CronTask) -> None:
        self._tasks = [item for item in self._tasks if item is not task]

    def remove_variable(self, variable: CronVariable) -> None:
        self._variables = [item for item in self._variables if item is not variable]

    def export_cron(self) -> str:
        """Return the whole crontab as text."""
        parts = [variable.export_variable() + "\n" for variable in self._variables]
        parts.extend(task.export_task() + "\n" for task in self._tasks)
        parts.append("\n")
        stamp = datetime.now().strftime("%c")
        parts.append(f"# File generated by Crontablib the {stamp}.\n")
        return "".join(parts)

    def save_to_file(self, path: PathLike) -> None:
        """Write the exported crontab to ``path``; raises OSError on failure."""
        Path(path).write_text(self.export_cron())

    def save(self, path: PathLike) -> SaveStatus:
        """Write the crontab to ``path`` and mark every change as applied."""
        try:
            self.save_to_file(path)
        except OSError:
            return SaveStatus.failure(
                "Unable to open crontab file for writing",
                f"The file {path} could not be opened.")

        for task in self._tasks:
            task.apply()
        for variable in self._variables:
            variable.apply()
        self._initial_task_count = len(self._tasks)
        self._initial_variable_count = len(self._variables)
        return SaveStatus()

    def cancel(self) -> None:
        """Revert every task and variable to its last applied values."""
        for task in self._tasks:
            task.cancel()
        for variable in self._variables:
            variable.cancel()

    def is_dirty(self) -> bool:
        if self._initial_task_count != len(self._tasks):
            return True
        if self._initial_variable_count != len(self._variables):
            return True
        return (any(task.is_dirty() for task in self._tasks)
                or any(variable.is_dirty() for variable in self._variables))

    def path(self) -> str:
        """Value of the last PATH variable, or an empty string."""
        value = ""
        for variable in self._variables:
            if variable.variable == "PATH":
                value = variable.value
        return value

    def __repr__(self) -> str:
        return (f"CronTable(user_login={self.user_login!r}, "
                f"tasks={len(self._tasks)}, variables={len(self._variables)})")