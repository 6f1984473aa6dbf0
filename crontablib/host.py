"""The crontabs of a host: system crontab, per-user tables and their union."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Mapping, Optional, Union

from crontablib.cron import CronTable
from crontablib.status import SaveStatus
from crontablib.task import CronTask
from crontablib.variable import CronVariable

PathLike = Union[str, Path]

SYSTEM_CRONTAB = "/etc/crontab"
CRON_ALLOW = "/etc/cron.allow"
CRON_DENY = "/etc/cron.deny"


def _read_lines(path: PathLike) -> Optional[list[str]]:
    try:
        return Path(path).read_text().splitlines()
    except OSError:
        return None


def allow_deny(name: str, allow_path: PathLike = CRON_ALLOW,
               deny_path: PathLike = CRON_DENY) -> bool:
    """Tell whether ``name`` may use cron.

    If the allow file can be read, the user must be listed in it; otherwise,
    if the deny file can be read, the user must not be listed in it.
    """
    allowed = _read_lines(allow_path)
    if allowed is not None:
        return name in allowed
    denied = _read_lines(deny_path)
    if denied is not None:
        return name not in denied
    return True


class SystemCron(CronTable):
    """The system-wide crontab, whose entries name the user they run as."""

    def __init__(self, crontab_path: PathLike = SYSTEM_CRONTAB) -> None:
        super().__init__(user_login="System Crontab",
                         user_real_name="System Crontab",
                         system_cron=True, multi_user_cron=True,
                         current_user_cron=False)
        self.crontab_path = Path(crontab_path)
        # An unreadable file simply means there is no system crontab yet.
        self.parse_file(self.crontab_path)


class CronHost:
    """All crontabs known on the host.

    For the root user this holds one table per user plus the system crontab;
    for other users, their own table and the system crontab.
    """

    def __init__(self, crons: Iterable[CronTable], root_user: bool = False) -> None:
        self.crons: list[CronTable] = list(crons)
        self._root_user = root_user

    def is_root_user(self) -> bool:
        return self._root_user

    def save(self, paths: Mapping[str, PathLike]) -> SaveStatus:
        """Save the tables, each to the path given for its user login.

        A non-root user only saves their own table.
        """
        if not self._root_user:
            current = self.find_current_user_cron()
            if current is None:
                raise LookupError("no crontab belongs to the current user")
            return current.save(paths[current.user_login])

        for cron in self.crons:
            status = cron.save(paths[cron.user_login])
            if status.is_error:
                return SaveStatus.failure(
                    f"User {cron.user_login}: {status.error_message}",
                    status.detail_error_message)
        return SaveStatus()

    def cancel(self) -> None:
        for cron in self.crons:
            cron.cancel()

    def is_dirty(self) -> bool:
        return any(cron.is_dirty() for cron in self.crons)

    def find_current_user_cron(self) -> Optional[CronTable]:
        return next((c for c in self.crons if c.current_user_cron), None)

    def find_system_cron(self) -> Optional[CronTable]:
        return next((c for c in self.crons if c.multi_user_cron), None)

    def find_user_cron(self, user_login: str) -> Optional[CronTable]:
        return next((c for c in self.crons if c.user_login == user_login), None)

    def find_cron_containing(
            self, item: Union[CronTask, CronVariable]) -> Optional[CronTable]:
        """The table holding this very task or variable, if any."""
        for cron in self.crons:
            entries = cron.tasks() if isinstance(item, CronTask) else cron.variables()
            if any(entry is item for entry in entries):
                return cron
        return None


class GlobalCron(CronTable):
    """A view over the tasks and variables of every user's crontab."""

    def __init__(self, host: CronHost) -> None:
        super().__init__(user_login="All users", system_cron=False,
                         multi_user_cron=True, current_user_cron=False)
        self.host = host

    def _user_crons(self) -> list[CronTable]:
        return [cron for cron in self.host.crons if not cron.system_cron]

    def _user_cron(self, user_login: str) -> CronTable:
        cron = self.host.find_user_cron(user_login)
        if cron is None:
            raise LookupError(f"no crontab for user {user_login!r}")
        return cron

    def _containing(self, item: Union[CronTask, CronVariable]) -> CronTable:
        cron = self.host.find_cron_containing(item)
        if cron is None:
            raise LookupError(f"{item!r} belongs to no crontab")
        return cron

    def tasks(self) -> list[CronTask]:
        return [task for cron in self._user_crons() for task in cron.tasks()]

    def variables(self) -> list[CronVariable]:
        return [var for cron in self._user_crons() for var in cron.variables()]

    def add_task(self, task: CronTask) -> None:
        self._user_cron(task.user_login).add_task(task)

    def add_variable(self, variable: CronVariable) -> None:
        self._user_cron(variable.user_login).add_variable(variable)

    def modify_task(self, task: CronTask) -> None:
        """Move the task to the table of its user if that has changed.

        A task belonging to no table (pasted, say) is added to its user's table.
        """
        current = self.host.find_cron_containing(task)
        if current is None or current.user_login != task.user_login:
            if current is not None:
                current.remove_task(task)
            self._user_cron(task.user_login).add_task(task)

    def modify_variable(self, variable: CronVariable) -> None:
        """Move the variable to the table of its user if that has changed."""
        current = self.host.find_cron_containing(variable)
        if current is None or current.user_login != variable.user_login:
            if current is not None:
                current.remove_variable(variable)
            self._user_cron(variable.user_login).add_variable(variable)

    def remove_task(self, task: CronTask) -> None:
        self._containing(task).remove_task(task)

    def remove_variable(self, variable: CronVariable) -> None:
        self._containing(variable).remove_variable(variable)