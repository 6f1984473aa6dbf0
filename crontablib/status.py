"""Outcome of saving a crontab and the error raised when loading one fails."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SaveStatus:
    """Result of a save: either success or an error with a detailed message."""

    error_message: str = ""
    detail_error_message: str = ""
    is_error: bool = False

    @classmethod
    def failure(cls, error_message: str, detail_error_message: str) -> "SaveStatus":
        """Build a status describing a failed save."""
        return cls(error_message, detail_error_message, True)


class CronInitializationError(Exception):
    """Raised when crontab information cannot be set up."""

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message

    @property
    def has_error_message(self) -> bool:
        return bool(self.message)