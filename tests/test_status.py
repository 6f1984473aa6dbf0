import pytest

from crontablib.status import CronInitializationError, SaveStatus


def test_default_status_is_success():
    status = SaveStatus()
    assert status.is_error is False
    assert status.error_message == ""
    assert status.detail_error_message == ""


def test_failure_carries_messages():
    status = SaveStatus.failure("could not write", "disk full")
    assert status.is_error is True
    assert status.error_message == "could not write"
    assert status.detail_error_message == "disk full"


def test_status_is_immutable():
    status = SaveStatus.failure("could not write", "disk full")
    with pytest.raises(AttributeError):
        status.is_error = False
    assert status.is_error is True
    assert status.error_message == "could not write"


def test_initialization_error_message():
    error = CronInitializationError("blocked by cron.deny")
    assert error.message == "blocked by cron.deny"
    assert str(error) == "blocked by cron.deny"
    assert error.has_error_message is True
    assert isinstance(error, Exception)


def test_initialization_error_without_message():
    error = CronInitializationError()
    assert error.has_error_message is False
    assert error.message == ""