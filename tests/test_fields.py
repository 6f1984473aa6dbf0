import pytest

from crontablib.fields import DayOfMonth, DayOfWeek, Hour, Minute, Month


def test_minute_step_is_exported_as_period():
    minute = Minute("*/15")
    assert minute.find_period() == 15
    assert minute.export_unit() == "*/15"


def test_minute_star_exports_star():
    minute = Minute("*")
    assert minute.find_period() == 1
    assert minute.export_unit() == "*"


def test_minute_single_value_has_no_period():
    minute = Minute("5")
    assert minute.find_period() == 0
    assert minute.export_unit() == "5"


def test_minute_modified_export_lists_values():
    minute = Minute("5")
    minute.set_enabled(10, True)
    assert minute.is_dirty()
    assert minute.export_unit() == "5,10"


def test_minute_cancel_restores():
    minute = Minute("5")
    minute.set_enabled(10, True)
    minute.cancel()
    assert not minute.is_enabled(10)
    assert minute.export_unit() == "5"


def test_hour_step_and_star():
    assert Hour("*/6").export_unit() == "*/6"
    star = Hour("*")
    assert star.find_period() == 0
    assert star.export_unit() == "*"


def test_hour_keeps_original_range_text():
    hour = Hour("1-3")
    assert hour.enabled_count() == 3
    assert hour.export_unit() == "1-3"


def test_day_of_month_every_day():
    assert DayOfMonth("*").describe() == "every day "


def test_day_of_month_describe_uses_names():
    dom = DayOfMonth("1,2")
    assert dom.describe() == f"{DayOfMonth.name(1)} and {DayOfMonth.name(2)}"


def test_day_of_month_names():
    assert DayOfMonth.name(31) == "31st"
    assert DayOfMonth.name(22) == "22nd"
    with pytest.raises(IndexError):
        DayOfMonth.name(32)


def test_day_of_week_constructor_folds_sunday_and_is_dirty():
    dow = DayOfWeek("0")
    assert not dow.is_enabled(0)
    assert dow.is_enabled(7)
    assert dow.is_dirty()


def test_day_of_week_initialize_folds_sunday_and_applies():
    dow = DayOfWeek()
    dow.initialize("0")
    assert dow.is_enabled(7)
    assert not dow.is_dirty()
    assert dow.export_unit() == "7"


def test_day_of_week_zero_to_six_is_every_day():
    dow = DayOfWeek()
    dow.initialize("0-6")
    assert dow.is_all_enabled()
    assert dow.export_unit() == "*"
    assert dow.describe() == "every day "


def test_day_of_week_names():
    assert DayOfWeek.name(1) == "Monday"
    assert DayOfWeek.name(1, short=True) == "Mon"
    assert DayOfWeek.name(7) == "Sunday"
    with pytest.raises(IndexError):
        DayOfWeek.name(8)


def test_day_of_week_describe_named_range():
    dow = DayOfWeek()
    dow.initialize("mon-fri")
    assert dow.enabled_count() == 5
    assert dow.describe() == "Mon, Tue, Wed, Thu, and Fri"


def test_month_describe():
    assert Month("*").describe() == "every month"
    assert Month("jan,jun").describe() == "January and June"


def test_month_names():
    assert Month.name(5) == "May"
    assert Month.name(12) == "December"
    with pytest.raises(IndexError):
        Month.name(13)