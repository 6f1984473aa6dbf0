from crontablib.variable import CronVariable


def test_parse_simple_assignment():
    var = CronVariable("PATH=/usr/bin", "", "alice")
    assert var.variable == "PATH"
    assert var.value == "/usr/bin"
    assert var.enabled is True
    assert var.user_login == "alice"
    assert not var.is_dirty()


def test_parse_disabled_and_round_trip():
    line = "#\\MAILTO=someone@example.com"
    var = CronVariable(line, "", "alice")
    assert var.enabled is False
    assert var.variable == "MAILTO"
    assert var.export_variable() == line + "\n"


def test_enabled_round_trip():
    line = "SHELL=/bin/sh"
    assert CronVariable(line, "", "bob").export_variable() == line + "\n"


def test_export_includes_comment_lines():
    var = CronVariable("HOME=/home/alice", "first\nsecond", "alice")
    assert var.export_variable() == "#first\n#second\nHOME=/home/alice\n"


def test_space_separator():
    var = CronVariable("FOO bar", "", "alice")
    assert var.variable == "FOO"
    assert var.value == "bar"


def test_no_separator_uses_whole_text():
    var = CronVariable("FOO", "", "alice")
    assert var.variable == "FOO"
    assert var.value == "FOO"


def test_apply_and_cancel():
    var = CronVariable("PATH=/usr/bin", "", "alice")
    var.value = "/opt/bin"
    assert var.is_dirty()
    var.cancel()
    assert var.value == "/usr/bin"
    assert not var.is_dirty()

    var.enabled = False
    var.apply()
    assert not var.is_dirty()
    var.enabled = True
    var.cancel()
    assert var.enabled is False


def test_copy_has_same_values_and_is_dirty():
    var = CronVariable("PATH=/usr/bin", "note", "alice")
    clone = var.copy()
    assert (clone.variable, clone.value, clone.comment, clone.user_login, clone.enabled) == (
        var.variable, var.value, var.comment, var.user_login, var.enabled)
    assert clone.is_dirty()
    assert not var.is_dirty()
    clone.value = "/other"
    assert var.value == "/usr/bin"


def test_copy_cancel_resets_to_empty():
    clone = CronVariable("PATH=/usr/bin", "", "alice").copy()
    clone.cancel()
    assert clone.variable == ""
    assert clone.value == ""
    assert clone.enabled is True


def test_information():
    assert CronVariable("HOME=/x", "", "a").information() == "Override default home folder."
    assert CronVariable("PATH=/x", "", "a").information() == "Folders to search for program files."
    assert CronVariable("OTHER=1", "", "a").information() == "Local Variable"


def test_icon_name():
    assert CronVariable("MAILTO=x@example.com", "", "a").icon_name() == "mail-message"
    assert CronVariable("SHELL=/bin/sh", "", "a").icon_name() == "utilities-terminal"
    assert CronVariable("OTHER=1", "", "a").icon_name() == "text-plain"