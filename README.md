# crontablib

A library for working with crontab files. It parses crontab text into
tasks and environment variables, keeps track of unsaved changes, writes
the table back out in crontab format, and describes schedules in plain
English.

## Installation

```
pip install crontablib
```

## Parsing a crontab

```python
from crontablib.cron import CronTable

table = CronTable("alice", "Alice", False, False, True)
table.parse_text(
    "MAILTO=alice@example.com\n"
    "#Nightly backup\n"
    "30 2 * * 1-5\t/usr/local/bin/backup --full\n"
)

for variable in table.variables():
    print(variable.variable, "=", variable.value, "-", variable.information())

for task in table.tasks():
    print(task.scheduling_cron_format(), task.command, task.comment)
    print(task.describe())   # at 02:30, every Mon, Tue, Wed, Thu, and Fri
```

Lines starting with `#\` are read as disabled entries. Other comment lines
directly above an entry become that entry's comment. Comment lines at the
top of the file that start with `# ` are skipped. `CronTable.parse_file(path)`
reads a crontab from disk. If the file cannot be read, nothing is added.

Tasks accept the `@yearly`, `@annually`, `@monthly`, `@weekly`, `@daily`,
`@hourly` and `@reboot` shortcuts. For a table created with
`multi_user_cron=True` (as the system crontab is), each task line holds the
user login between the schedule and the command.

## Editing and saving

Tasks (`crontablib.task.CronTask`) and variables
(`crontablib.variable.CronVariable`) can be changed in place.

- `is_dirty()` on a table reports unsaved changes.
- `cancel()` goes back to the last applied state.
- `export_cron()` returns the table as crontab text, ending with a
  generated-on comment line.
- `save(path)` writes that text to `path`, marks everything as applied and
  returns a `crontablib.status.SaveStatus`.

```python
from crontablib.task import CronTask

task = CronTask("*/15 * * * *\t/usr/bin/sync-mail", "", "alice", False)
table.add_task(task)
assert table.is_dirty()

status = table.save("/tmp/alice.crontab")
if status.is_error:
    print(status.error_message, status.detail_error_message)
```

A task can also report the program it runs. `complete_command_path()`
removes quotes and handles `\ ` escapes.

## Schedule fields

`crontablib.fields` provides the five crontab fields: `Minute`, `Hour`,
`DayOfMonth`, `Month` and `DayOfWeek`, all built on
`crontablib.unit.CronUnit`.

- Each field parses expressions such as `0-3,5,10-30/5`, as well as day
  and month names such as `mon` or `jan`, and writes itself back out with
  `export_unit()`.
- Minutes and hours are written as `*/N` when the enabled values form one
  of their regular steps.
- `DayOfWeek` reads Sunday given as `0` as `7`.

## Several users and the system crontab

`crontablib.host.CronHost` holds a list of `CronTable` objects:

- it can find the current user's table, the system table, a user's table,
  or the table that holds a given task or variable;
- `save(paths)` writes each table to the path given for its user login,
  and saves only the current user's table when the host is not run as root;
- `cancel()` and `is_dirty()` act on all tables.

Other classes and functions in the same module:

- `SystemCron` loads the system crontab, `/etc/crontab` by default.
- `GlobalCron` shows every user's tasks and variables as one list and
  passes each change to the table of the user it belongs to.
- `allow_deny(name)` checks a login against the `cron.allow` and
  `cron.deny` files.

## What it does not do

The package works only on text and files. It does not look up users in the
system's account database. It does not build a `CronHost` for the machine
by itself; you pass it the tables. It does not install a saved crontab into
the cron daemon: `save` only writes the file you name. It has no command
line and no graphical interface.