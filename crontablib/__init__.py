"""Read, edit, describe and write crontab files."""

__version__ = "0.6.95"

__all__ = ["cron", "fields", "helper", "host", "status", "task", "unit", "variable"]