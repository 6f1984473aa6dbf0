[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "crontablib"
version = "0.6.95"
description = "Read, edit, describe and write crontab files: tasks, variables and schedules"
requires-python = ">=3.10"
dependencies = []
keywords = ["cron", "crontab", "scheduling", "system administration"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: System Administrators",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Systems Administration",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["crontablib"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
