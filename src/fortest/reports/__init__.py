"""Console loggers for run and assertion output."""

from fortest.reports.base import Logger
from fortest.reports.console import AssertLogger, ConsoleLogger, LogEntry


__all__ = ["AssertLogger", "ConsoleLogger", "LogEntry", "Logger"]
