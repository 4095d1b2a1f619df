from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

from dotenv import load_dotenv
from rich.console import Console
from rich.table import Table

from fortest.config import get_settings, reset_settings
from fortest.storage.sqlite import DEFAULT_DB_NAME, SQLiteStore
from fortest.storage.sqlite.store import find_project_root
from fortest.testing.models import TestStatus
from fortest.version import __version__


_STATUS_STYLE = {
    TestStatus.PASS: "green",
    TestStatus.FAIL: "red",
    TestStatus.NONE: "dim",
}


class CLIApplication:
    """Top-level command router."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()
        self.parser = argparse.ArgumentParser(
            prog="fortest",
            description="Inspect fortest configuration and result history.",
        )
        subparsers = self.parser.add_subparsers(dest="command", required=True)

        config = subparsers.add_parser("config", help="Print configuration values.")
        group = config.add_mutually_exclusive_group()
        group.add_argument("--version", action="store_true", help="Print the fortest version.")
        group.add_argument("--db-path", action="store_true", help="Print the result database path.")
        group.add_argument("--all", action="store_true", help="Print all configuration (default).")

        history = subparsers.add_parser("history", help="Show stored test results.")
        history.add_argument("--limit", type=int, default=20, help="Number of rows to show (default: 20)")
        history.add_argument("--test", dest="test_name", help="Only show results for this test name.")
        history.add_argument("--db", dest="db_path", help="Database file (default: FORTEST_DB_PATH or project store)")

    def run(self, argv: Sequence[str] | None = None) -> int:
        load_dotenv(Path.cwd() / ".env")
        reset_settings()
        args = self.parser.parse_args(argv)
        if args.command == "config":
            return ConfigCommand(self.console, args).run()
        return HistoryCommand(self.console, args).run()


def _resolve_db_path(explicit: str | None = None) -> Path:
    if explicit:
        return Path(explicit).expanduser()
    settings = get_settings()
    if settings.db_path is not None:
        return settings.db_path
    return find_project_root() / DEFAULT_DB_NAME


class ConfigCommand:
    """Driver for `fortest config`."""

    def __init__(self, console: Console, args: argparse.Namespace) -> None:
        self.console = console
        self.args = args

    def run(self) -> int:
        if self.args.version:
            self.console.print(__version__)
            return 0
        if self.args.db_path:
            self.console.print(str(_resolve_db_path()))
            return 0

        settings = get_settings()
        self.console.print("[bold]fortest configuration:[/bold]")
        self.console.print(f"  version:           {__version__}")
        self.console.print(f"  verbosity:         {settings.verbosity}")
        self.console.print(f"  isolate failures:  {settings.isolate_failures}")
        self.console.print(f"  color:             {settings.color}")
        self.console.print(f"  database:          {_resolve_db_path()}")
        self.console.print(f"  trace output:      {settings.trace_output or '-'}")
        return 0


class HistoryCommand:
    """Driver for `fortest history`."""

    def __init__(self, console: Console, args: argparse.Namespace) -> None:
        self.console = console
        self.db_path = _resolve_db_path(args.db_path)
        self.limit = args.limit
        self.test_name = args.test_name

    def run(self) -> int:
        if not self.db_path.exists():
            self.console.print(f"[yellow]No result database at {self.db_path}[/yellow]")
            return 1

        records = SQLiteStore(self.db_path).list_results(self.limit, test_name=self.test_name)
        if not records:
            self.console.print("[dim]No results recorded.[/dim]")
            return 0

        table = Table(title=f"Recent results ({self.db_path})")
        table.add_column("Recorded at")
        table.add_column("Suite")
        table.add_column("Test")
        table.add_column("Param", justify="right")
        table.add_column("Status")
        table.add_column("Duration", justify="right")
        for record in records:
            style = _STATUS_STYLE[record.status]
            table.add_row(
                record.recorded_at.strftime("%Y-%m-%d %H:%M:%S"),
                record.suite_name or "-",
                record.test_name,
                "-" if record.param_index is None else str(record.param_index),
                f"[{style}]{record.status.name}[/{style}]",
                f"{record.duration_ms:.1f}ms",
            )
        self.console.print(table)
        return 0


def main(argv: Sequence[str] | None = None) -> int:
    return CLIApplication().run(argv)


if __name__ == "__main__":
    sys.exit(main())
