"""Console loggers for fortest output using Rich."""

from __future__ import annotations

import sys
from dataclasses import dataclass

from rich.console import Console
from rich.text import Text


# tag -> style; tags outside this table are printed as the raw message
_TAG_STYLES: dict[str, str] = {
    "PASS": "green",
    "FAIL": "red",
    "INFO": "",
    "TRUE": "green",
    "FALSE": "red",
}


def _make_console(file=None, color: bool = True) -> Console:
    return Console(
        file=file or sys.__stdout__,
        highlight=False,
        no_color=not color,
    )


class ConsoleLogger:
    """Writes ``[TAG] message`` lines to a Rich console.

    Recognised tags (PASS, FAIL, INFO, TRUE, FALSE) are coloured and
    bracketed; any other tag prints the message as plain text. An optional
    border string is printed above and below every formatted message.
    """

    def __init__(
        self,
        console: Console | None = None,
        *,
        border: str = "",
        color: bool = True,
    ) -> None:
        self.console = console or _make_console(color=color)
        self.border = border
        self.last_message: str | None = None
        self.last_tag: str | None = None

    def log(self, message: str, tag: str) -> None:
        """Log ``message`` under ``tag``."""
        self.last_message = message
        self.last_tag = tag

        style = _TAG_STYLES.get(tag)
        if style is None:
            self.console.print(Text(message), soft_wrap=True)
            return

        if self.border:
            self.console.print(Text(self.border, style=style), soft_wrap=True)
        self.console.print(Text(f"[{tag}] {message}", style=style), soft_wrap=True)
        if self.border:
            self.console.print(Text(self.border, style=style), soft_wrap=True)

    def __str__(self) -> str:
        if not self.last_tag:
            return "(no log yet)"
        return f"[{self.last_tag}] {self.last_message}"


@dataclass(frozen=True)
class LogEntry:
    """A single assertion log record."""

    tag: str
    message: str


class AssertLogger:
    """Logger used by :class:`fortest.assertions.Assert`.

    Keeps every entry it receives and prints ``[ASSERT][TAG] message``.
    """

    def __init__(self, console: Console | None = None, *, color: bool = True) -> None:
        self.console = console or _make_console(color=color)
        self.color = color
        self._entries: list[LogEntry] = []

    @property
    def entries(self) -> list[LogEntry]:
        """All entries logged so far, oldest first."""
        return list(self._entries)

    def log(self, message: str, tag: str) -> None:
        self._entries.append(LogEntry(tag=tag, message=message))
        if tag == "PASS":
            style = "green"
        elif tag == "FAIL":
            style = "red"
        else:
            style = "yellow"
        text = Text(f"[ASSERT][{tag}] {message}", style=style if self.color else "")
        self.console.print(text, soft_wrap=True)

    def print_summary(self) -> None:
        """Print how many PASS and FAIL entries were logged."""
        passes = sum(1 for e in self._entries if e.tag == "PASS")
        fails = sum(1 for e in self._entries if e.tag == "FAIL")
        self.console.print(
            Text(f"Assertions Summary: {passes} passed, {fails} failed"),
            soft_wrap=True,
        )

    def clear(self) -> None:
        self._entries.clear()
