"""Logger capability consumed by the test runner."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class Logger(Protocol):
    """Anything that accepts a message together with a tag such as PASS or INFO."""

    def log(self, message: str, tag: str) -> None: ...
