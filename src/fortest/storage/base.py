"""Abstract sink for completed test results."""

from abc import ABC, abstractmethod

from fortest.testing.models import TestRecord


class ResultSink(ABC):
    """Receives one record per completed test or parameter index."""

    @abstractmethod
    def record(self, result: TestRecord) -> None:
        """Persist a single result."""
