"""Registration errors raised by the session and suite APIs."""


class FortestError(Exception):
    """Base class for fortest registration errors."""


class DuplicateNameError(FortestError):
    """A test suite with the same name is already registered."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Test suite with name '{name}' already exists in session.")


class UnknownSuiteError(FortestError):
    """An operation referenced a suite that was never registered."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Suite '{name}' does not exist in session.")


class InvalidScopeError(FortestError):
    """A fixture's scope does not match the call used to register it."""
