"""Setup/teardown fixtures bound to a test, suite, or session lifetime."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any


logger = logging.getLogger(__name__)

FixtureFunction = Callable[[Any], None]


class Scope(Enum):
    """Fixture lifecycle scope."""

    TEST = "test"  # Fresh setup/teardown around every test invocation
    SUITE = "suite"  # Once per suite run
    SESSION = "session"  # Once for the entire session


@dataclass(frozen=True)
class Fixture:
    """Paired setup/teardown callables plus an opaque argument handle.

    The ``args`` value belongs to whoever registered the fixture. It is
    handed to ``setup``/``teardown`` and to test bodies as-is and is never
    inspected by the runner.

    Attributes:
    ----------
    setup : Callable | None
        Called with ``args`` when the fixture's scope begins.
    teardown : Callable | None
        Called with ``args`` when the fixture's scope ends.
    args : Any
        Caller-owned argument handle.
    scope : Scope
        Lifetime of the fixture.
    """

    setup_fn: FixtureFunction | None = None
    teardown_fn: FixtureFunction | None = None
    args: Any = None
    scope: Scope = Scope.TEST

    def __post_init__(self) -> None:
        if isinstance(self.scope, str):
            object.__setattr__(self, "scope", Scope(self.scope))

    def setup(self) -> None:
        """Run the setup function if defined."""
        if self.setup_fn is not None:
            logger.debug("fixture setup (%s scope)", self.scope.value)
            self.setup_fn(self.args)

    def teardown(self) -> None:
        """Run the teardown function if defined."""
        if self.teardown_fn is not None:
            logger.debug("fixture teardown (%s scope)", self.scope.value)
            self.teardown_fn(self.args)


def fixture_args(fixture: Fixture | None) -> Any:
    """Return the argument handle of ``fixture``, or None when absent."""
    return fixture.args if fixture is not None else None
