"""Models for test run results."""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class TestResult:
    """Aggregate outcome of a test suite run.

    ``error_num`` is the only success signal: a run can succeed while still
    reporting failed or errored tests.
    """

    __test__ = False

    succeeded: int = 0
    failed: int = 0
    errors: int = 0
    error_num: int = 0
    error_message: str | None = None

    @property
    def total(self) -> int:
        """Total number of tests reported."""
        return self.succeeded + self.failed + self.errors

    @property
    def ok(self) -> bool:
        """Whether the run as a whole succeeded."""
        return self.error_num == 0

    @classmethod
    def missing_property(cls, message: str) -> "TestResult":
        """Result for a run rejected locally before contacting the server."""
        return cls(errors=1, error_num=1, error_message=message)

    @classmethod
    def from_exception(cls, exc: BaseException) -> "TestResult":
        """Result for a run aborted by an uncaught failure."""
        return cls(error_num=1, error_message=str(exc) or type(exc).__name__)
