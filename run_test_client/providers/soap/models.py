"""Pydantic models for RunTest service responses."""

from pydantic import Field, NonNegativeInt

from run_test_client.models.base import Model
from run_test_client.models.result import TestResult


class RunTestResponse(Model):
    """The ``runTestResponse`` body returned by the RunTest service."""

    succeeded: NonNegativeInt = 0
    failed: NonNegativeInt = 0
    errors: NonNegativeInt = 0
    error_num: int = Field(default=0, alias="errorNum")
    error_message: str | None = Field(default=None, alias="errorMessage")

    def to_result(self) -> TestResult:
        """Convert the response into a TestResult."""
        return TestResult(
            succeeded=self.succeeded,
            failed=self.failed,
            errors=self.errors,
            error_num=self.error_num,
            error_message=self.error_message if self.error_num != 0 else None,
        )
