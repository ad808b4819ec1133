"""Abstract base class for remote test execution providers."""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from run_test_client.models.result import TestResult


@dataclass(frozen=True, kw_only=True)
class TestRunProvider(ABC):
    """Abstract base for services that run a test suite remotely."""

    __test__ = False

    @abstractmethod
    async def run_test(self, testsuite: str, reports: str) -> TestResult:
        """Run a test suite on the server and return its aggregate result.

        Args:
            testsuite: Name of the test suite to run
            reports: Destination for the generated test reports

        Returns:
            Result reported by the server

        Raises:
            RemoteInvocationError: If the call fails or is rejected

        """
