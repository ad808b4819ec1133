"""Console reporting of test run results."""

from collections.abc import Sequence

from run_test_client.models.result import TestResult


def format_summary(result: TestResult) -> Sequence[str]:
    """Format a result as the lines of a console summary."""
    lines = [
        f"Tests succeeded: {result.succeeded}",
        f"Tests failed   : {result.failed}",
        f"Test errors    : {result.errors}",
        f"Total tests    : {result.total}",
        f"Result is      : {result.error_num}",
    ]
    if not result.ok:
        lines.append(f"Error: {result.error_message}")
    return lines


def exit_code(result: TestResult) -> int:
    """Process exit status for a result."""
    return result.error_num
