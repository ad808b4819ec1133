"""CLI entry point for the RunTest client.

Usage::

    runtest -testsuite <suite> -reports <file> -url <server> -prop <file>

Any property can be given in the properties file (``runtest.properties`` by
default) and overridden on the command line.
"""

import asyncio
import logging
import sys
from collections.abc import Sequence

from run_test_client.config_resolver import resolve
from run_test_client.controller import ProviderFactory, TestInvocationController
from run_test_client.errors import RunTestError
from run_test_client.models.result import TestResult
from run_test_client.providers.soap import SoapRunTestProvider
from run_test_client.reporter import exit_code, format_summary

VERSION = "1.00"


async def run(
    args: Sequence[str],
    provider_factory: ProviderFactory = SoapRunTestProvider.from_config,
) -> TestResult:
    """Resolve the configuration and run the test suite it names."""
    log = logging.getLogger("run_test_client")

    log.info("Begin RunTest, Version %s", VERSION)
    config = resolve(args)

    controller = TestInvocationController(provider_factory=provider_factory)
    return await controller.execute(config)


def run_and_report(
    args: Sequence[str],
    provider_factory: ProviderFactory = SoapRunTestProvider.from_config,
) -> int:
    """Run the client, print the summary and return the exit code.

    Every failure is turned into a result with ``error_num`` 1, so a summary
    is always printed.
    """
    log = logging.getLogger("run_test_client")

    try:
        result = asyncio.run(run(args, provider_factory))
    except Exception as exc:
        match exc:
            case RunTestError():
                log.error("%s", exc)
            case _:
                log.exception("Test run failed: %s", exc)
        result = TestResult.from_exception(exc)

    for line in format_summary(result):
        print(line)

    return exit_code(result)


def main() -> None:
    """CLI entry point."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    sys.exit(run_and_report(sys.argv[1:]))


if __name__ == "__main__":  # pragma: no cover
    main()
