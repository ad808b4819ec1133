"""Controller that checks a configuration and invokes the remote test run."""

import logging
from collections.abc import Callable
from contextlib import AbstractAsyncContextManager
from dataclasses import dataclass

from pydantic import HttpUrl, SecretStr, TypeAdapter, ValidationError

from run_test_client.config_resolver import Configuration
from run_test_client.errors import MalformedEndpointError
from run_test_client.models.result import TestResult
from run_test_client.models.service import (
    DEFAULT_PASSWORD,
    DEFAULT_USERNAME,
    ServiceConfig,
)
from run_test_client.properties import Property
from run_test_client.providers.base import TestRunProvider
from run_test_client.providers.soap import SoapRunTestProvider

log = logging.getLogger(__name__)

SERVICE_PATH = "/ws/unittestcase/RunTest"

type ProviderFactory = Callable[
    [ServiceConfig], AbstractAsyncContextManager[TestRunProvider]
]

_endpoint_adapter = TypeAdapter(HttpUrl)


def form_endpoint(config: Configuration) -> HttpUrl:
    """Form the service endpoint from the ``url`` property.

    Raises:
        MalformedEndpointError: If ``url`` is not set or is not a valid URL

    """
    server = config.get(Property.URL)
    if server is None:
        raise MalformedEndpointError("URL property is not set")

    try:
        return _endpoint_adapter.validate_python(f"{server}{SERVICE_PATH}")
    except ValidationError as exc:
        raise MalformedEndpointError(f"Bad server URL - {server}", server) from exc


def build_service_config(config: Configuration) -> ServiceConfig:
    """Build connection settings, filling in default credentials."""
    return ServiceConfig.model_validate(
        {
            "endpoint": form_endpoint(config),
            "username": config.get(Property.USERNAME, DEFAULT_USERNAME),
            "password": SecretStr(config.get(Property.PASSWORD, DEFAULT_PASSWORD)),
            "timeout": config.get(Property.TIMEOUT),
        }
    )


@dataclass(frozen=True, kw_only=True)
class TestInvocationController:
    """Runs the configured test suite through a provider."""

    __test__ = False

    provider_factory: ProviderFactory = SoapRunTestProvider.from_config

    async def execute(self, config: Configuration) -> TestResult:
        """Run the test suite named in the configuration.

        Missing ``testsuite`` or ``reports`` properties produce a failed
        result without contacting the server. Endpoint and remote failures
        are raised to the caller.
        """
        testsuite = config.get(Property.TESTSUITE)
        reports = config.get(Property.REPORTS)

        if testsuite is None:
            return TestResult.missing_property("Test suite name is not set")
        if reports is None:
            return TestResult.missing_property("Report file not set")

        service_config = build_service_config(config)
        log.info("Invoking test service at %s", service_config.endpoint)

        async with self.provider_factory(service_config) as provider:
            return await provider.run_test(testsuite, reports)
