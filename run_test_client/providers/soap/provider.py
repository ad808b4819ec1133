"""SOAP provider for the RunTest web service."""

import logging
import xml.etree.ElementTree as ET
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from dataclasses import dataclass, field

import aiohttp
from pydantic import ValidationError

from run_test_client.errors import RemoteInvocationError
from run_test_client.models.result import TestResult
from run_test_client.models.service import ServiceConfig
from run_test_client.providers.base import TestRunProvider
from run_test_client.providers.soap.models import RunTestResponse

log = logging.getLogger(__name__)

SOAP_ENV_NS = "http://schemas.xmlsoap.org/soap/envelope/"
SERVICE_NS = "http://waysysweb.com"

RESULT_FIELDS = frozenset(RunTestResponse.model_fields) | frozenset(
    f.alias for f in RunTestResponse.model_fields.values() if f.alias
)


def build_request_envelope(testsuite: str, reports: str) -> bytes:
    """Build the SOAP 1.1 envelope for a ``runTest`` call."""
    envelope = ET.Element(f"{{{SOAP_ENV_NS}}}Envelope")
    body = ET.SubElement(envelope, f"{{{SOAP_ENV_NS}}}Body")
    operation = ET.SubElement(body, f"{{{SERVICE_NS}}}runTest")
    ET.SubElement(operation, "testCaseName").text = testsuite
    ET.SubElement(operation, "testReportName").text = reports
    return ET.tostring(envelope, encoding="utf-8", xml_declaration=True)


def _local_name(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def _find(root: ET.Element, name: str) -> ET.Element | None:
    for element in root.iter():
        if _local_name(element.tag) == name:
            return element
    return None


def _fault_text(root: ET.Element) -> str | None:
    if (fault := _find(root, "Fault")) is None:
        return None
    fault_string = _find(fault, "faultstring")
    message = fault_string.text if fault_string is not None else None
    return message or "Server returned a SOAP fault"


def parse_fault(text: str) -> str | None:
    """Return the fault string if the text is a SOAP fault envelope."""
    try:
        return _fault_text(ET.fromstring(text))
    except ET.ParseError:
        return None


def parse_response_envelope(text: str) -> RunTestResponse:
    """Parse a ``runTestResponse`` envelope.

    Raises:
        RemoteInvocationError: On a SOAP fault or an unreadable response

    """
    try:
        root = ET.fromstring(text)
    except ET.ParseError as exc:
        raise RemoteInvocationError(f"Malformed response from server: {exc}") from exc

    if (fault := _fault_text(root)) is not None:
        raise RemoteInvocationError(fault)

    response = _find(root, "runTestResponse")
    if response is None:
        raise RemoteInvocationError("Server response did not contain a test result")

    values = {
        _local_name(element.tag): (element.text or "").strip()
        for element in response.iter()
        if _local_name(element.tag) in RESULT_FIELDS
    }

    try:
        return RunTestResponse.model_validate(values)
    except ValidationError as exc:
        raise RemoteInvocationError(f"Invalid test result from server: {exc}") from exc


@dataclass(frozen=True, kw_only=True)
class SoapRunTestProvider(TestRunProvider):
    """Runs test suites through the RunTest SOAP service."""

    config: ServiceConfig
    session: aiohttp.ClientSession = field(repr=False)

    @classmethod
    @asynccontextmanager
    async def from_config(
        cls, config: ServiceConfig
    ) -> AsyncGenerator["SoapRunTestProvider", None]:
        """Create provider with managed session lifecycle."""
        timeout = aiohttp.ClientTimeout(total=config.timeout)
        async with aiohttp.ClientSession(timeout=timeout) as session:
            yield cls(config=config, session=session)

    @property
    def auth(self) -> aiohttp.BasicAuth:
        """HTTP basic credentials for the service."""
        return aiohttp.BasicAuth(
            self.config.username, self.config.password.get_secret_value()
        )

    async def run_test(self, testsuite: str, reports: str) -> TestResult:
        """Call ``runTest`` and return the result reported by the server."""
        endpoint = str(self.config.endpoint)
        headers = {"Content-Type": "text/xml; charset=utf-8", "SOAPAction": '""'}

        log.info(
            "Running test suite: endpoint=%s, testsuite=%s, reports=%s, username=%s",
            endpoint,
            testsuite,
            reports,
            self.config.username,
        )

        try:
            async with self.session.post(
                endpoint,
                data=build_request_envelope(testsuite, reports),
                headers=headers,
                auth=self.auth,
            ) as response:
                status = response.status
                text = await response.text()
        except (aiohttp.ClientError, TimeoutError) as exc:
            raise RemoteInvocationError(
                f"Unable to reach test service at {endpoint}: {exc}"
            ) from exc

        if status in {401, 403}:
            raise RemoteInvocationError(
                f"Authentication failed for user {self.config.username}: {status}"
            )

        if status != 200:
            # SOAP 1.1 servers report faults with HTTP 500
            raise RemoteInvocationError(
                parse_fault(text) or f"Failed to run test suite: {status} {text}"
            )

        return parse_response_envelope(text).to_result()
