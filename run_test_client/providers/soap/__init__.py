"""SOAP provider module for the RunTest web service."""

from run_test_client.providers.soap.models import RunTestResponse
from run_test_client.providers.soap.provider import SoapRunTestProvider

__all__ = ["RunTestResponse", "SoapRunTestProvider"]
