"""Connection settings for the remote test service."""

import logging
import math

from pydantic import Field, HttpUrl, SecretStr, field_validator

from run_test_client.models.base import Model

log = logging.getLogger(__name__)

DEFAULT_USERNAME = "su"
DEFAULT_PASSWORD = "gw"


class ServiceConfig(Model):
    """Settings needed to reach and authenticate against the test service."""

    endpoint: HttpUrl = Field(..., description="Full address of the RunTest service")
    username: str = Field(default=DEFAULT_USERNAME, description="Basic auth user")
    password: SecretStr = Field(
        default=SecretStr(DEFAULT_PASSWORD), description="Basic auth password"
    )
    timeout: float | None = Field(
        default=None, description="Client timeout in seconds (None means no limit)"
    )

    @field_validator("timeout", mode="before")
    @classmethod
    def ignore_unusable_timeout(cls, value: object) -> object:
        """Treat a timeout that is not a positive number of seconds as unset.

        The timeout is only a hint for the HTTP client, so a bad value never
        stops a run.
        """
        if value is None or value == "":
            return None
        try:
            seconds = float(value)  # type: ignore[arg-type]
        except (TypeError, ValueError):
            log.warning("Ignoring timeout that is not a number - %s", value)
            return None
        if not math.isfinite(seconds) or seconds <= 0:
            log.warning("Ignoring timeout that is not positive - %s", value)
            return None
        return seconds
