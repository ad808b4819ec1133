"""Recognized configuration properties and their command-line flags."""

from collections.abc import Mapping
from enum import StrEnum
from types import MappingProxyType


class Property(StrEnum):
    """Canonical property names accepted in the properties file."""

    TESTSUITE = "testsuite"
    REPORTS = "reports"
    URL = "url"
    TIMEOUT = "timeout"
    PROP = "prop"
    USERNAME = "username"
    PASSWORD = "password"

    @property
    def flag(self) -> str:
        """Command-line flag that overrides this property (e.g. ``-url``)."""
        return f"-{self.value}"


FLAGS: Mapping[str, Property] = MappingProxyType({p.flag: p for p in Property})

CANONICAL_NAMES: frozenset[str] = frozenset(p.value for p in Property)


def lookup_flag(token: str) -> Property | None:
    """Return the property a command-line token overrides, if it is a flag."""
    return FLAGS.get(token)


def is_canonical(name: str) -> bool:
    """Check if a name is a canonical property name (exact, case-sensitive)."""
    return name in CANONICAL_NAMES
