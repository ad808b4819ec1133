"""Shared fixtures for RunTest client tests."""

from collections.abc import Generator
from pathlib import Path
from typing import Protocol

import pytest
from aioresponses import aioresponses as aioresponses_cls


class WritePropertiesFn(Protocol):
    """Protocol for properties file creation function."""

    def __call__(self, content: str, name: str = "runtest.properties") -> Path:
        """Write a properties file and return its path."""


@pytest.fixture
def aioresponses() -> Generator[aioresponses_cls, None, None]:
    """Intercept aiohttp requests."""
    with aioresponses_cls() as mocked:
        yield mocked


@pytest.fixture
def write_properties(tmp_path: Path) -> WritePropertiesFn:
    """Return a function to create properties files in a temporary directory."""

    def _write(content: str, name: str = "runtest.properties") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="iso-8859-1")
        return path

    return _write


@pytest.fixture
def default_properties(
    write_properties: WritePropertiesFn,
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
) -> Path:
    """Create ``runtest.properties`` in the working directory."""
    monkeypatch.chdir(tmp_path)
    return write_properties(
        "testsuite=unittestcase.SampleTestSuite\n"
        "reports=C:/reports/results.xml\n"
        "url=http://localhost:8080/cc\n"
    )
