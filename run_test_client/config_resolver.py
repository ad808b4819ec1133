"""Resolve the run configuration from a properties file and command-line flags.

Properties in the file are the defaults; flags given on the command line
override them. The file is selected with ``-prop <path>`` and defaults to
``runtest.properties`` in the working directory.
"""

import logging
from collections.abc import Mapping, Sequence
from pathlib import Path

from jproperties import ParseError, Properties

from run_test_client.errors import ConfigLoadError, ConfigValidationError
from run_test_client.properties import Property, is_canonical, lookup_flag

log = logging.getLogger(__name__)

DEFAULT_PROPERTIES_FILE = "runtest.properties"

type Configuration = Mapping[str, str]


def resolve_properties_file_path(args: Sequence[str]) -> Path:
    """Return the properties file named by the first ``-prop`` flag.

    Falls back to the default file when the flag is absent or has no value.
    """
    for index, token in enumerate(args):
        if token == Property.PROP.flag:
            if index + 1 < len(args):
                return Path(args[index + 1])
            break
    return Path(DEFAULT_PROPERTIES_FILE)


def load_properties(path: Path) -> dict[str, str]:
    """Read a Java-style properties file into a mapping.

    Raises:
        ConfigLoadError: If the file cannot be opened or parsed

    """
    properties = Properties()
    try:
        with path.open("rb") as stream:
            properties.load(stream, "iso-8859-1")
    except FileNotFoundError as exc:
        raise ConfigLoadError(f"Cannot find property file - {path}", path) from exc
    except PermissionError as exc:
        raise ConfigLoadError(
            f"Cannot open existing property file - {path}", path
        ) from exc
    except OSError as exc:
        raise ConfigLoadError(f"Unable to read property file - {path}", path) from exc
    except (ParseError, UnicodeDecodeError) as exc:
        raise ConfigLoadError(
            f"Could not load properties file - {path}", path
        ) from exc

    return {key: properties[key].data for key in properties}


def validate(config: Configuration) -> None:
    """Ensure every key in a file-derived configuration is a known property.

    Raises:
        ConfigValidationError: On the first unrecognized key

    """
    for key in config:
        if not is_canonical(key):
            raise ConfigValidationError(key)


def apply_overrides(config: Configuration, args: Sequence[str]) -> dict[str, str]:
    """Apply ``flag value`` pairs from the command line to a configuration.

    Pairs are read from index 0 in steps of two; a trailing token without a
    value is ignored. Unknown flags are logged and skipped.
    """
    resolved = dict(config)
    for index in range(0, len(args) - 1, 2):
        flag, value = args[index], args[index + 1]
        prop = lookup_flag(flag)
        if prop is None:
            log.warning("Unknown property - %s", flag)
            continue
        resolved[prop.value] = value.strip()
    return resolved


def resolve(args: Sequence[str]) -> Configuration:
    """Build the final configuration for a run.

    On return the properties file has been read and every command-line pair
    has been processed. Required properties are not checked here.

    Raises:
        ConfigLoadError: If the properties file cannot be loaded
        ConfigValidationError: If the properties file has an unknown key

    """
    path = resolve_properties_file_path(args)
    log.info("Loading properties from %s", path)

    file_config = load_properties(path)
    validate(file_config)

    return apply_overrides(file_config, args)
