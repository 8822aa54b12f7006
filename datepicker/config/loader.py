"""YAML configuration file loading."""

import logging
from pathlib import Path
from typing import Any, Union

import yaml

from ..exceptions import ConfigurationError

logger = logging.getLogger(__name__)

KNOWN_SECTIONS = ("settings", "options")


def read_config_file(config_file: Union[str, Path]) -> dict[str, Any]:
    """Read a datepicker YAML configuration file.

    The document may contain a ``settings`` section (process-wide defaults) and
    an ``options`` section (per-widget options). An empty file yields an empty
    mapping.

    Args:
        config_file: Path to the YAML file

    Returns:
        Parsed configuration mapping

    Raises:
        ConfigurationError: If the file cannot be read or is not a YAML mapping
    """
    path = Path(config_file)
    try:
        with path.open(encoding="utf-8") as f:
            config_data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigurationError(
            f"Could not read configuration file {path}", details={"error": str(e)}
        ) from e
    except yaml.YAMLError as e:
        raise ConfigurationError(
            f"Invalid YAML in configuration file {path}", details={"error": str(e)}
        ) from e

    if config_data is None:
        return {}
    if not isinstance(config_data, dict):
        raise ConfigurationError(
            f"Configuration file {path} must contain a mapping",
            field_value=type(config_data).__name__,
        )

    for section in config_data:
        if section not in KNOWN_SECTIONS:
            logger.warning(f"Ignoring unknown configuration section {section!r} in {path}")
    for section in KNOWN_SECTIONS:
        if config_data.get(section) is not None and not isinstance(config_data[section], dict):
            raise ConfigurationError(
                f"Configuration section {section!r} must be a mapping", field_name=section
            )

    logger.debug(f"Loaded configuration from {path}")
    return config_data
