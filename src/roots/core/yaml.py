"""YAML configuration loading for roots.

Uses ``yaml.safe_load`` to prevent arbitrary code execution from untrusted
YAML content. Used by
[ValidatorConfig.from_yaml()][roots.nips.nip01.configs.ValidatorConfig.from_yaml]
and [EventValidator.from_yaml()][roots.nips.nip01.validator.EventValidator.from_yaml].

Examples:
    ```python
    from roots.core.yaml import load_yaml

    config = load_yaml("config/validator.yaml")
    ```
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from .exceptions import ConfigurationError


def load_yaml(config_path: str | Path) -> dict[str, Any]:
    """Load and parse a YAML configuration file.

    Args:
        config_path: Path to the YAML file (absolute or relative).

    Returns:
        Parsed configuration as a dictionary. Returns an empty dict if the
        file exists but contains no data.

    Raises:
        FileNotFoundError: If the file does not exist.
        ConfigurationError: If the file is not valid YAML or its top level
            is not a mapping.

    Warning:
        This function does not validate the structure of the returned
        dictionary. Callers pass the result to a Pydantic model for schema
        validation.
    """
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with path.open(encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in {config_path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Config file {config_path} must contain a mapping, got {type(data).__name__}"
        )
    return data
