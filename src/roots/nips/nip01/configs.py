"""
Configuration models for NIP-01 event validation.

See Also:
    [EventValidator][roots.nips.nip01.validator.EventValidator]: Consumer
        of [ValidatorConfig][roots.nips.nip01.configs.ValidatorConfig].
    [load_yaml()][roots.core.yaml.load_yaml]: Loads the YAML source for
        [ValidatorConfig.from_yaml()][roots.nips.nip01.configs.ValidatorConfig.from_yaml].

Examples:
    ```yaml
    # config/validator.yaml
    stages:
      structure: true
      id: true
      signature: false   # trusted source, skip the costly check
    logging:
      json_output: true
    ```
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Self

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from roots.core.exceptions import ConfigurationError
from roots.core.yaml import load_yaml


class StagesConfig(BaseModel):
    """Which validation stages run, always in structure -> id -> signature order.

    Note:
        Disabling ``structure`` while keeping ``signature`` means malformed
        hex reaches the hex decoder, which raises ``ValueError``.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    structure: bool = Field(default=True, description="Check hex formats and tag arity")
    id: bool = Field(default=True, description="Recompute and compare the event id")
    signature: bool = Field(default=True, description="Verify the Schnorr signature")


class LoggingConfig(BaseModel):
    """Logger settings for the validator."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(default="roots.validator", min_length=1)
    json_output: bool = Field(default=False, description="Emit JSON log records")


class ValidatorConfig(BaseModel):
    """Configuration for [EventValidator][roots.nips.nip01.validator.EventValidator]."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    stages: StagesConfig = Field(default_factory=StagesConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Validate a configuration dictionary.

        Raises:
            ConfigurationError: If the dictionary does not match the schema.
        """
        try:
            return cls.model_validate(data)
        except PydanticValidationError as e:
            raise ConfigurationError(f"Invalid validator config: {e}") from e

    @classmethod
    def from_yaml(cls, config_path: str | Path) -> Self:
        """Load and validate a YAML configuration file.

        Raises:
            FileNotFoundError: If the file does not exist.
            ConfigurationError: If the YAML is invalid or fails schema validation.
        """
        return cls.from_dict(load_yaml(config_path))
