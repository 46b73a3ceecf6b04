from pathlib import Path
from typing import Any, cast

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

from graphtype import log


class ScalarAliasConfig(BaseModel):
    """Scalar alias overrides read from a YAML file.

    Example:
        numbers: [UnsignedInt, Long]
        aliases:
          DateTime: string
          JSON: "Record<string, unknown>"
    """

    model_config = ConfigDict(extra="forbid")

    numbers: list[str] = Field(default_factory=list)
    aliases: dict[str, str] = Field(default_factory=dict)

    @field_validator("aliases")
    @classmethod
    def validate_expressions(cls, aliases: dict[str, str]) -> dict[str, str]:
        for name, expression in aliases.items():
            if not expression.strip():
                raise ValueError(f"Alias for scalar '{name}' must not be empty")
        return aliases

    def as_overrides(self) -> dict[str, str]:
        """Flatten into a single name-to-expression mapping; ``aliases`` win over ``numbers``."""
        overrides = dict.fromkeys(self.numbers, "number")
        overrides.update(self.aliases)
        return overrides


def load_alias_config(config_path: Path | None) -> ScalarAliasConfig | None:
    """
    Load and validate a scalar alias configuration from a YAML file.

    Args:
        config_path: Path to the YAML configuration file, or None to skip loading.

    Returns:
        A validated ScalarAliasConfig, or None if config_path is None.

    Raises:
        OSError: If the file cannot be read.
        yaml.YAMLError: If the file is not valid YAML.
        TypeError: If the YAML root is not a mapping.
        ValidationError: If validation against ScalarAliasConfig fails.
    """
    if config_path is None:
        log.debug("No alias config provided")
        return None

    raw: Any
    with config_path.open("r", encoding="utf-8") as f:
        raw = yaml.safe_load(f)

    log.debug("Loaded alias config from %s", config_path)

    if raw is None:
        return ScalarAliasConfig()

    if not isinstance(raw, dict):
        raise TypeError(f"Alias config root must be a mapping (YAML object), got {type(raw).__name__}")

    return ScalarAliasConfig.model_validate(cast(dict[str, Any], raw))
