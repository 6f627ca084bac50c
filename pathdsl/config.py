"""
Separator configuration.

The separator is the only setting. It can be given directly, loaded from a
YAML document, or read from the PATHDSL_SEPARATOR environment variable
(a .env file is honoured).
"""
import logging
import os
from typing import Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

from pathdsl.core import DEFAULT_SEP, Path, Result, join_using, parse

logger = logging.getLogger(__name__)

SEPARATOR_ENV_VAR = "PATHDSL_SEPARATOR"


class PathConfig(BaseModel):
    """Separator used for parsing, joining and rendering paths."""
    model_config = ConfigDict(extra="forbid")

    separator: str = Field(default=DEFAULT_SEP, description="Path segment separator")

    @field_validator('separator')
    @classmethod
    def validate_separator(cls, v: str) -> str:
        """Ensure the separator is not empty."""
        if not v:
            raise ValueError("Separator cannot be empty")
        return v

    def parse(self, text: str) -> Result[Path]:
        return parse(text, self.separator)

    def join(self, *texts: str) -> Result[Path]:
        return join_using(self.separator)(*texts)

    def render(self, path: Path) -> str:
        return path.to_string(self.separator)

    @classmethod
    def from_yaml(cls, yaml_content: str) -> "PathConfig":
        """Parse configuration from YAML content."""
        try:
            data = yaml.safe_load(yaml_content)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML: {e}")
        if data is None:
            # Empty file
            return cls()
        if not isinstance(data, dict):
            raise ValueError("Configuration must be a mapping")
        config = cls(**data)
        logger.debug(f"Loaded path config from YAML: separator={config.separator!r}")
        return config

    def to_yaml(self) -> str:
        """Convert configuration to YAML format."""
        return yaml.dump(self.model_dump(), sort_keys=False, default_flow_style=False)

    @classmethod
    def from_env(cls) -> "PathConfig":
        """Read the separator from the environment, falling back to the default."""
        load_dotenv()
        separator = os.getenv(SEPARATOR_ENV_VAR, DEFAULT_SEP)
        config = cls(separator=separator)
        logger.debug(f"Loaded path config from environment: separator={config.separator!r}")
        return config


def load_config(yaml_content: Optional[str] = None) -> PathConfig:
    """
    Load and validate path configuration.

    Args:
        yaml_content: YAML content as a string; the environment is used when None

    Returns:
        Validated PathConfig object

    Raises:
        ValueError: If the configuration is invalid
    """
    if yaml_content is not None:
        return PathConfig.from_yaml(yaml_content)
    return PathConfig.from_env()
