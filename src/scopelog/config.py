"""
Pydantic configuration schema for the logger.

Everything is optional: an empty config gives a logger with no sinks and
default options (time off, every category on).

    file:
      path: logs/app.log
      append: true
    stdout: true
    options:
      time: true
      trace: false

Usage:
    config = LoggerConfig.from_yaml("logger.yaml")
    log = Logger.from_config(config)
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, field_validator

from scopelog.records import Option


class FileSinkConfig(BaseModel):
    path: str
    append: bool = False


class LoggerConfig(BaseModel):
    file: Optional[FileSinkConfig] = None
    stdout: Optional[bool] = None  # None leaves stdout as it is
    options: Optional[dict[str, bool]] = None

    @field_validator("options")
    @classmethod
    def validate_option_names(cls, value: Optional[dict[str, bool]]) -> Optional[dict[str, bool]]:
        """Option names must be known; normalized to lower case."""
        if value is None:
            return value
        return {Option.from_name(name).value: flag for name, flag in value.items()}

    @classmethod
    def from_yaml(cls, path: str | Path) -> "LoggerConfig":
        """Load and validate from a YAML file."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.from_yaml_string(raw)

    @classmethod
    def from_yaml_string(cls, yaml_string: str) -> "LoggerConfig":
        """Load and validate from a YAML string. An empty document is an empty config."""
        data = yaml.safe_load(yaml_string) or {}
        return cls.model_validate(data)

    @classmethod
    def from_dict(cls, data: dict) -> "LoggerConfig":
        """Load and validate from a dict."""
        return cls.model_validate(data)

    def to_dict(self, exclude_none: bool = True) -> dict:
        """Export as dict, suitable for YAML dump."""
        return self.model_dump(exclude_none=exclude_none)
