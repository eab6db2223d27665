from __future__ import annotations

import logging
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Config models map the YAML file onto one Thing and its single target.


class FileTargetConfig(BaseModel):
    # File target: create/truncate this path on every emit.
    model_config = ConfigDict(extra="forbid")
    kind: Literal["file"]
    path: str = Field(min_length=1)


class LoggerTargetConfig(BaseModel):
    # Logger target: a named stdlib logger, configured elsewhere.
    model_config = ConfigDict(extra="forbid")
    kind: Literal["logger"]
    name: str = "thing"
    level: str = "INFO"

    @field_validator("level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown logging level: {value}")
        return level


class StdoutTargetConfig(BaseModel):
    # Stdout target has no settings.
    model_config = ConfigDict(extra="forbid")
    kind: Literal["stdout"]


TargetConfig = Annotated[
    Union[FileTargetConfig, LoggerTargetConfig, StdoutTargetConfig],
    Field(discriminator="kind"),
]


class ThingConfig(BaseModel):
    # Root config: schema version, the message and exactly one target.
    model_config = ConfigDict(extra="forbid")
    version: Literal[1]
    message: str
    target: TargetConfig
