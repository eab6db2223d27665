from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from thing.adapters.stdout_writer import StdoutWriter
from thing.domain.targets import FileTarget, LoggerTarget, Target, WriterTarget
from thing.domain.thing import Thing

from .models import FileTargetConfig, LoggerTargetConfig, StdoutTargetConfig, ThingConfig


# ConfigError is raised for invalid configuration (fail fast, never guess a default target).
class ConfigError(ValueError):
    pass


def load_config(path: Path) -> ThingConfig:
    # YAML loader; returns a validated ThingConfig.
    raw = yaml.safe_load(Path(path).read_text(encoding="utf-8"))
    if not isinstance(raw, dict):
        raise ConfigError("Config root must be a mapping")
    return parse_config(raw)


def parse_config(raw: dict[str, Any]) -> ThingConfig:
    try:
        return ThingConfig.model_validate(raw)
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc


def build_thing(config: ThingConfig) -> Thing:
    # Wiring: config section -> concrete target.
    return Thing(message=config.message, target=_build_target(config.target))


def _build_target(section: FileTargetConfig | LoggerTargetConfig | StdoutTargetConfig) -> Target:
    if isinstance(section, FileTargetConfig):
        return FileTarget(Path(section.path))
    if isinstance(section, LoggerTargetConfig):
        return LoggerTarget(
            logger=logging.getLogger(section.name),
            level=logging.getLevelName(section.level),
        )
    return WriterTarget(StdoutWriter())
