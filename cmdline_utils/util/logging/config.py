# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

import re

from collections.abc import Mapping
from pathlib import Path
from typing import Any

from frozendict import frozendict
from pydantic import Field, field_validator

from ..helpers.pydantic_lib import ConfigBaseModel
from .levels import LoggingLevel


class LoggingLevels(ConfigBaseModel):
    file: LoggingLevel = Field(default=LoggingLevel.OFF, description="Log level for log file output")
    tty: LoggingLevel = Field(default=LoggingLevel.WARNING, description="Log level for TTY output")
    root: LoggingLevel = Field(default=LoggingLevel.NOTSET, description="Log level for the root log handler")
    default: LoggingLevel = Field(default=LoggingLevel.NOTSET, description="Default log level for loggers not matched by 'custom'")

    custom: dict[re.Pattern[str], LoggingLevel] = Field(
        default_factory=dict,
        description="Custom logging levels, where the key is a regex for the logger name, and the value is the logging level.",
        validate_default=True,
    )

    @classmethod
    def _validate_regex_pattern(cls, pattern: Any) -> re.Pattern[str]:
        if isinstance(pattern, str):
            pattern = re.compile(pattern, re.IGNORECASE)
        if not isinstance(pattern, re.Pattern):
            msg = f"Custom logging levels keys must be str or compiled regex patterns, got {type(pattern)}"
            raise TypeError(msg)

        return pattern

    @field_validator("custom", mode="before")
    @classmethod
    def compile_custom_level_patterns(cls, value: Any) -> dict[re.Pattern[str], Any]:
        if not isinstance(value, Mapping):
            msg = f"Custom logging levels must be a dict, got {type(value)}"
            raise TypeError(msg)

        return {cls._validate_regex_pattern(name): level for name, level in value.items()}

    @field_validator("custom", mode="after")
    @classmethod
    def freeze_custom_levels(cls, value: dict[re.Pattern[str], LoggingLevel]) -> frozendict[re.Pattern[str], LoggingLevel]:
        return frozendict(value)


class LoggingConfig(ConfigBaseModel):
    file: Path | None = Field(default=None, description="Log file path, file logging is disabled when unset")
    levels: LoggingLevels = Field(default_factory=LoggingLevels, description="Logging levels configuration")
    rich: bool = Field(default=True, description="Enable rich text (colors etc) in TTY output")
