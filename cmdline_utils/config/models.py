# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

from pydantic import Field

from ..util.helpers.pydantic_lib import ConfigBaseModel
from ..util.logging.config import LoggingConfig


DEFAULT_PROGRAM_NAME = "Application"


class CommandLineConfig(ConfigBaseModel):
    program_name: str = Field(default=DEFAULT_PROGRAM_NAME, description="Program name shown in help and in missing command errors")
    flag_prefix: str = Field(default="--", min_length=1, description="Prefix that turns a command name into its flag")
    sort_commands: bool = Field(default=True, description="List commands in help sorted by name instead of in registration order")
    rich_help: bool = Field(default=False, description="Render help through rich instead of plain text")
    required_exit_code: int = Field(default=1, ge=1, le=255, description="Exit status used when a required command is missing")


class Config(ConfigBaseModel):
    command_line: CommandLineConfig = Field(default_factory=CommandLineConfig, description="Command registry configuration")
    logging: LoggingConfig = Field(default_factory=LoggingConfig, description="Logging configuration")
