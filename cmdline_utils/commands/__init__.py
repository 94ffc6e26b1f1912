# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

from .common import COMMON_MQTT_COMMANDS, COMMON_PROXY_COMMANDS, COMMON_TOPIC_MESSAGE_COMMANDS, LOGGING_COMMANDS
from .errors import CommandLineError, CommandNotFoundError, FatalCommandLineError, MissingCommandValueError, MissingRequiredCommandError
from .help import HelpFormatter
from .option import CommandLineOption
from .registry import CommandLineUtils


__all__ = [
    "COMMON_MQTT_COMMANDS",
    "COMMON_PROXY_COMMANDS",
    "COMMON_TOPIC_MESSAGE_COMMANDS",
    "LOGGING_COMMANDS",
    "CommandLineError",
    "CommandLineOption",
    "CommandLineUtils",
    "CommandNotFoundError",
    "FatalCommandLineError",
    "HelpFormatter",
    "MissingCommandValueError",
    "MissingRequiredCommandError",
]
