# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

"""Canned batches of command declarations shared by the samples.

Each batch is a fixed tuple of options; registering a batch twice overwrites the
entries with identical values, so the ``add_*`` methods are idempotent.
"""

from collections.abc import Iterable
from pathlib import Path
from typing import TYPE_CHECKING

from ..util.logging import LoggingConfig, LoggingLevel, LoggingManager
from .option import CommandLineOption


if TYPE_CHECKING:
    from .registry import CommandLineUtils


COMMON_MQTT_COMMANDS: tuple[CommandLineOption, ...] = (
    CommandLineOption.create("endpoint", "<str>", "The endpoint of the mqtt server not including a port."),
    CommandLineOption.create("key", "<path>", "Path to your key in PEM format."),
    CommandLineOption.create("cert", "<path>", "Path to your client certificate in PEM format."),
    CommandLineOption.create("ca_file", "<path>", "Path to AmazonRootCA1.pem (optional, system trust store used by default)."),
)

COMMON_PROXY_COMMANDS: tuple[CommandLineOption, ...] = (
    CommandLineOption.create("proxy_host", "<str>", "Host name of the proxy server to connect through (optional)."),
    CommandLineOption.create("proxy_port", "<int>", "Port of the proxy server to connect through (optional, default='8080')."),
)

COMMON_TOPIC_MESSAGE_COMMANDS: tuple[CommandLineOption, ...] = (
    CommandLineOption.create("topic", "<str>", "Topic to publish, subscribe to (optional, default='test/topic')."),
    CommandLineOption.create("message", "<str>", "The message to send in the payload (optional, default='Hello World!')."),
    CommandLineOption.create("count", "<int>", "Number of messages to publish/receive before exiting. Specify 0 to run forever (optional, default='10')."),
)

LOGGING_COMMANDS: tuple[CommandLineOption, ...] = (
    CommandLineOption.create("verbosity", "<log level>", "The logging level to use. Choices are 'Trace', 'Debug', 'Info', 'Warn', 'Error', 'Fatal' and 'None' (optional, default='Warn')."),
    CommandLineOption.create("log_file", "<str>", "File to write logs to. If not provided, logs are only written to the console (optional)."),
)

DEFAULT_VERBOSITY = "WARNING"


class CommonCommandsMixin:
    def register_commands(self: "CommandLineUtils", commands: Iterable[CommandLineOption]) -> None:
        for command in commands:
            self.register_command(command)

    def add_common_mqtt_commands(self: "CommandLineUtils") -> None:
        """Register the ``endpoint``, ``key``, ``cert`` and ``ca_file`` commands."""
        self.register_commands(COMMON_MQTT_COMMANDS)

    def add_common_proxy_commands(self: "CommandLineUtils") -> None:
        self.register_commands(COMMON_PROXY_COMMANDS)

    def add_common_topic_message_commands(self: "CommandLineUtils") -> None:
        self.register_commands(COMMON_TOPIC_MESSAGE_COMMANDS)

    def add_logging_commands(self: "CommandLineUtils") -> None:
        self.register_commands(LOGGING_COMMANDS)

    def logging_config_from_commands(self: "CommandLineUtils", base: LoggingConfig | None = None) -> LoggingConfig:
        """Build a logging configuration from the ``--verbosity`` and ``--log_file`` arguments.

        The console uses the given verbosity. When a log file is given, it is
        written at the same verbosity.

        Args:
            base: Configuration providing every other setting, defaults to :class:`LoggingConfig`.

        Returns:
            LoggingConfig: The resulting configuration.

        Raises:
            ValueError: If ``--verbosity`` is not a known logging level.

        """
        if base is None:
            base = LoggingConfig()

        verbosity = LoggingLevel(self.get_command_or_default("verbosity", DEFAULT_VERBOSITY))
        log_file = self.get_command_or_default("log_file", "")

        levels = base.levels.model_copy(update={"tty": verbosity, "file": verbosity if log_file else LoggingLevel.OFF})
        return base.model_copy(update={"levels": levels, "file": Path(log_file) if log_file else None})

    def start_logging_from_commands(self: "CommandLineUtils", base: LoggingConfig | None = None) -> LoggingConfig:
        """Initialise logging from the command line, unless it was already initialised."""
        config = self.logging_config_from_commands(base)

        manager = LoggingManager()
        if manager.initialized:
            self.log.debug("Logging already initialised, ignoring command line logging options")
        else:
            manager.initialize(config)

        return config
