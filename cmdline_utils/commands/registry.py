# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

"""Registry of command line options and lookups over the passed arguments.

Commands are declared with :meth:`CommandLineUtils.register_command` so that
:meth:`CommandLineUtils.print_help` can list them, and values are read from the
argument vector handed over with :meth:`CommandLineUtils.send_arguments`. Flags
are matched as ``--<name>`` and their value is the token that follows.

>>> cmd = CommandLineUtils()
>>> cmd.register_command("endpoint", "<str>", "The endpoint of the mqtt server")
>>> cmd.send_arguments(["sample", "--endpoint", "x.com", "--port", "8883"])
>>> cmd.get_command("endpoint")
'x.com'
>>> cmd.has_command("port"), cmd.has_command("missing")
(True, False)
>>> cmd.get_command_or_default("missing", "fallback")
'fallback'

Registered commands and passed arguments are independent: ``has_command`` only
looks at the arguments, so flags that were never registered can still be read.
"""

import sys

from collections.abc import Iterator, Mapping, Sequence
from typing import IO, Any

from frozendict import frozendict

from ..config import CommandLineConfig
from ..util.mixins import LoggableMixin
from .common import CommonCommandsMixin
from .errors import CommandNotFoundError, MissingCommandValueError, MissingRequiredCommandError
from .help import HelpFormatter
from .option import CommandLineOption


class CommandLineUtils(LoggableMixin, CommonCommandsMixin):
    """Registers, finds and parses commands passed to a program from the terminal.

    Instances are meant to be populated once at start-up by a single thread; lookups
    must not run concurrently with registry changes.
    """

    def __init__(self, config: CommandLineConfig | dict[str, Any] | None = None) -> None:
        if config is None:
            config = CommandLineConfig()
        elif not isinstance(config, CommandLineConfig):
            config = CommandLineConfig.model_validate(config)

        self.config = config
        self._program_name = config.program_name
        self._commands: dict[str, CommandLineOption] = {}
        self._arguments: tuple[str, ...] = ()

    # MARK: Program name
    @property
    def program_name(self) -> str:
        return self._program_name

    def register_program_name(self, name: str) -> None:
        self._program_name = name

    # MARK: Registry
    def register_command(self, command: CommandLineOption | str, example_value: str = "", help_text: str = "") -> None:
        """Add a command, replacing any command already registered under the same name.

        Args:
            command: The option to register, or the name of the command.
            example_value: Example input shown in help (e.g. ``<endpoint>``). Ignored when *command* is an option.
            help_text: Description shown in help. Ignored when *command* is an option.

        """
        if not isinstance(command, CommandLineOption):
            command = CommandLineOption.create(command, example_value, help_text)

        if command.name in self._commands:
            self.log.debug("Overwriting command '%s'", command.name)
        else:
            self.log.debug("Registering command '%s'", command.name)

        self._commands[command.name] = command

    def remove_command(self, name: str) -> None:
        if self._commands.pop(name, None) is not None:
            self.log.debug("Removed command '%s'", name)

    def update_command_help(self, name: str, help_text: str) -> None:
        """Replace the help text of a registered command. Unknown names are ignored."""
        command = self._commands.get(name)
        if command is None:
            return
        self._commands[name] = command.with_help(help_text)

    def get_registered_command(self, name: str) -> CommandLineOption | None:
        return self._commands.get(name)

    @property
    def commands(self) -> Mapping[str, CommandLineOption]:
        """Registered commands, in the order they are listed in help."""
        names = sorted(self._commands) if self.config.sort_commands else self._commands
        return frozendict((name, self._commands[name]) for name in names)

    def __contains__(self, name: object) -> bool:
        return name in self._commands

    def __len__(self) -> int:
        return len(self._commands)

    def __iter__(self) -> Iterator[CommandLineOption]:
        return iter(self.commands.values())

    # MARK: Arguments
    @property
    def arguments(self) -> tuple[str, ...]:
        return self._arguments

    def send_arguments(self, arguments: Sequence[str] | None = None) -> None:
        """Take a snapshot of the arguments passed to the program.

        The arguments are copied, later changes to *arguments* do not affect lookups.

        Args:
            arguments: The argument vector, ``sys.argv`` if omitted.

        """
        if arguments is None:
            arguments = sys.argv
        self._arguments = tuple(arguments)
        self.log.debug("Received %d arguments", len(self._arguments))

    def flag(self, name: str) -> str:
        return f"{self.config.flag_prefix}{name}"

    def _find(self, name: str) -> int | None:
        try:
            return self._arguments.index(self.flag(name))
        except ValueError:
            return None

    def has_command(self, name: str) -> bool:
        return self._find(name) is not None

    def get_command(self, name: str) -> str:
        """Get the value passed for a command.

        Args:
            name: The name of the command.

        Returns:
            str: The token following the first ``--<name>`` flag.

        Raises:
            CommandNotFoundError: If the flag was not passed.
            MissingCommandValueError: If the flag is the last argument.

        """
        index = self._find(name)
        if index is None:
            raise CommandNotFoundError(name, self.flag(name))
        if index + 1 >= len(self._arguments):
            raise MissingCommandValueError(name, self.flag(name))
        return self._arguments[index + 1]

    def get_command_or_default(self, name: str, default: str) -> str:
        try:
            return self.get_command(name)
        except CommandNotFoundError:
            return default
        except MissingCommandValueError as err:
            self.log.warning("%s, using default '%s'", err, default)
            return default

    def get_command_required(self, name: str, extra_message: str = "") -> str:
        """Get the value passed for a command that the program cannot run without.

        Args:
            name: The name of the command.
            extra_message: Additional explanation appended to the error message.

        Returns:
            str: The value passed for the command.

        Raises:
            MissingRequiredCommandError: If the flag was not passed. Entry points are expected
                to report it and exit with its ``exit_code``.
            MissingCommandValueError: If the flag is the last argument.

        """
        try:
            return self.get_command(name)
        except CommandNotFoundError as err:
            raise MissingRequiredCommandError(name, self.program_name, extra_message, exit_code=self.config.required_exit_code) from err

    # MARK: Help
    def help_formatter(self) -> HelpFormatter:
        return HelpFormatter(self.program_name, self.commands.values(), flag_prefix=self.config.flag_prefix)

    def format_help(self) -> str:
        return self.help_formatter().format()

    def print_help(self, file: IO[str] | None = None) -> None:
        if file is None:
            file = sys.stdout

        formatter = self.help_formatter()
        if self.config.rich_help:
            formatter.print_rich(file)
        else:
            formatter.print(file)
