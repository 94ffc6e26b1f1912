# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

"""Errors raised while resolving command values.

Only :class:`FatalCommandLineError` and its subclasses are meant to end the
process; the library itself never exits, the entry point that catches them does.
"""


class CommandLineError(Exception):
    """Base class for all command line lookup errors."""

    def __init__(self, name: str, message: str) -> None:
        super().__init__(message)
        self.name = name


class CommandNotFoundError(CommandLineError, LookupError):
    """The flag for a command was not passed."""

    def __init__(self, name: str, flag: str) -> None:
        super().__init__(name, f"Command '{flag}' was not passed")
        self.flag = flag


class MissingCommandValueError(CommandLineError, ValueError):
    """The flag for a command was passed as the last argument, with no value after it."""

    def __init__(self, name: str, flag: str) -> None:
        super().__init__(name, f"Command '{flag}' requires a value but none was given")
        self.flag = flag


class FatalCommandLineError(CommandLineError):
    """A command line error the program cannot continue from."""

    def __init__(self, name: str, message: str, *, exit_code: int = 1) -> None:
        super().__init__(name, message)
        self.exit_code = exit_code


class MissingRequiredCommandError(FatalCommandLineError):
    def __init__(self, name: str, program_name: str, extra_message: str = "", *, exit_code: int = 1) -> None:
        message = f"required: missing command {name} for program {program_name}"
        if extra_message:
            message = f"{message}\n{extra_message}"

        super().__init__(name, message, exit_code=exit_code)
        self.program_name = program_name
        self.extra_message = extra_message
