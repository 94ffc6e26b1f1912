# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

"""Command line registry and lookup helpers for sample programs."""

from .commands import (
    CommandLineError,
    CommandLineOption,
    CommandLineUtils,
    CommandNotFoundError,
    FatalCommandLineError,
    MissingCommandValueError,
    MissingRequiredCommandError,
)
from .config import CommandLineConfig


__version__ = "1.0.0"

__all__ = [
    "CommandLineConfig",
    "CommandLineError",
    "CommandLineOption",
    "CommandLineUtils",
    "CommandNotFoundError",
    "FatalCommandLineError",
    "MissingCommandValueError",
    "MissingRequiredCommandError",
]
