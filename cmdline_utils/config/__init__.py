# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

from ..util.logging.config import LoggingConfig, LoggingLevels
from .models import DEFAULT_PROGRAM_NAME, CommandLineConfig, Config


__all__ = [
    "DEFAULT_PROGRAM_NAME",
    "CommandLineConfig",
    "Config",
    "LoggingConfig",
    "LoggingLevels",
]
