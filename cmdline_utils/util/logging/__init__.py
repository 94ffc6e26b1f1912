# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

from .config import LoggingConfig, LoggingLevels
from .levels import LoggingLevel
from .logger import LoggableProtocol, Logger, getLogger
from .manager import LoggingManager


__all__ = [
    "LoggableProtocol",
    "Logger",
    "LoggingConfig",
    "LoggingLevel",
    "LoggingLevels",
    "LoggingManager",
    "getLogger",
]
