# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

"""Process-wide logging setup.

Configures the root logger, the optional log file, the TTY handler (``rich`` or
plain ``stderr``), the exit summary and per-logger custom levels.
"""

import logging
import re
import sys

from typing import TYPE_CHECKING, Any, ClassVar, Self
from typing import cast as typing_cast

from ..helpers import script_info
from .config import LoggingConfig
from .exit_handler import ExitHandler
from .formatting import ConditionalFormatter, HandlerFilter


if TYPE_CHECKING:
    from .levels import LoggingLevel


class LoggingManager:
    _instance: ClassVar["LoggingManager | None"] = None

    initialized: bool
    fh: logging.Handler | None = None
    ch: logging.Handler | None = None

    def __new__(cls, *args, **kwargs) -> Self:
        if (instance := cls._instance) is None:
            instance = cls._instance = super().__new__(cls, *args, **kwargs)
            instance.initialized = False
        return typing_cast("Self", instance)

    def initialize(self, config: LoggingConfig | dict[str, Any]) -> None:
        if not isinstance(config, LoggingConfig):
            config = LoggingConfig.model_validate(config)

        if self.initialized:
            msg = f"Must not initialise {type(self).__name__} twice"
            raise RuntimeError(msg)
        self.initialized = True

        self.config = config

        self._configure_root_logger()
        self._configure_file_handler()
        self._configure_tty_handler()
        self._configure_exit_handler()
        self._configure_exception_handler()
        self._configure_custom_logger_levels()

    def _configure_root_logger(self) -> None:
        logging.captureWarnings(capture=True)
        logging.root.setLevel(self.config.levels.root.value)

    def _configure_file_handler(self) -> None:
        self.fh = None
        if self.config.file is None or not self.config.levels.file.enabled:
            return

        self.config.file.parent.mkdir(parents=True, exist_ok=True)

        self.fh = logging.FileHandler(self.config.file, mode="w", encoding="utf-8")
        self.fh.setLevel(self.config.levels.file.value)
        self.fh.setFormatter(ConditionalFormatter("%(asctime)s [%(levelname)s:%(name)s] %(message)s"))
        self.fh.addFilter(HandlerFilter("file"))
        logging.root.addHandler(self.fh)

    def _configure_tty_handler(self) -> None:
        self.ch = None
        if not self.config.levels.tty.enabled:
            return

        if self.config.rich:
            from .rich_handler import CustomRichHandler

            self.ch = CustomRichHandler()
        else:
            self.ch = logging.StreamHandler(sys.stderr)
            self.ch.setFormatter(ConditionalFormatter("[%(levelname).1s:%(name)s] %(message)s"))

        self.ch.setLevel(self.config.levels.tty.value)
        self.ch.addFilter(HandlerFilter("tty"))

        # pytest captures logging by itself
        if not script_info.is_unit_test():
            logging.root.addHandler(self.ch)

    def _configure_exit_handler(self) -> None:
        if script_info.is_unit_test():
            return

        self.eh = ExitHandler(self)
        logging.root.addHandler(self.eh)

    def _configure_exception_handler(self) -> None:
        if self.config.rich:
            from rich.traceback import install

            install(extra_lines=1, width=200, word_wrap=False)
        else:
            from .exception_handler import install

            install()

    def apply_logging_level(self, logger: logging.Logger) -> None:
        # Explicitly set levels take precedence
        if logger.level != logging.NOTSET:
            return

        # The longest matching custom pattern wins
        level: LoggingLevel = self.config.levels.default
        pattern_len = 0

        for pattern, custom_level in self.config.levels.custom.items():
            assert isinstance(pattern, re.Pattern), f"Custom logging levels keys must be compiled regex patterns, got {type(pattern)}"
            if (match := pattern.match(logger.name)) is not None and pattern_len < len(match.group(0)):
                level = custom_level
                pattern_len = len(match.group(0))

        if level == logging.NOTSET or not level.enabled:
            return

        logger.setLevel(level.value)

    def _configure_custom_logger_levels(self) -> None:
        for logger_name in list(logging.root.manager.loggerDict):
            logger = logging.getLogger(logger_name)
            self.apply_logging_level(logger)
