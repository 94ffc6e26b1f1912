# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

import atexit
import logging
import sys

from typing import TYPE_CHECKING, override

from ..helpers import script_info


if TYPE_CHECKING:
    from . import manager


class ExitHandler(logging.Handler):
    """Counts warnings and errors, and prints a summary when the process exits with any of them."""

    def __init__(self, manager: "manager.LoggingManager", *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)

        self.manager = manager
        self.in_atexit = False

        self.num_warning = 0
        self.num_error = 0

        self.setLevel(logging.WARNING)
        atexit.register(self.atexit)

    @property
    def summary(self) -> str | None:
        if self.num_warning == 0 and self.num_error == 0:
            return None

        script_name = script_info.get_script_name()
        if self.num_error == 0:
            return f"****** {script_name} terminated with {self.num_warning} warning{'' if self.num_warning == 1 else 's'} ******"

        return (
            f"****** {script_name} terminated with {self.num_error} error{'' if self.num_error == 1 else 's'} ******"
            f"\n  Warnings: {self.num_warning:6d}"
            f"\n  Errors:   {self.num_error:6d}"
        )

    def atexit(self) -> None:
        self.in_atexit = True

        summary = self.summary
        if summary is not None:
            print(f"\n{summary}", file=sys.stderr)  # noqa: T201 as this is an exit message

            if self.manager.fh is not None:
                logging.log(1000, summary, extra={"handler": "file", "simple": True})  # noqa: LOG015 as this is an exit message

        logging.shutdown()

    @override
    def emit(self, record: logging.LogRecord) -> None:
        if self.in_atexit:
            return

        if record.levelno >= logging.ERROR:
            self.num_error += 1
        elif record.levelno >= logging.WARNING:
            self.num_warning += 1
