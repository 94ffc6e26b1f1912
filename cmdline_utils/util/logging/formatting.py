# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

"""Filters and formatters shared by the file and TTY handlers.

Records may carry two extras:

* ``handler``: restricts the record to the handler with that name (``"tty"`` or ``"file"``).
* ``simple``: emits the bare message, without level or logger name.
"""

import logging

from typing import override


class HandlerFilter(logging.Filter):
    def __init__(self, handler_name: str) -> None:
        super().__init__()
        self.handler_name = handler_name

    @override
    def filter(self, record: logging.LogRecord) -> bool:
        target = getattr(record, "handler", None)
        return target is None or target == self.handler_name


class ConditionalFormatter(logging.Formatter):
    @override
    def format(self, record: logging.LogRecord) -> str:
        if getattr(record, "simple", False):
            return record.getMessage()
        return super().format(record)
