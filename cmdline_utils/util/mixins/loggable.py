# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

from typing import override

from ..logging import Logger, getLogger


class LoggableMixin:
    """Mixin that adds a lazily created ``log`` property to a class.

    The logger is named after ``__log_name__``, which defaults to the class name.
    """

    __log: Logger | None = None

    @property
    def log(self) -> Logger:
        if (log := self.__log) is None:
            log = self.__log = getLogger(self, name=self.__log_name__)
        return log

    @property
    def __log_name__(self) -> str:
        return type(self).__name__

    @override
    def __repr__(self) -> str:
        name = self.__log_name__
        cls_name = type(self).__name__
        return f"<{name}>" if cls_name in name else f"<{cls_name} {name}>"
