# SPDX-License-Identifier: GPLv3
# Copyright © 2025 pygaindalf Rui Pinheiro

import logging

import pytest

from cmdline_utils import CommandLineUtils
from cmdline_utils.util.logging import Logger, getLogger
from cmdline_utils.util.mixins import LoggableMixin


class Loggable(LoggableMixin):
    pass


@pytest.mark.logging
class TestLogger:
    def test_getLogger_returns_logger(self, caplog):
        logger = getLogger("testLogger")
        assert isinstance(logger, Logger)
        with caplog.at_level(logging.INFO):
            logger.debug("debug message")
            logger.info("info message")
            logger.warning("warning message")
        assert "debug message" not in caplog.text
        assert "info message" in caplog.text
        assert "warning message" in caplog.text

    def test_getLogger_with_parent(self, caplog):
        parent = getLogger("parentLogger")
        child = getLogger("childLogger", parent=parent)
        assert child.parent is parent
        assert child.name == "parentLogger.childLogger"
        with caplog.at_level(logging.INFO):
            child.info("child info")
        assert "child info" in caplog.text

    def test_getLogger_with_loggable_parent(self):
        parent = Loggable()
        child = getLogger("child", parent=parent)
        assert child.name == "Loggable.child"

    def test_getLogger_from_object(self):
        assert getLogger(Loggable()).name == "Loggable"

    def test_logger_isEnabledFor(self):
        logger = getLogger("enabledLogger")
        assert logger.isEnabledFor(logging.INFO)
        assert not logger.isEnabledFor(logging.NOTSET)
        assert logger.isEnabledForTty(logging.INFO)
        assert not logger.isEnabledForFile(logging.INFO)
        assert logger.isEnabledFor(logging.INFO, handler="tty")

    def test_logger_invalid_handler(self):
        logger = getLogger("invalidHandlerLogger")
        with pytest.raises(ValueError):
            logger.isEnabledFor(logging.INFO, handler="invalid")

    def test_trace(self, caplog):
        logger = getLogger("traceLogger")
        with caplog.at_level(5):
            logger.trace("trace message")
        assert caplog.records[-1].levelname == "TRACE"


@pytest.mark.logging
class TestLoggableMixin:
    def test_log_is_cached(self):
        a = Loggable()
        assert a.log is a.log
        assert a.log.parent == logging.root

    def test_registry_logger_name(self):
        assert CommandLineUtils().log.name == "CommandLineUtils"
