# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

import logging

import pytest

from cmdline_utils.util.logging import LoggingLevel


@pytest.mark.logging
@pytest.mark.logging_levels
class TestLoggingLevel:
    @pytest.mark.parametrize(
        ("input", "expected"),
        [
            (10, 10),
            (logging.INFO, logging.INFO),
            ("DEBUG", logging.DEBUG),
            ("warning", logging.WARNING),
            ("critical", logging.CRITICAL),
            ("Trace", 5),
            ("Warn", logging.WARNING),
            ("Fatal", logging.CRITICAL),
            ("None", -1),
            ("OFF", -1),
            (" info ", logging.INFO),
            ("20", 20),
            ("-1", -1),
            (True, logging.INFO),
            (False, -1),
            ("true", logging.INFO),
            ("False", -1),
        ],
    )
    def test_accepts(self, input, expected):  # noqa: A002
        assert LoggingLevel(input).value == expected

    @pytest.mark.parametrize("input", ["notalevel", "-2", 3.14, None, [], {}])
    def test_rejects_invalid(self, input):  # noqa: A002
        with pytest.raises((ValueError, TypeError)):
            LoggingLevel(input)

    @pytest.mark.parametrize(
        ("input", "expected_name", "expected_repr"),
        [
            ("DEBUG", "DEBUG", "LoggingLevel.DEBUG"),
            ("warn", "WARNING", "LoggingLevel.WARNING"),
            ("trace", "TRACE", "LoggingLevel.TRACE"),
            (42, "42", "LoggingLevel(42)"),
            ("-1", "OFF", "LoggingLevel.OFF"),
        ],
    )
    def test_str_output(self, input, expected_name, expected_repr):  # noqa: A002
        level = LoggingLevel(input)
        assert level.name == expected_name
        assert str(level) == expected_name
        assert repr(level) == expected_repr

    def test_equality(self):
        assert LoggingLevel("warn") == LoggingLevel.WARNING
        assert LoggingLevel.WARNING == logging.WARNING
        assert LoggingLevel.WARNING == "Warn"
        assert LoggingLevel.WARNING != "bogus"
        assert hash(LoggingLevel("info")) == hash(LoggingLevel.INFO)

    def test_enabled(self):
        assert LoggingLevel.NOTSET.enabled
        assert not LoggingLevel.OFF.enabled
