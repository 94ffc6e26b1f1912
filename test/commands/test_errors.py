# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

import pytest

from cmdline_utils.commands import (
    CommandLineError,
    CommandNotFoundError,
    FatalCommandLineError,
    MissingCommandValueError,
    MissingRequiredCommandError,
)


@pytest.mark.commands
@pytest.mark.errors
class TestErrors:
    def test_recoverable_errors_are_not_fatal(self):
        for err in (CommandNotFoundError("endpoint", "--endpoint"), MissingCommandValueError("endpoint", "--endpoint")):
            assert isinstance(err, CommandLineError)
            assert not isinstance(err, FatalCommandLineError)

    def test_builtin_bases(self):
        assert issubclass(CommandNotFoundError, LookupError)
        assert issubclass(MissingCommandValueError, ValueError)

    def test_missing_value_message(self):
        err = MissingCommandValueError("count", "--count")
        assert str(err) == "Command '--count' requires a value but none was given"

    def test_missing_required(self):
        err = MissingRequiredCommandError("endpoint", "basic-connect", exit_code=4)
        assert str(err) == "required: missing command endpoint for program basic-connect"
        assert err.name == "endpoint"
        assert err.extra_message == ""
        assert err.exit_code == 4

    def test_missing_required_extra_message(self):
        err = MissingRequiredCommandError("key", "Application", "See --help")
        assert str(err).splitlines() == ["required: missing command key for program Application", "See --help"]
        assert err.exit_code == 1
