# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

import pydantic
import pytest

from cmdline_utils.commands import CommandLineOption


@pytest.mark.commands
class TestCommandLineOption:
    def test_create(self):
        option = CommandLineOption.create("cert", "<path>", "Client certificate")
        assert option.name == "cert"
        assert option.example_value == "<path>"
        assert option.help_text == "Client certificate"

    def test_defaults(self):
        option = CommandLineOption(name="help")
        assert option.example_value == ""
        assert option.help_text == ""

    def test_frozen(self):
        option = CommandLineOption.create("cert", "<path>")
        with pytest.raises(pydantic.ValidationError):
            option.name = "key"  # pyright: ignore[reportAttributeAccessIssue]

    def test_extra_fields_rejected(self):
        with pytest.raises(pydantic.ValidationError):
            CommandLineOption(name="cert", required=True)  # pyright: ignore[reportCallIssue]

    def test_empty_name(self):
        with pytest.raises(pydantic.ValidationError):
            CommandLineOption.create("")

    @pytest.mark.parametrize("name", ["-v", "--cert", "has space"])
    def test_any_non_empty_name(self, name):
        assert CommandLineOption.create(name).name == name

    def test_with_help(self):
        option = CommandLineOption.create("cert", "<path>", "old")
        updated = option.with_help("new")
        assert updated == CommandLineOption.create("cert", "<path>", "new")
        assert option.help_text == "old"

    @pytest.mark.parametrize(
        ("option", "prefix", "expected"),
        [
            (CommandLineOption.create("cert", "<path>"), "--", "--cert <path>"),
            (CommandLineOption.create("help"), "--", "--help"),
            (CommandLineOption.create("cert", "<path>"), "-", "-cert <path>"),
        ],
    )
    def test_usage(self, option, prefix, expected):
        assert option.usage(prefix) == expected
