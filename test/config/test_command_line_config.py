# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

import pydantic
import pytest

from cmdline_utils import CommandLineUtils
from cmdline_utils.config import DEFAULT_PROGRAM_NAME, CommandLineConfig, Config, LoggingConfig


@pytest.mark.config
class TestCommandLineConfig:
    def test_defaults(self):
        config = CommandLineConfig()
        assert config.program_name == DEFAULT_PROGRAM_NAME == "Application"
        assert config.flag_prefix == "--"
        assert config.sort_commands is True
        assert config.rich_help is False
        assert config.required_exit_code == 1

    @pytest.mark.parametrize(
        "data",
        [
            {"flag_prefix": ""},
            {"required_exit_code": 0},
            {"required_exit_code": 256},
            {"unknown": True},
        ],
    )
    def test_invalid(self, data):
        with pytest.raises(pydantic.ValidationError):
            CommandLineConfig.model_validate(data)

    def test_dict_is_validated_by_registry(self):
        with pytest.raises(pydantic.ValidationError):
            CommandLineUtils({"flag_prefix": ""})

    def test_registry_keeps_config(self):
        config = CommandLineConfig(program_name="shadow-sync")
        assert CommandLineUtils(config).config is config


@pytest.mark.config
class TestConfig:
    def test_nested(self):
        config = Config.model_validate({"command_line": {"program_name": "jobs"}, "logging": {"rich": False}})
        assert config.command_line.program_name == "jobs"
        assert isinstance(config.logging, LoggingConfig)
        assert config.logging.rich is False
