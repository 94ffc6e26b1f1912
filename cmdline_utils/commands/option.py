# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

"""A single declared command line option.

>>> option = CommandLineOption(name="endpoint", example_value="<str>", help_text="Server endpoint")
>>> option.with_help("MQTT server endpoint").help_text
'MQTT server endpoint'
>>> option.help_text
'Server endpoint'
"""

from typing import Self

from pydantic import Field

from ..util.helpers.pydantic_lib import ConfigBaseModel


class CommandLineOption(ConfigBaseModel):
    name: str = Field(min_length=1, description="Command name, as passed without the flag prefix")
    example_value: str = Field(default="", description="Placeholder shown in help for the expected value, e.g. '<endpoint>'")
    help_text: str = Field(default="", description="Description shown in help")

    @classmethod
    def create(cls, name: str, example_value: str = "", help_text: str = "") -> Self:
        return cls(name=name, example_value=example_value, help_text=help_text)

    def with_help(self, help_text: str) -> Self:
        return self.model_copy(update={"help_text": help_text})

    def usage(self, flag_prefix: str = "--") -> str:
        flag = f"{flag_prefix}{self.name}"
        return f"{flag} {self.example_value}" if self.example_value else flag
