# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

"""Help listing for registered commands.

The listing starts with a usage line naming every flag, followed by one line per
option with its flag, example value and help text::

    Usage: Application --endpoint <str> --port <int>

    Options:
      --endpoint <str>   The endpoint of the mqtt server
      --port <int>       Port to connect to
"""

from collections.abc import Iterable
from typing import IO

from rich.console import Console, Group
from rich.text import Text

from .option import CommandLineOption


class HelpFormatter:
    def __init__(self, program_name: str, commands: Iterable[CommandLineOption], *, flag_prefix: str = "--", indent: int = 2, gap: int = 3) -> None:
        self.program_name = program_name
        self.commands = tuple(commands)
        self.flag_prefix = flag_prefix
        self.indent = indent
        self.gap = gap

    def usage(self) -> str:
        parts = [self.program_name, *(command.usage(self.flag_prefix) for command in self.commands)]
        return f"Usage: {' '.join(parts)}"

    def option_lines(self) -> list[str]:
        usages = [command.usage(self.flag_prefix) for command in self.commands]
        width = max((len(usage) for usage in usages), default=0)

        lines = []
        for usage, command in zip(usages, self.commands, strict=True):
            line = f"{' ' * self.indent}{usage}"
            if command.help_text:
                line = f"{line.ljust(self.indent + width)}{' ' * self.gap}{command.help_text}"
            lines.append(line)
        return lines

    def format(self) -> str:
        lines = [self.usage()]
        if self.commands:
            lines.extend(("", "Options:", *self.option_lines()))
        return "\n".join(lines) + "\n"

    def print(self, file: IO[str]) -> None:
        file.write(self.format())
        file.flush()

    # MARK: Rich
    def renderable(self) -> Group:
        usage = Text("Usage: ", style="bold", no_wrap=True)
        usage.append(self.usage().removeprefix("Usage: "))

        if not self.commands:
            return Group(usage)

        # One unwrapped Text per option line
        lines = []
        for line, command in zip(self.option_lines(), self.commands, strict=True):
            text = Text(line, no_wrap=True, overflow="ignore")
            text.stylize("cyan", self.indent, self.indent + len(command.usage(self.flag_prefix)))
            lines.append(text)

        return Group(usage, Text(""), Text("Options:", style="bold"), *lines)

    def print_rich(self, file: IO[str], *, width: int | None = None) -> None:
        console = Console(file=file, width=width, highlight=False, soft_wrap=True)
        console.print(self.renderable(), soft_wrap=True)
