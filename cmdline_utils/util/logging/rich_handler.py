# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

from pathlib import Path
from typing import TYPE_CHECKING, override

from rich.console import Console, ConsoleRenderable, RenderableType
from rich.containers import Renderables
from rich.logging import RichHandler
from rich.table import Table
from rich.text import Text


if TYPE_CHECKING:
    import logging

    from rich.traceback import Traceback


class CustomRichHandler(RichHandler):
    """Compact console handler: ``[L:logger] message`` with the source location right-aligned."""

    @override
    def __init__(
        self,
        *args,
        rich_tracebacks: bool = True,
        show_path: bool = True,
        level_color_everything: bool = True,
        enable_link_path: bool = False,
        console: Console | None = None,
        **kwargs,
    ) -> None:
        if console is None:
            console = Console(stderr=True)

        super().__init__(*args, console=console, rich_tracebacks=rich_tracebacks, enable_link_path=enable_link_path, **kwargs)

        self.show_path = show_path
        self.level_color_everything = level_color_everything

    def should_format(self, record: "logging.LogRecord") -> bool:
        return not getattr(record, "simple", False)

    def get_level_style(self, record: "logging.LogRecord") -> str:
        return f"logging.level.{record.levelname.lower()}"

    def get_message_style(self, record: "logging.LogRecord") -> str:
        if self.level_color_everything:
            return self.get_level_style(record)
        return "log.message"

    @override
    def render_message(self, record: "logging.LogRecord", message: str) -> ConsoleRenderable:
        text = Text()

        if self.should_format(record):
            text.append("[", style="dim")
            text.append(record.levelname[0], style=self.get_level_style(record))
            text.append(f":{record.name}", style="dim")
            text.append("] ", style="dim")

        text.append(message)
        return text

    @override
    def render(self, *args, record: "logging.LogRecord", message_renderable: ConsoleRenderable, traceback: "Traceback | None", **kwargs) -> ConsoleRenderable:
        if not self.should_format(record):
            return message_renderable

        path = Path(record.pathname).name
        link_path = record.pathname if self.enable_link_path else None

        renderables: list[ConsoleRenderable] = [message_renderable]
        if traceback:
            renderables.append(traceback)

        output = Table.grid(padding=(0, 1))
        output.expand = True
        output.add_column(ratio=1, style=self.get_message_style(record), overflow="fold")
        if self.show_path and path:
            output.add_column(style="log.path")

        row: list[RenderableType] = [Renderables(renderables)]
        if self.show_path and path:
            path_text = Text()
            path_text.append(path, style=f"link file://{link_path}" if link_path else "")
            if record.lineno:
                path_text.append(f":{record.lineno}", style=f"link file://{link_path}#{record.lineno}" if link_path else "")
            row.append(path_text)
        output.add_row(*row)

        return output
