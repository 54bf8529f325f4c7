"""Terminal rendering of the registration flow."""

from __future__ import annotations

import asyncio
import webbrowser
from collections.abc import Mapping

from rich.console import Console
from rich.table import Table

from jwoc.workflows.presenter import NoticeLevel

_STYLES = {
    NoticeLevel.INFO: "cyan",
    NoticeLevel.SUCCESS: "bold green",
    NoticeLevel.ERROR: "bold red",
}


class ConsolePresenter:
    """FlowPresenter that writes notices to a rich console (stderr by default)."""

    def __init__(self, console: Console | None = None, *, open_browser: bool = False) -> None:
        self.console = console or Console(stderr=True)
        self.open_browser = open_browser
        self.navigated = asyncio.Event()

    def notify(self, level: NoticeLevel, message: str) -> None:
        self.console.print(f"[{_STYLES[level]}]{message}[/]")

    def show_field_errors(self, errors: Mapping[str, str]) -> None:
        table = Table(show_header=True, header_style="bold red", title="Invalid form")
        table.add_column("field")
        table.add_column("error")
        for name, message in errors.items():
            table.add_row(name, message)
        self.console.print(table)

    def navigate(self, target: str) -> None:
        self.console.print(f"redirecting to {target}")
        self.navigated.set()

    def redirect(self, url: str) -> None:
        self.console.print(f"continue in your browser: {url}")
        if self.open_browser:
            webbrowser.open(url)
