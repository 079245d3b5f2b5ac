from __future__ import annotations

from rich.console import Console
from rich.markup import escape

console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)


def say(msg: str) -> None:
    # soft_wrap keeps signatures and byte lists on one line regardless of width
    console.print(msg, soft_wrap=True)


def raw(text: str) -> None:
    console.print(text, soft_wrap=True, markup=False)


def value(text, style: str) -> str:
    return f"[{style}]{escape(str(text))}[/{style}]"


def error(msg: str) -> None:
    err_console.print(f"[bold red]Error:[/bold red] {escape(msg)}", soft_wrap=True)
