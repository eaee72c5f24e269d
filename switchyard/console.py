# Switchyard CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instance for Switchyard CLI applications."""
from typing import Iterable

from rich.console import Console

console = Console()


def print_lines(lines: Iterable[str], target: Console | None = None) -> None:
    """Print dispatcher output verbatim, one line at a time."""
    target = target or console
    for line in lines:
        target.print(
            line, markup=False, highlight=False, emoji=False, soft_wrap=True
        )
