"""Scoped progress display.

Each long-running step owns its spinner through ``progress_step``; the
spinner is stopped when the block exits, whether it succeeded or raised.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from rich.console import Console
from rich.status import Status


@contextmanager
def progress_step(console: Console, message: str) -> Iterator[Status | None]:
    """Show a spinner with *message* for the duration of the block.

    Yields None when the console is not a terminal (CI/pipe mode), so no
    spinner is drawn.
    """
    if not console.is_terminal:
        yield None
        return
    with console.status(f"[bold blue]{message}", spinner="dots") as status:
        yield status
