"""Async filesystem helpers used by generators.

Blocking pathlib calls run in a worker thread via ``asyncio.to_thread``;
callers await them one after another.
"""

from __future__ import annotations

import asyncio
from pathlib import Path


def _write_file(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


def _is_empty_dir(path: Path) -> bool:
    return not any(path.iterdir())


async def ensure_dir(path: Path) -> Path:
    """Create *path* and any missing parents."""
    await asyncio.to_thread(path.mkdir, parents=True, exist_ok=True)
    return path


async def write_text(path: Path, content: str) -> Path:
    """Write *content* to *path*, creating parent directories."""
    await asyncio.to_thread(_write_file, path, content)
    return path


async def read_text(path: Path) -> str:
    return await asyncio.to_thread(path.read_text, encoding="utf-8")


async def path_exists(path: Path) -> bool:
    return await asyncio.to_thread(path.exists)


async def is_empty_dir(path: Path) -> bool:
    """Return True if *path* is a directory with no entries."""
    return await asyncio.to_thread(_is_empty_dir, path)
