"""Dependency installation for a generated project."""

from __future__ import annotations

import asyncio
from pathlib import Path

from trellis.errors import InstallError
from trellis.logging import get_logger

logger = get_logger(__name__)


async def install_dependencies(
    directory: Path,
    package_manager: str,
    *,
    verbose: bool = False,
) -> None:
    """Run ``<package_manager> install`` in *directory*.

    Output is streamed to the terminal when *verbose*, otherwise captured
    and only surfaced on failure.

    Raises:
        InstallError: If the package manager is missing or exits non-zero.
    """
    logger.debug("install_started", package_manager=package_manager, directory=str(directory))
    stream = None if verbose else asyncio.subprocess.PIPE
    try:
        process = await asyncio.create_subprocess_exec(
            package_manager,
            "install",
            cwd=str(directory),
            stdout=stream,
            stderr=stream,
        )
    except OSError as exc:
        raise InstallError(package_manager, str(directory), str(exc)) from exc

    _, stderr = await process.communicate()
    if process.returncode != 0:
        detail = stderr.decode(errors="replace").strip().splitlines() if stderr else []
        reason = detail[-1] if detail else f"exit code {process.returncode}"
        raise InstallError(package_manager, str(directory), reason)
    logger.debug("install_finished", package_manager=package_manager)
