"""Target directory validation.

Decides whether generation may write into the target directory. The
check is read-only: generators create directories themselves.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from trellis.errors import DirectoryError
from trellis.logging import get_logger
from trellis.scaffold.files import is_empty_dir, path_exists

logger = get_logger(__name__)

ConfirmCallback = Callable[[str], bool]


async def validate_directory(
    target: str | Path,
    *,
    auto_confirm: bool = False,
    force: bool = False,
    confirm: ConfirmCallback | None = None,
) -> Path:
    """Resolve *target* and check that generation may proceed there.

    A missing or empty directory always passes. A non-empty directory
    passes with *force* or *auto_confirm*; otherwise *confirm* is asked
    and declining cancels the run.

    Args:
        target: Target directory, relative or absolute.
        auto_confirm: Proceed into a non-empty directory without asking.
        force: Proceed into a non-empty directory unconditionally.
        confirm: Callback asked a yes/no question when confirmation is needed.

    Returns:
        The absolute target path.

    Raises:
        DirectoryError: If the target is a file, or the user declined (or
            could not be asked) to write into a non-empty directory.
    """
    target_dir = Path(target).expanduser().resolve()

    if not await path_exists(target_dir):
        logger.debug("directory_missing", directory=str(target_dir))
        return target_dir
    if not target_dir.is_dir():
        raise DirectoryError(f"'{target_dir}' exists and is not a directory")
    if await is_empty_dir(target_dir):
        return target_dir

    if force:
        logger.debug("directory_not_empty_forced", directory=str(target_dir))
        return target_dir
    if auto_confirm:
        logger.debug("directory_not_empty_auto_confirmed", directory=str(target_dir))
        return target_dir
    if confirm is None:
        raise DirectoryError(
            f"Directory '{target_dir}' is not empty. Use --yes or --force to continue."
        )
    if not confirm(f"Directory '{target_dir}' is not empty. Continue anyway?"):
        raise DirectoryError("generation cancelled by user")
    return target_dir
