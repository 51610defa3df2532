"""File system effects. Applies an `ActionPlan` decided by `mk.decision`."""

from __future__ import annotations

import logging
import pathlib as pl
import stat

from mk import errors
from mk.decision import ActionPlan
from mk.input_source import InputSource

logger = logging.getLogger(__name__)

EXECUTE_BITS = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH


def _clear_other_kind(path: pl.Path, *, want_dir: bool) -> None:
    """Remove an existing entry of the other kind before replacing it.

    Directories are only removed when empty.
    """
    if path.is_dir() and not path.is_symlink():
        if not want_dir:
            logger.debug("Removing empty directory %s", path)
            path.rmdir()
    elif path.exists() or path.is_symlink():
        if want_dir:
            logger.debug("Removing file %s", path)
            path.unlink()


def create_directory(path: pl.Path, *, display_path: pl.Path | None = None, overwrite: bool = False) -> None:
    """Create a directory and all missing parents."""
    display_path = path if display_path is None else display_path
    try:
        if overwrite:
            _clear_other_kind(path, want_dir=True)
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise errors.wrap_os_error(e, display_path) from e
    logger.debug("Created directory %s", path)


def make_executable(path: pl.Path, *, display_path: pl.Path | None = None) -> None:
    """Add the execute bits to a file, like `chmod +x`."""
    display_path = path if display_path is None else display_path
    try:
        path.chmod(path.stat().st_mode | EXECUTE_BITS)
    except OSError as e:
        raise errors.ExecutableMarkingFailed(display_path, e.strerror or str(e)) from e
    logger.debug("Marked %s executable", path)


def create_file(
    path: pl.Path,
    executable: bool,
    source: InputSource,
    *,
    display_path: pl.Path | None = None,
    overwrite: bool = False,
) -> int:
    """Create (or truncate) a file, fill it from `source` and mark it executable if asked.

    Returns the number of bytes written.
    """
    display_path = path if display_path is None else display_path
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        if overwrite:
            _clear_other_kind(path, want_dir=False)
        with path.open("wb") as handle:
            written = source.copy_to(handle)
    except OSError as e:
        raise errors.wrap_os_error(e, display_path) from e
    logger.debug("Wrote %d bytes to %s", written, path)

    if executable:
        make_executable(path, display_path=display_path)
    return written


def apply(plan: ActionPlan, source: InputSource) -> None:
    """Apply the file system change."""
    if plan.is_file:
        create_file(
            plan.path,
            plan.executable,
            source,
            display_path=plan.display_path,
            overwrite=plan.overwrite,
        )
    else:
        create_directory(plan.path, display_path=plan.display_path, overwrite=plan.overwrite)
