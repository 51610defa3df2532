"""Errors raised while deciding on and creating an entry.

Every failure the tool can report is an `MkError`. The class tells the
caller which stage failed:

- `ConfigurationError`: contradictory flags, nothing touched.
- `PolicyRejection`: the request is well-formed but not allowed, nothing touched.
- `FilesystemError`: the platform refused a creation step, partial state may exist.
- `ExecutableMarkingFailed`: the file exists with its content but is not executable.
"""

from __future__ import annotations

import dataclasses
import pathlib as pl

from mk import consts


@dataclasses.dataclass(eq=False)
class MkError(Exception):
    """Base error. `path` is the path as the user typed it."""

    code: str
    message: str
    path: pl.Path | None = None
    detail: str | None = None

    exit_code = consts.EXIT_FAILURE
    partial_state = False

    def __str__(self) -> str:
        text = self.message
        if self.path is not None:
            text += f' "{self.path}"'
        if self.detail:
            text += f" ({self.detail})"
        return text


class ConfigurationError(MkError):
    exit_code = consts.EXIT_CONFIGURATION


class PolicyRejection(MkError):
    pass


class ConflictingTypeOverride(ConfigurationError):
    def __init__(self, path: pl.Path | None = None) -> None:
        super().__init__("conflicting_type_override", "Cannot force both file and directory", path)


class EntryAlreadyExists(PolicyRejection):
    def __init__(self, path: pl.Path) -> None:
        super().__init__("entry_already_exists", "Entry already exists (use --overwrite to replace it)", path)


class ExecutableOnDirectory(PolicyRejection):
    def __init__(self, path: pl.Path) -> None:
        super().__init__("executable_on_directory", "Cannot make directory executable", path)


class UnexpectedInputForDirectory(PolicyRejection):
    def __init__(self, path: pl.Path) -> None:
        super().__init__("unexpected_input_for_directory", "Cannot create directory with stdin data", path)


class FilesystemError(MkError):
    """`partial_state` is False when the failure happened before anything was changed."""

    def __init__(self, path: pl.Path, detail: str | None = None, *, partial_state: bool = True) -> None:
        super().__init__("filesystem_error", "Filesystem operation failed", path, detail)
        self.partial_state = partial_state


class ExecutableMarkingFailed(MkError):
    partial_state = True

    def __init__(self, path: pl.Path, detail: str | None = None) -> None:
        super().__init__(
            "executable_marking_failed",
            "File was created but could not be made executable",
            path,
            detail,
        )


def wrap_os_error(error: OSError, path: pl.Path, *, partial_state: bool = True) -> FilesystemError:
    """Convert a platform error into a `FilesystemError` for `path`."""
    detail = error.strerror or str(error)
    if error.filename is not None:
        detail = f"{detail}: {error.filename}"
    return FilesystemError(path, detail, partial_state=partial_state)
