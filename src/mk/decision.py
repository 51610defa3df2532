"""Decide what to create. Pure logic, no filesystem access.

`plan` turns a `TargetSpec`, the pre-sampled existence of the target and an
`InputAvailability` into an immutable `ActionPlan`, or raises one of the
configuration/policy errors from `mk.errors`. Checks run in a fixed order:
override conflict, type, existence, directory conflicts, executability.
"""

from __future__ import annotations

import dataclasses
import enum
import logging
import os
import pathlib as pl
from typing import Protocol

from mk import consts, errors, utils

logger = logging.getLogger(__name__)


class EntryKind(enum.Enum):
    FILE = "file"
    DIRECTORY = "directory"


class InputAvailability(Protocol):
    """Anything that can tell whether bytes are waiting on the input."""

    def available(self) -> bool: ...


@dataclasses.dataclass(frozen=True)
class TargetSpec:
    """What the user asked for."""

    path: pl.Path
    display_path: pl.Path
    force_file: bool = False
    force_directory: bool = False
    force_executable: bool = False
    overwrite: bool = False

    @classmethod
    def from_args(
        cls,
        root: str | os.PathLike,
        relative: str | os.PathLike,
        *,
        force_file: bool = False,
        force_directory: bool = False,
        force_executable: bool = False,
        overwrite: bool = False,
    ) -> TargetSpec:
        """Join `relative` onto `root`. An absolute `relative` replaces `root`."""
        return cls(
            path=pl.Path(root) / relative,
            display_path=pl.Path(relative),
            force_file=force_file,
            force_directory=force_directory,
            force_executable=force_executable,
            overwrite=overwrite,
        )


@dataclasses.dataclass(frozen=True)
class ActionPlan:
    """Planned file system change."""

    path: pl.Path
    display_path: pl.Path
    kind: EntryKind
    overwrite: bool = False
    executable: bool = False

    @property
    def is_file(self) -> bool:
        return self.kind is EntryKind.FILE


def check_overrides(spec: TargetSpec) -> None:
    """Raise `ConflictingTypeOverride` if both file and directory are forced."""
    if spec.force_file and spec.force_directory:
        raise errors.ConflictingTypeOverride(spec.display_path)


def resolve_type(spec: TargetSpec) -> EntryKind:
    """Pick file or directory from the overrides, else from the path shape."""
    check_overrides(spec)
    if spec.force_file:
        return EntryKind.FILE
    if spec.force_directory:
        return EntryKind.DIRECTORY

    name = utils.final_segment(spec.path)
    if utils.is_hidden_name(name) or utils.extension(name) is None:
        return EntryKind.DIRECTORY
    return EntryKind.FILE


def check_preconditions(
    spec: TargetSpec,
    exists: bool,
    kind: EntryKind,
    input_availability: InputAvailability,
) -> None:
    """Raise a `PolicyRejection` if the plan is not allowed."""
    if exists and not spec.overwrite:
        raise errors.EntryAlreadyExists(spec.display_path)

    if kind is EntryKind.DIRECTORY:
        if spec.force_executable:
            raise errors.ExecutableOnDirectory(spec.display_path)
        # Only directories probe the input; a file will consume it anyway
        if input_availability.available():
            raise errors.UnexpectedInputForDirectory(spec.display_path)


def decide_executable(spec: TargetSpec, path: pl.Path, kind: EntryKind) -> bool:
    """Forced, or the extension is in `consts.EXECUTABLE_EXTENSIONS` (case-sensitive).

    Directories are never executable.
    """
    if kind is not EntryKind.FILE:
        return False
    if spec.force_executable:
        return True
    return utils.extension(path) in consts.EXECUTABLE_EXTENSIONS


def plan(spec: TargetSpec, exists: bool, input_availability: InputAvailability) -> ActionPlan:
    """Decide on the entry to create, or raise an `errors.MkError`."""
    kind = resolve_type(spec)
    check_preconditions(spec, exists, kind, input_availability)

    executable = decide_executable(spec, spec.path, kind)

    logger.debug("Planned %s %s (exists=%s, executable=%s)", kind.value, spec.path, exists, executable)
    return ActionPlan(
        path=spec.path,
        display_path=spec.display_path,
        kind=kind,
        overwrite=spec.overwrite,
        executable=executable,
    )
