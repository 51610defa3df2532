"""Decision engine tests. No filesystem access."""

from __future__ import annotations

import pathlib as pl

import pytest

from mk import errors
from mk.decision import (
    EntryKind,
    TargetSpec,
    check_overrides,
    check_preconditions,
    decide_executable,
    plan,
    resolve_type,
)


class StubInput:
    def __init__(self, available: bool = False) -> None:
        self._available = available
        self.calls = 0

    def available(self) -> bool:
        self.calls += 1
        return self._available


def make_spec(path: str, **kwargs: bool) -> TargetSpec:
    return TargetSpec.from_args("/root-that-is-never-touched", path, **kwargs)


@pytest.mark.parametrize("path", ["foo.txt", "a/b/c.md", "archive.tar.gz", "x.SH", "dir.d/file.c"])
def test_extension_means_file(path: str) -> None:
    assert resolve_type(make_spec(path)) is EntryKind.FILE


@pytest.mark.parametrize("path", ["foo", "a/b/c", "foo.", "Makefile", "a.d/b"])
def test_no_extension_means_directory(path: str) -> None:
    assert resolve_type(make_spec(path)) is EntryKind.DIRECTORY


@pytest.mark.parametrize("path", [".dir", ".config.d", "a/.hidden.tar.gz", ".git"])
def test_leading_dot_means_directory(path: str) -> None:
    assert resolve_type(make_spec(path)) is EntryKind.DIRECTORY


def test_overrides_win_over_path_shape() -> None:
    assert resolve_type(make_spec("dir_like", force_file=True)) is EntryKind.FILE
    assert resolve_type(make_spec(".hidden", force_file=True)) is EntryKind.FILE
    assert resolve_type(make_spec("file_like.txt", force_directory=True)) is EntryKind.DIRECTORY


@pytest.mark.parametrize("path", ["foo", "foo.txt", ".dir"])
def test_both_overrides_conflict(path: str) -> None:
    with pytest.raises(errors.ConflictingTypeOverride) as exc_info:
        resolve_type(make_spec(path, force_file=True, force_directory=True))
    assert isinstance(exc_info.value, errors.ConfigurationError)


def test_conflict_is_checked_before_existence() -> None:
    spec = make_spec("foo.txt", force_file=True, force_directory=True)
    with pytest.raises(errors.ConflictingTypeOverride):
        plan(spec, True, StubInput(True))


def test_existing_entry_rejected_without_overwrite() -> None:
    spec = make_spec("foo.txt")
    with pytest.raises(errors.EntryAlreadyExists) as exc_info:
        check_preconditions(spec, True, EntryKind.FILE, StubInput())
    assert exc_info.value.path == pl.Path("foo.txt")
    assert "foo.txt" in str(exc_info.value)


def test_existing_entry_allowed_with_overwrite() -> None:
    action = plan(make_spec("foo.txt", overwrite=True), True, StubInput())
    assert action.overwrite
    assert action.kind is EntryKind.FILE


def test_executable_directory_rejected() -> None:
    with pytest.raises(errors.ExecutableOnDirectory):
        plan(make_spec("foo", force_executable=True), False, StubInput())


def test_directory_with_input_rejected() -> None:
    with pytest.raises(errors.UnexpectedInputForDirectory) as exc_info:
        plan(make_spec("foo"), False, StubInput(True))
    assert isinstance(exc_info.value, errors.PolicyRejection)


def test_file_plan_does_not_probe_input() -> None:
    stub = StubInput(True)
    action = plan(make_spec("foo.txt"), False, stub)
    assert action.is_file
    assert stub.calls == 0


def test_existence_is_checked_before_directory_conflicts() -> None:
    with pytest.raises(errors.EntryAlreadyExists):
        plan(make_spec("foo", force_executable=True), True, StubInput(True))


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ("script.sh", True),
        ("tool.py", True),
        ("setup.exe", True),
        ("app.AppImage", False),
        ("app.appimage", True),
        ("RUN.SH", False),
        ("notes.txt", False),
        ("Makefile", False),
        (".env.sh", True),
    ],
)
def test_executable_from_extension(path: str, expected: bool) -> None:
    spec = make_spec(path)
    assert decide_executable(spec, spec.path, EntryKind.FILE) is expected


@pytest.mark.parametrize("path", ["notes.txt", "Makefile", "data.json"])
def test_forced_executable(path: str) -> None:
    spec = make_spec(path, force_executable=True)
    assert decide_executable(spec, spec.path, EntryKind.FILE)


def test_directory_plan_is_never_executable() -> None:
    action = plan(make_spec("bin.sh", force_directory=True), False, StubInput())
    assert action.kind is EntryKind.DIRECTORY
    assert not action.executable


def test_plan_keeps_paths() -> None:
    action = plan(make_spec("a/b/script.sh"), False, StubInput())
    assert action.path == pl.Path("/root-that-is-never-touched/a/b/script.sh")
    assert action.display_path == pl.Path("a/b/script.sh")
    assert action.executable


@pytest.mark.parametrize("path", ["bin.sh", "tools"])
def test_decide_executable_false_for_directories(path: str) -> None:
    spec = make_spec(path, force_executable=True)
    assert not decide_executable(spec, spec.path, EntryKind.DIRECTORY)


def test_check_overrides() -> None:
    check_overrides(make_spec("foo", force_file=True))
    check_overrides(make_spec("foo", force_directory=True))
    with pytest.raises(errors.ConflictingTypeOverride):
        check_overrides(make_spec("foo", force_file=True, force_directory=True))
