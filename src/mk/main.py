"""Main entry point for mk."""

import pathlib as pl
import sys

import click

from mk import cli, errors, fsplan, log, utils
from mk.decision import ActionPlan, TargetSpec, check_overrides, plan
from mk.errors import MkError
from mk.input_source import InputSource

logger = log.get_logger()


def run(
    root: pl.Path,
    target: str,
    source: InputSource,
    *,
    force_file: bool = False,
    force_directory: bool = False,
    force_executable: bool = False,
    overwrite: bool = False,
) -> ActionPlan:
    """Decide on and create one entry below `root`. Raises `MkError` on failure."""
    spec = TargetSpec.from_args(
        root,
        target,
        force_file=force_file,
        force_directory=force_directory,
        force_executable=force_executable,
        overwrite=overwrite,
    )
    check_overrides(spec)

    # Sampled once. Not atomic with the creation below.
    try:
        exists = utils.entry_exists(spec.path)
    except OSError as e:
        raise errors.wrap_os_error(e, spec.display_path, partial_state=False) from e

    action = plan(spec, exists, source)
    fsplan.apply(action, source)
    return action


@click.command()
@click.option("-f", "--file", "arg_file", is_flag=True, help="Force the created entry to be a file.")
@click.option("-d", "--directory", "arg_directory", is_flag=True, help="Force the created entry to be a directory.")
@click.option("-o", "--overwrite", "arg_overwrite", is_flag=True, help="Overwrite existing entries.")
@click.option("-x", "--executable", "arg_executable", is_flag=True, help="Force the created file to be executable.")
@click.option("-v", "--verbose", "arg_verbose", is_flag=True, help="Log each step and print what was created.")
@click.version_option(package_name="mk")
@click.argument("path", type=click.Path(path_type=str))
def main(  # noqa: PLR0913
    path: str,
    arg_file: bool = False,
    arg_directory: bool = False,
    arg_overwrite: bool = False,
    arg_executable: bool = False,
    arg_verbose: bool = False,
) -> None:
    """Make a file or directory at PATH, creating missing parents.

    The entry type is inferred from whether PATH has an extension. Paths whose
    final item starts with '.' are directories. Piped stdin becomes the file's
    content. Files with script or installer extensions are made executable.
    """
    log.configure_logging(level="debug" if arg_verbose else None)

    try:
        action = run(
            pl.Path.cwd(),
            path,
            InputSource.from_stdin(),
            force_file=arg_file,
            force_directory=arg_directory,
            force_executable=arg_executable,
            overwrite=arg_overwrite,
        )
    except MkError as e:
        logger.debug("Failed with %s", e.code)
        cli.echo_error(e)
        sys.exit(e.exit_code)

    if arg_verbose:
        cli.echo_created(action)


if __name__ == "__main__":
    main()
