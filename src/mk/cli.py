"""Cli utilities."""

import click

from mk import icons
from mk.decision import ActionPlan
from mk.errors import MkError

PARTIAL_STATE_NOTE = "Some parent directories or the file itself may have been created."


def icon_message(icon: str, message: str, fg: str = "blue") -> str:
    """Prefix a styled message with an icon."""
    return f"{icon} {click.style(message, fg=fg)}"


def echo_error(error: MkError) -> None:
    """Print an error (and a partial state note, if any) to stderr."""
    click.echo(icon_message(icons.ICON_CROSS, f"Error [{error.code}]: {error}", fg="red"), err=True)
    if error.partial_state:
        click.echo(icon_message(icons.ICON_WARNING, PARTIAL_STATE_NOTE, fg="yellow"), err=True)


def echo_created(plan: ActionPlan) -> None:
    """Print a one-line summary of a created entry."""
    label_type = "F" if plan.is_file else "D"
    label_executable = "x" if plan.executable else " "
    icon = icons.ICON_FILE if plan.is_file else icons.ICON_FOLDER
    style_fg = "green" if plan.is_file else "blue"
    summary = icon_message(icon, f"[{label_type}{label_executable}] {plan.display_path}", fg=style_fg)
    click.echo(f"{icons.ICON_CHECK} {summary}")
