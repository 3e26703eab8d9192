"""CLI error handling helpers."""

import click

from nospend.domain.errors import DomainError

UNSAVED_WARNING = "Advarsel: ændringen kunne ikke gemmes og gælder kun for denne kørsel."


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError) -> None:
    """Render a validation error and exit with failure."""
    click.echo(f"Error: {error}", err=True)
    ctx.exit(1)


def warn_if_unsaved(saved: bool) -> None:
    """Tell the user a change was applied but not stored.

    Write failures are already logged by the repository; this only surfaces
    them on the terminal. The command still succeeds.
    """
    if not saved:
        click.echo(UNSAVED_WARNING, err=True)
