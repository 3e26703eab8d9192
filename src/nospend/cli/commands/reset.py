"""Reset command."""

import click
from nospend.cli.error_handling import warn_if_unsaved
from nospend.cli.ledger_context import load_ledger


@click.command("reset")
@click.option("--yes", "-y", is_flag=True, help="Skip the confirmation prompt")
@click.pass_context
def reset_entries(ctx, yes: bool):
    """Delete every logged entry. The budget is kept."""
    if not yes and not click.confirm("Er du sikker på at du vil nulstille alle poster?"):
        click.echo("Annulleret.")
        return

    repository, ledger = load_ledger(ctx)
    count = len(ledger.entries)
    ledger.reset()
    warn_if_unsaved(repository.save_entries(ledger.snapshot()))
    click.echo(f"Nulstillede {count} post{'er' if count != 1 else ''}.")


def register_commands(cli):
    """Register reset command with main CLI."""
    cli.add_command(reset_entries)
