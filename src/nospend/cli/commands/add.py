"""Commands for logging essential purchases and skipped temptations."""

import click
from nospend.cli.error_handling import handle_domain_error, warn_if_unsaved
from nospend.cli.ledger_context import load_ledger
from nospend.domain.entities import EntryType
from nospend.domain.errors import ValidationError
from nospend.utils.formatting import format_currency


def _add_entry(ctx, entry_type: EntryType, amount: str, note: tuple[str, ...]) -> None:
    repository, ledger = load_ledger(ctx)

    try:
        entry = ledger.add_entry(entry_type, amount, " ".join(note))
    except ValidationError as e:
        handle_domain_error(ctx, e)

    warn_if_unsaved(repository.save_entries(ledger.snapshot()))

    label = "Essentielt køb" if entry_type == EntryType.ESSENTIAL else "Fravalg"
    click.echo(f"{label} registreret: {format_currency(entry.amount)}")
    click.echo(f"  Note: {entry.note}")
    click.echo(f"  ID: {entry.id}")


@click.command("essential")
@click.argument("amount")
@click.argument("note", nargs=-1)
@click.pass_context
def add_essential(ctx, amount: str, note: tuple[str, ...]):
    """Log a necessary purchase (counted against the budget).

    Examples:
        nospend essential 125 Mælk og rugbrød
        nospend essential "89,50" Busbillet
    """
    _add_entry(ctx, EntryType.ESSENTIAL, amount, note)


@click.command("skip")
@click.argument("amount")
@click.argument("note", nargs=-1)
@click.pass_context
def add_skip(ctx, amount: str, note: tuple[str, ...]):
    """Log a temptation you skipped (counted entirely as savings).

    Examples:
        nospend skip 45 Kaffe to go
    """
    _add_entry(ctx, EntryType.SKIP, amount, note)


def register_commands(cli):
    """Register entry commands with main CLI."""
    cli.add_command(add_essential)
    cli.add_command(add_skip)
