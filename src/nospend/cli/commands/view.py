"""Entry viewing command."""

import click
from nospend.cli.ledger_context import load_ledger
from nospend.domain.entities import EntryType
from nospend.utils.formatting import format_currency, format_date


@click.command("entries")
@click.option(
    "--type",
    "entry_type",
    type=click.Choice([t.value for t in EntryType], case_sensitive=False),
    help="Only show one kind of entry",
)
@click.option("--limit", type=int, default=5, show_default=True, help="Number of entries (0 for all)")
@click.option("--verbose", "-v", is_flag=True, help="Show entry IDs and full timestamps")
@click.pass_context
def view_entries(ctx, entry_type: str | None, limit: int, verbose: bool):
    """List the latest entries, newest first."""
    _, ledger = load_ledger(ctx)

    if entry_type is None:
        entries = list(ledger.entries)
    elif EntryType(entry_type.lower()) == EntryType.SKIP:
        entries = ledger.skips()
    else:
        entries = ledger.essentials()
    if limit > 0:
        entries = entries[:limit]

    if not entries:
        click.echo("Ingen poster endnu. Log dit første køb eller fravalg.")
        return

    click.echo(f"\nSeneste poster ({len(entries)}):")
    click.echo("-" * 72)
    for entry in entries:
        is_skip = entry.type == EntryType.SKIP
        label = "Fravalg" if is_skip else "Essentielt køb"
        kind = "besparelse" if is_skip else "forbrug"
        click.echo(
            f"{format_date(entry.created_at):<9} {label:<15} {entry.note[:28]:<28} "
            f"{format_currency(entry.amount):>12} {kind}"
        )
        if verbose:
            click.echo(f"          ID: {entry.id}  Oprettet: {entry.created_at.isoformat()}")


def register_commands(cli):
    """Register entries command with main CLI."""
    cli.add_command(view_entries)
