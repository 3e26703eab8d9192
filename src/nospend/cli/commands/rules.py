"""Challenge rules command."""

import click

RULES_TAG = "Regler: Kun fornødenheder"

RULES = (
    "Kun fornødenheder: mad, medicin, transport, husleje, faste regninger.",
    'Ingen tøj, makeup, møbler eller "bare fordi"-køb.',
    "Gem kvitteringer og noter for at spotte mønstre.",
    "Log fravalg, de tæller direkte som besparelse.",
    "Hver søndag: gennemgå ugen og justér budgettet hvis nødvendigt.",
)


@click.command("rules")
def show_rules():
    """Show the rules of the challenge."""
    click.echo("Reglerne")
    for rule in RULES:
        click.echo(f"  - {rule}")


def register_commands(cli):
    """Register rules command with main CLI."""
    cli.add_command(show_rules)
