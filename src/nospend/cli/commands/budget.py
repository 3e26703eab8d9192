"""Budget management commands."""

import click
from nospend.cli.error_handling import handle_domain_error, warn_if_unsaved
from nospend.cli.ledger_context import load_ledger
from nospend.domain.entities import BUDGET_MAX, BUDGET_MIN, BUDGET_STEP
from nospend.domain.errors import ValidationError
from nospend.utils.formatting import format_currency


@click.group()
def budget_group():
    """Show or adjust the monthly essentials budget."""
    pass


@budget_group.command("show")
@click.pass_context
def show_budget(ctx):
    """Show the current monthly budget."""
    _, ledger = load_ledger(ctx)
    click.echo(f"Månedens essentials-budget: {format_currency(ledger.budget.monthly_amount)}")
    click.echo(
        f"  Tilladt interval: {format_currency(BUDGET_MIN)} - {format_currency(BUDGET_MAX)}"
        f" (trin på {format_currency(BUDGET_STEP)})"
    )


@budget_group.command("set")
@click.argument("amount")
@click.pass_context
def set_budget(ctx, amount: str):
    """Set the monthly budget (1500-12000 kr.)."""
    repository, ledger = load_ledger(ctx)

    try:
        budget = ledger.set_budget(amount)
    except ValidationError as e:
        handle_domain_error(ctx, e)

    warn_if_unsaved(repository.save_budget(ledger.snapshot()))
    click.echo(f"Budget sat til {format_currency(budget.monthly_amount)}")


def register_commands(cli):
    """Register budget commands with main CLI."""
    cli.add_command(budget_group, name="budget")
