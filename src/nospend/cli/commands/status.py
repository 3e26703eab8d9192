"""Challenge status command."""

import click
from nospend.cli.commands.rules import RULES_TAG
from nospend.cli.ledger_context import load_ledger, resolve_today_or_exit
from nospend.domain.challenge import compute_window
from nospend.domain.entities import ChallengeWindow, StatsSnapshot
from nospend.domain.stats import compute_stats
from nospend.utils.formatting import format_currency, format_percent

BAR_WIDTH = 30


def _pace_message(window: ChallengeWindow, stats: StatsSnapshot) -> str:
    """Return the budget pulse sentence for the current pace."""
    if not window.is_active:
        return (
            "Challenge starter snart – planlæg måltider og lav en liste over "
            '"ingen adgang"-køb.'
        )
    if stats.is_under_pace:
        return (
            f"Du er {format_currency(stats.budget_delta)} under den forventede kurve. "
            "Perfekt disciplin!"
        )
    return (
        f"Du er {format_currency(abs(stats.budget_delta))} over målet. "
        "Hold igen de næste dage."
    )


def _progress_bar(ratio) -> str:
    filled = int(ratio * BAR_WIDTH)
    return "[" + "#" * filled + "-" * (BAR_WIDTH - filled) + "]"


@click.command("status")
@click.option(
    "--today",
    help="Reference date (YYYY-MM-DD or relative like 'today', 'yesterday')",
)
@click.pass_context
def show_status(ctx, today: str | None):
    """Show savings, spending and pace for the challenge."""
    reference_date = resolve_today_or_exit(ctx, today)
    _, ledger = load_ledger(ctx)

    window = compute_window(reference_date)
    stats = compute_stats(ledger.snapshot(), window)
    monthly = ledger.budget.monthly_amount

    header = f"Februar spare-challenge {window.year}  |  {window.status_label()}"
    click.echo(f"\n{header}  |  {RULES_TAG}")
    click.echo("=" * 60)

    click.echo(f"{'Samlet besparelse:':<24}{format_currency(stats.saved_amount):>14}")
    click.echo("  Skippede køb + tilbageværende budget")
    click.echo(f"{'Essentielt forbrug:':<24}{format_currency(stats.essential_total):>14}")
    click.echo(f"  Dagligt snit: {format_currency(stats.average_spend)}")
    click.echo(f"{'Skippede køb:':<24}{format_currency(stats.skip_total):>14}")
    click.echo("  Penge du lod blive i lommen")
    click.echo(f"{'Dage tilbage:':<24}{window.days_left:>14}")
    click.echo("  Bliv ved!" if window.is_active else "  Planlæg menuer nu")

    click.echo("-" * 60)
    click.echo(f"Budgetpuls ({'Under målet' if stats.is_under_pace else 'Over målet'})")
    click.echo(f"  Budget: {format_currency(monthly)}")
    click.echo(f"  Dagligt loft: {format_currency(stats.daily_allowance)}")
    target = (
        format_currency(stats.budget_target_so_far) if window.is_active else "Starter 1. feb"
    )
    click.echo(f"  Målt forbrug i dag: {target}")
    click.echo(
        f"  Forbrug i alt: {_progress_bar(stats.progress_ratio)} "
        f"{format_percent(stats.progress_ratio)}"
    )
    click.echo(f"  {_pace_message(window, stats)}")


def register_commands(cli):
    """Register status command with main CLI."""
    cli.add_command(show_status)
