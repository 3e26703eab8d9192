"""Motivation command."""

import random

import click
from nospend.domain.motivation import DEFAULT_TIMEOUT, MotivationFeed, fetch_motivation


@click.command("motivate")
@click.option(
    "--offline",
    is_flag=True,
    envvar="NOSPEND_OFFLINE",
    help="Do not contact the online sources; use local tips and quotes",
)
@click.option("--seed", type=int, help="Seed for picking local fallbacks")
@click.option(
    "--timeout",
    type=float,
    default=DEFAULT_TIMEOUT,
    show_default=True,
    envvar="NOSPEND_FEED_TIMEOUT",
    help="Request timeout in seconds",
)
def motivate(offline: bool, seed: int | None, timeout: float):
    """Show a savings tip and an inspiring quote."""
    feed = MotivationFeed(rng=random.Random(seed), timeout=timeout, offline=offline)
    tip, quote = fetch_motivation(feed)

    click.echo("Motivation:")
    click.echo(f"  {tip.text}")
    click.echo("Inspiration:")
    click.echo(f"  {quote.text}")


def register_commands(cli):
    """Register motivate command with main CLI."""
    cli.add_command(motivate)
