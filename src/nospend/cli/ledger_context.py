"""CLI helpers for loading the ledger and resolving the reference date."""

from __future__ import annotations

from datetime import date

import click
from nospend.domain.ledger import Ledger
from nospend.domain.persistence import LedgerRepository
from nospend.utils.date_parser import parse_date


def get_repository(ctx: click.Context) -> LedgerRepository:
    """Return a repository bound to the database of the CLI context."""
    return LedgerRepository(ctx.obj["db"])


def load_ledger(ctx: click.Context) -> tuple[LedgerRepository, Ledger]:
    """Load the stored ledger. Never fails; bad data loads as defaults."""
    repository = get_repository(ctx)
    return repository, repository.load_ledger()


def resolve_today_or_exit(ctx: click.Context, today: str | None) -> date:
    """Parse the --today override, or exit with a CLI error."""
    if today is None:
        return date.today()
    try:
        return parse_date(today)
    except ValueError as exc:
        click.echo(f"Error: Invalid date: {exc}", err=True)
        ctx.exit(1)
