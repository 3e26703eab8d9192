"""Main CLI entry point."""

import logging

import click
from nospend import __version__
from nospend.database.factories import create_sqlite_database
from nospend.domain.errors import PersistenceError

# Import and register all commands at module level
from nospend.cli.commands import (
    add,
    budget,
    motivate,
    reset,
    rules,
    status,
    view,
)

logger = logging.getLogger(__name__)


@click.group()
@click.version_option(__version__, prog_name="nospend")
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides NOSPEND_DB_PATH environment variable)",
    envvar="NOSPEND_DB_PATH",
)
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging")
@click.pass_context
def cli(ctx, db_path: str | None, verbose: bool):
    """Nospend - February essentials-only spending challenge.

    Log the purchases you need and the temptations you skip, and watch the
    savings grow day by day.
    """
    ctx.ensure_object(dict)
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None and "db" not in ctx.obj:
        db = create_sqlite_database(database_path=db_path)
        db.connect()
        try:
            db.initialize_schema()
        except PersistenceError:
            # Reads fall back to defaults and writes are logged as failed
            logger.warning("Database unavailable, continuing with defaults", exc_info=True)
        ctx.obj["db"] = db
        ctx.call_on_close(db.disconnect)


# Register all commands
add.register_commands(cli)
budget.register_commands(cli)
motivate.register_commands(cli)
reset.register_commands(cli)
rules.register_commands(cli)
status.register_commands(cli)
view.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
