"""Main CLI entry point."""

import logging

import click
from fintrack.database.factories import create_default_database
from fintrack.domain.owner import OwnerService

# Import and register all commands at module level
from fintrack.cli.commands import (
    transaction,
    budget,
    goal,
    summary,
)


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides FINTRACK_DB_PATH environment variable)",
    envvar="FINTRACK_DB_PATH",
)
@click.option(
    "--owner",
    default="local",
    show_default=True,
    help="Owner whose ledger to use",
    envvar="FINTRACK_OWNER",
)
@click.option("--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx, db_path: str | None, owner: str, verbose: bool):
    """Fintrack - Personal finance ledger.

    Record income and expenses, set category budgets, track savings goals
    and view monthly analytics.
    """
    ctx.ensure_object(dict)
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        db = create_default_database(database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.call_on_close(db.disconnect)
        try:
            profile = OwnerService(db).upsert_owner_profile(owner)
        except ValueError as e:
            click.echo(f"Error: {e}", err=True)
            ctx.exit(1)
        ctx.obj["db"] = db
        ctx.obj["owner_id"] = profile.id


# Register all commands
transaction.register_commands(cli)
budget.register_commands(cli)
goal.register_commands(cli)
summary.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
