"""Analytics commands."""

import click
from fintrack.cli.error_handling import format_money, handle_domain_error
from fintrack.domain.analytics import AnalyticsService
from fintrack.domain.errors import DomainError
from fintrack.domain.validation import coerce_date


@click.command("dashboard")
@click.option("--as-of", help="Any date in the month to summarize (defaults to today)")
@click.pass_context
def dashboard(ctx, as_of: str | None):
    """Show income, expenses, balance and savings rate for one month.

    The balance is the net of that month only, not an all-time balance.
    """
    service = AnalyticsService(ctx.obj["db"])

    try:
        as_of_date = coerce_date(as_of, "as-of date") if as_of else None
        summary = service.compute_dashboard_summary(ctx.obj["owner_id"], as_of_date)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"{'Monthly income:':<20} {format_money(summary.monthly_income):>16}")
    click.echo(f"{'Monthly expenses:':<20} {format_money(summary.monthly_expenses):>16}")
    click.echo(f"{'Balance:':<20} {format_money(summary.total_balance):>16}")
    click.echo(f"{'Savings rate:':<20} {summary.savings_rate:>15.1f}%")


@click.command("by-category")
@click.option("--start-date", required=True, help="Start date (YYYY-MM-DD or relative like 'this month')")
@click.option("--end-date", required=True, help="End date (YYYY-MM-DD or relative like 'today')")
@click.pass_context
def by_category(ctx, start_date: str, end_date: str):
    """Show expense totals per category for a date range."""
    service = AnalyticsService(ctx.obj["db"])

    try:
        rows = service.compute_expenses_by_category(ctx.obj["owner_id"], start_date, end_date)
    except DomainError as e:
        handle_domain_error(ctx, e)

    if not rows:
        click.echo("No expenses found.")
        return

    click.echo(f"{'Category':<20} {'Amount':>16}")
    click.echo("-" * 37)
    for row in rows:
        click.echo(f"{row.category.value:<20} {format_money(row.amount):>16}")
    click.echo("-" * 37)
    click.echo(f"{'TOTAL':<20} {format_money(sum(row.amount for row in rows)):>16}")


@click.command("trend")
@click.option("--months", default=6, show_default=True, type=int, help="Number of months ending with this one")
@click.pass_context
def trend(ctx, months: int):
    """Show income versus expenses per month.

    Months without any transactions are not listed.
    """
    service = AnalyticsService(ctx.obj["db"])

    try:
        series = service.compute_income_vs_expenses_series(ctx.obj["owner_id"], months)
    except DomainError as e:
        handle_domain_error(ctx, e)

    if not series:
        click.echo("No transactions found.")
        return

    click.echo(f"{'Month':<10} {'Income':>16} {'Expenses':>16}")
    click.echo("-" * 44)
    for entry in series:
        click.echo(
            f"{entry.month:<10} {format_money(entry.income):>16} {format_money(entry.expenses):>16}"
        )


@click.command("balance")
@click.option("--as-of", help="Include transactions up to this date (defaults to today)")
@click.pass_context
def balance(ctx, as_of: str | None):
    """Show the all-time balance (income minus expenses)."""
    service = AnalyticsService(ctx.obj["db"])

    try:
        as_of_date = coerce_date(as_of, "as-of date") if as_of else None
        total = service.compute_cumulative_balance(ctx.obj["owner_id"], as_of_date)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Balance: {format_money(total)}")


def register_commands(cli):
    """Register analytics commands with main CLI."""
    cli.add_command(dashboard)
    cli.add_command(by_category)
    cli.add_command(trend)
    cli.add_command(balance)
