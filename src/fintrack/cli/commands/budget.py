"""Budget management commands."""

import click
from fintrack.cli.commands.transaction import CATEGORY_CHOICES
from fintrack.cli.error_handling import format_money, handle_domain_error
from fintrack.domain.budget import BudgetService
from fintrack.domain.entities import BudgetPeriod
from fintrack.domain.errors import DomainError

PERIOD_CHOICES = click.Choice([p.value for p in BudgetPeriod], case_sensitive=False)


@click.group()
def budget_group():
    """Manage category budgets."""
    pass


@budget_group.command("add")
@click.option("--category", type=CATEGORY_CHOICES, required=True, help="Budgeted category")
@click.option("--amount", required=True, help="Budget limit (e.g., 500.00)")
@click.option("--period", type=PERIOD_CHOICES, default=BudgetPeriod.MONTHLY.value, show_default=True)
@click.option("--currency", help="Currency code (defaults to the owner's currency)")
@click.pass_context
def add_budget(ctx, category: str, amount: str, period: str, currency: str | None):
    """Create a budget for a category."""
    db = ctx.obj["db"]
    service = BudgetService(db)

    try:
        budget = service.create_budget(
            ctx.obj["owner_id"],
            category=category,
            amount=amount,
            period=period,
            currency_code=currency,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(
        f"Created budget {budget.id}: {budget.category.value} "
        f"{format_money(budget.amount, budget.currency_code)} {budget.period.value}"
    )


@budget_group.command("list")
@click.pass_context
def list_budgets(ctx):
    """List budgets by category."""
    db = ctx.obj["db"]
    service = BudgetService(db)

    budgets = service.list_budgets(ctx.obj["owner_id"])
    if not budgets:
        click.echo("No budgets found.")
        return

    click.echo(f"{'ID':<6} {'Category':<16} {'Amount':>16} {'Period':<8}")
    click.echo("-" * 50)
    for budget in budgets:
        amount_str = format_money(budget.amount, budget.currency_code)
        click.echo(
            f"{budget.id:<6} {budget.category.value:<16} {amount_str:>16} {budget.period.value:<8}"
        )


@budget_group.command("update")
@click.argument("budget_id", type=int)
@click.option("--category", type=CATEGORY_CHOICES, help="Budgeted category")
@click.option("--amount", help="Budget limit")
@click.option("--period", type=PERIOD_CHOICES, help="Budget period")
@click.option("--currency", help="Currency code")
@click.pass_context
def update_budget(
    ctx,
    budget_id: int,
    category: str | None,
    amount: str | None,
    period: str | None,
    currency: str | None,
):
    """Update a budget. Only the provided fields change."""
    db = ctx.obj["db"]
    service = BudgetService(db)

    try:
        service.update_budget(
            ctx.obj["owner_id"],
            budget_id,
            category=category,
            amount=amount,
            period=period,
            currency_code=currency,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Updated budget {budget_id}")


@budget_group.command("delete")
@click.argument("budget_id", type=int)
@click.pass_context
def delete_budget(ctx, budget_id: int):
    """Delete a budget."""
    db = ctx.obj["db"]
    service = BudgetService(db)

    if not service.delete_budget(ctx.obj["owner_id"], budget_id):
        click.echo(f"Error: Budget {budget_id} not found", err=True)
        ctx.exit(1)

    click.echo(f"Deleted budget {budget_id}")


def register_commands(cli: click.Group) -> None:
    """Register budget commands with main CLI."""
    cli.add_command(budget_group, name="budget")
