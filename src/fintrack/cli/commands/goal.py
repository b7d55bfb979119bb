"""Savings goal commands."""

import click
from fintrack.cli.error_handling import format_money, handle_domain_error
from fintrack.domain.errors import DomainError
from fintrack.domain.goal import GoalService


@click.group()
def goal_group():
    """Manage savings goals."""
    pass


@goal_group.command("add")
@click.argument("name")
@click.option("--target", "target_amount", required=True, help="Target amount (e.g., 5000)")
@click.option("--current", "current_amount", default="0", help="Amount already saved")
@click.option("--description", help="Goal description")
@click.option("--target-date", help="Date to reach the goal by (YYYY-MM-DD)")
@click.option("--currency", help="Currency code (defaults to the owner's currency)")
@click.pass_context
def add_goal(
    ctx,
    name: str,
    target_amount: str,
    current_amount: str,
    description: str | None,
    target_date: str | None,
    currency: str | None,
):
    """Create a savings goal.

    Examples:
        fintrack goal add "Emergency fund" --target 10000 --target-date 2025-12-31
    """
    db = ctx.obj["db"]
    service = GoalService(db)

    try:
        goal = service.create_goal(
            ctx.obj["owner_id"],
            name=name,
            target_amount=target_amount,
            current_amount=current_amount,
            description=description,
            target_date=target_date,
            currency_code=currency,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Created goal '{goal.name}' (ID: {goal.id})")


@goal_group.command("list")
@click.pass_context
def list_goals(ctx):
    """List goals with their progress."""
    db = ctx.obj["db"]
    service = GoalService(db)

    goals = service.list_goals(ctx.obj["owner_id"])
    if not goals:
        click.echo("No goals found.")
        return

    click.echo(f"{'ID':<6} {'Name':<24} {'Saved':>16} {'Target':>16} {'Progress':>9} {'By':<12}")
    click.echo("-" * 88)
    for goal in goals:
        progress = goal.current_amount / goal.target_amount * 100
        target_date = str(goal.target_date) if goal.target_date else ""
        click.echo(
            f"{goal.id:<6} {goal.name[:24]:<24} "
            f"{format_money(goal.current_amount, goal.currency_code):>16} "
            f"{format_money(goal.target_amount, goal.currency_code):>16} "
            f"{progress:>8.1f}% {target_date:<12}"
        )


@goal_group.command("fund")
@click.argument("goal_id", type=int)
@click.argument("amount")
@click.pass_context
def fund_goal(ctx, goal_id: int, amount: str):
    """Add money to a goal."""
    db = ctx.obj["db"]
    service = GoalService(db)

    try:
        goal = service.add_funds(ctx.obj["owner_id"], goal_id, amount)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(
        f"Goal '{goal.name}' now at {format_money(goal.current_amount, goal.currency_code)} "
        f"of {format_money(goal.target_amount, goal.currency_code)}"
    )


@goal_group.command("update")
@click.argument("goal_id", type=int)
@click.option("--name", help="Goal name")
@click.option("--target", "target_amount", help="Target amount")
@click.option("--current", "current_amount", help="Amount already saved")
@click.option("--description", help="Goal description, or empty string to clear")
@click.option("--target-date", help="Target date, or empty string to clear")
@click.option("--currency", help="Currency code")
@click.pass_context
def update_goal(
    ctx,
    goal_id: int,
    name: str | None,
    target_amount: str | None,
    current_amount: str | None,
    description: str | None,
    target_date: str | None,
    currency: str | None,
):
    """Update a goal. Only the provided fields change."""
    db = ctx.obj["db"]
    service = GoalService(db)

    clear_description = description == ""
    clear_target_date = target_date == ""

    try:
        service.update_goal(
            ctx.obj["owner_id"],
            goal_id,
            name=name,
            description=None if clear_description else description,
            target_amount=target_amount,
            current_amount=current_amount,
            target_date=None if clear_target_date else target_date,
            currency_code=currency,
            clear_description=clear_description,
            clear_target_date=clear_target_date,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Updated goal {goal_id}")


@goal_group.command("delete")
@click.argument("goal_id", type=int)
@click.pass_context
def delete_goal(ctx, goal_id: int):
    """Delete a goal."""
    db = ctx.obj["db"]
    service = GoalService(db)

    if not service.delete_goal(ctx.obj["owner_id"], goal_id):
        click.echo(f"Error: Goal {goal_id} not found", err=True)
        ctx.exit(1)

    click.echo(f"Deleted goal {goal_id}")


def register_commands(cli: click.Group) -> None:
    """Register goal commands with main CLI."""
    cli.add_command(goal_group, name="goal")
