"""Transaction management commands."""

import click
from fintrack.cli.error_handling import format_money, handle_domain_error
from fintrack.domain.entities import Category, TransactionKind
from fintrack.domain.errors import DomainError
from fintrack.domain.transaction import TransactionService, build_filter

KIND_CHOICES = click.Choice([k.value for k in TransactionKind], case_sensitive=False)
CATEGORY_CHOICES = click.Choice([c.value for c in Category], case_sensitive=False)


@click.group()
def transaction_group():
    """Manage transactions."""
    pass


@transaction_group.command("add")
@click.option("--kind", type=KIND_CHOICES, required=True, help="income or expense")
@click.option("--amount", required=True, help="Unsigned amount (e.g., 123.45)")
@click.option(
    "--date",
    "txn_date",
    required=True,
    help="Transaction date (YYYY-MM-DD or relative like 'today', 'yesterday')",
)
@click.option("--description", required=True, help="Transaction description")
@click.option("--category", type=CATEGORY_CHOICES, default=Category.OTHER.value, show_default=True)
@click.option("--currency", help="Currency code (defaults to the owner's currency)")
@click.pass_context
def add_transaction(
    ctx,
    kind: str,
    amount: str,
    txn_date: str,
    description: str,
    category: str,
    currency: str | None,
):
    """Add a transaction.

    Examples:
        fintrack transaction add --kind expense --amount 50.00 --date 2024-01-15 --description "Groceries" --category food
        fintrack transaction add --kind income --amount 1000 --date today --description "Paycheck" --category salary
    """
    db = ctx.obj["db"]
    owner_id = ctx.obj["owner_id"]
    service = TransactionService(db)

    try:
        txn = service.create_transaction(
            owner_id,
            kind=kind,
            description=description,
            amount=amount,
            date=txn_date,
            category=category,
            currency_code=currency,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Created transaction {txn.id}")
    click.echo(f"  Date: {txn.date}")
    click.echo(f"  Kind: {txn.kind.value}")
    click.echo(f"  Amount: {format_money(txn.amount, txn.currency_code)}")
    click.echo(f"  Category: {txn.category.value}")
    click.echo(f"  Description: {txn.description}")


@transaction_group.command("list")
@click.option("--start-date", help="Start date (YYYY-MM-DD or relative like 'last month', 'this year')")
@click.option("--end-date", help="End date (YYYY-MM-DD or relative like 'today', 'this month')")
@click.option("--category", type=CATEGORY_CHOICES, help="Only this category")
@click.option("--kind", type=KIND_CHOICES, help="Only income or only expense")
@click.pass_context
def list_transactions(
    ctx, start_date: str | None, end_date: str | None, category: str | None, kind: str | None
):
    """View transactions with optional filters."""
    db = ctx.obj["db"]
    owner_id = ctx.obj["owner_id"]
    service = TransactionService(db)

    try:
        filters = build_filter(
            start_date=start_date, end_date=end_date, category=category, kind=kind
        )
    except DomainError as e:
        handle_domain_error(ctx, e)

    transactions = service.list_transactions(owner_id, filters)

    if not transactions:
        click.echo("No transactions found.")
        return

    click.echo(f"\nFound {len(transactions)} transaction(s):")
    click.echo("-" * 100)
    click.echo(
        f"{'ID':<6} {'Date':<12} {'Kind':<8} {'Amount':>16} {'Category':<16} {'Description':<30}"
    )
    click.echo("-" * 100)

    for txn in transactions:
        amount_str = format_money(txn.amount, txn.currency_code)
        description = txn.description[:30]
        click.echo(
            f"{txn.id:<6} {str(txn.date):<12} {txn.kind.value:<8} {amount_str:>16} "
            f"{txn.category.value:<16} {description:<30}"
        )

    total_expenses = sum(txn.amount for txn in transactions if txn.kind == TransactionKind.EXPENSE)
    total_income = sum(txn.amount for txn in transactions if txn.kind == TransactionKind.INCOME)
    click.echo("-" * 100)
    click.echo(
        f"{'TOTAL':<6} {'':<12} Expenses: {format_money(total_expenses)} | "
        f"Income: {format_money(total_income)} | Count: {len(transactions)}"
    )


@transaction_group.command("update")
@click.argument("transaction_id", type=int)
@click.option("--kind", type=KIND_CHOICES, help="income or expense")
@click.option("--amount", help="Unsigned amount (e.g., 123.45)")
@click.option("--date", "txn_date", help="Transaction date (YYYY-MM-DD or relative like 'today')")
@click.option("--description", help="Transaction description")
@click.option("--category", type=CATEGORY_CHOICES, help="Category")
@click.option("--currency", help="Currency code")
@click.pass_context
def update_transaction(
    ctx,
    transaction_id: int,
    kind: str | None,
    amount: str | None,
    txn_date: str | None,
    description: str | None,
    category: str | None,
    currency: str | None,
) -> None:
    """Update a transaction.

    Updates only the fields that are provided.

    Examples:
        fintrack transaction update 1 --amount 75.00
        fintrack transaction update 1 --category food --date 2024-01-16
    """
    db = ctx.obj["db"]
    owner_id = ctx.obj["owner_id"]
    service = TransactionService(db)

    try:
        service.update_transaction(
            owner_id,
            transaction_id,
            kind=kind,
            description=description,
            amount=amount,
            category=category,
            date=txn_date,
            currency_code=currency,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Updated transaction {transaction_id}")


@transaction_group.command("delete")
@click.argument("transaction_id", type=int)
@click.option("--yes", is_flag=True, help="Delete without asking for confirmation")
@click.pass_context
def delete_transaction(ctx, transaction_id: int, yes: bool) -> None:
    """Delete a transaction.

    Examples:
        fintrack transaction delete 1
    """
    db = ctx.obj["db"]
    owner_id = ctx.obj["owner_id"]
    service = TransactionService(db)

    if not yes and not click.confirm(f"Are you sure you want to delete transaction {transaction_id}?"):
        click.echo("Deletion cancelled.")
        return

    if not service.delete_transaction(owner_id, transaction_id):
        click.echo(f"Error: Transaction {transaction_id} not found", err=True)
        ctx.exit(1)

    click.echo(f"Deleted transaction {transaction_id}")


def register_commands(cli: click.Group) -> None:
    """Register transaction commands with main CLI."""
    cli.add_command(transaction_group, name="transaction")
