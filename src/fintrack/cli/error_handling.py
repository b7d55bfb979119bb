"""CLI error handling and display helpers."""

from decimal import Decimal

import click

from fintrack.domain.errors import DomainError


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError) -> None:
    """Render a domain error and exit with failure."""
    click.echo(f"Error: {error}", err=True)
    ctx.exit(1)


def format_money(amount: Decimal, currency_code: str = "") -> str:
    """Format an amount with thousands separators and two decimals."""
    text = f"{amount:,.2f}"
    return f"{currency_code} {text}" if currency_code else text
