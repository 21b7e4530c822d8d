# Overview: Flask CLI commands for inspecting and resetting the stored data.

# foodbazar/cli.py
# Commands Legend:
# Prereqs:
# - Activate your virtualenv.
# - Set FLASK_APP to foodbazar (PowerShell: $env:FLASK_APP="foodbazar").
# - Use: python -m flask <group> <command> [options]
#
# - python -m flask data reset --yes
#   Discard stored customers, products and transactions and reseed the demo dataset.
# - python -m flask data summary
#   Print collection counts and headline revenue figures.
# - python -m flask data low-stock [--threshold 100]
#   List products whose stock is below the threshold.

import click
from flask import current_app
from flask.cli import with_appcontext

from .services import reporting_service
from .services.store_service import get_store


@click.group('data')
def data_group():
    """Stored data inspection and reset commands."""


@data_group.command('reset')
@click.option('--yes', is_flag=True, help='Skip confirmation')
@with_appcontext
def reset_data(yes):
    """
    DANGER: Replace all stored data with the demo dataset.

    Every customer, product and transaction added since the last reset is lost.
    """
    if not yes:
        click.confirm("WARN This will DELETE ALL DATA. Are you sure?", abort=True)

    store = get_store()
    store.reset_to_seed_data()
    counts = store.counts()
    click.echo(
        f"PASS Reset complete: {counts['customers']} customers, "
        f"{counts['products']} products, {counts['transactions']} transactions"
    )


@data_group.command('summary')
@with_appcontext
def summary():
    """Print collection counts and revenue totals."""
    store = get_store()
    customers = store.list_customers()
    products = store.list_products()
    transactions = store.list_transactions()

    click.echo(f"Customers:     {len(customers)}")
    click.echo(f"Products:      {len(products)}")
    click.echo(f"Transactions:  {len(transactions)}")
    click.echo(f"Revenue:       {reporting_service.total_revenue(transactions):.2f}")
    click.echo(f"Avg sale:      {reporting_service.average_transaction_value(transactions):.2f}")
    click.echo(f"Stock value:   {reporting_service.inventory_value(products):.2f}")

    top = reporting_service.top_products(transactions)
    if top:
        click.echo("Top products:")
        for row in top:
            click.echo(f"  {row['product_id']:<6} {row['name']:<24} {row['units']:>5} units  {row['revenue']:>10.2f}")


@data_group.command('low-stock')
@click.option('--threshold', type=int, default=None, help='Stock level to compare against')
@with_appcontext
def low_stock(threshold):
    """List products with stock below the threshold."""
    if threshold is None:
        threshold = current_app.config["FOODBAZAR_LOW_STOCK_THRESHOLD"]

    products = reporting_service.low_stock(get_store().list_products(), threshold)
    if not products:
        click.echo(f"PASS No products below {threshold}")
        return

    for p in products:
        click.echo(f"WARN {p.id:<6} {p.name:<24} {p.stock:>6} {p.unit}")


def register_commands(app):
    """Register all CLI commands with Flask app."""
    app.cli.add_command(data_group)
