"""CLI commands for orders."""

from __future__ import annotations

import click

from foodlane.application.list_orders import ListBuyerOrdersHandler
from foodlane.application.place_order import PlaceOrderHandler
from foodlane.domain.exceptions import DomainException
from foodlane.infrastructure.cli.context import cli_container


@click.command("place")
@click.option("--buyer", required=True, help="Buyer email.")
@click.option("--food", "food_id", required=True, help="Food ID to buy.")
@click.option("--quantity", required=True, type=int, help="Units to buy.")
@click.option("--idempotency-key", default=None, help="Collapses retried submissions.")
def order_place(buyer: str, food_id: str, quantity: int, idempotency_key: str | None) -> None:
    """Place an order (reserves stock)."""
    handler = PlaceOrderHandler(cli_container().uow_factory)

    try:
        dto = handler.handle(
            buyer_email=buyer,
            food_id=food_id,
            quantity=quantity,
            idempotency_key=idempotency_key,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order {dto.id} placed: {dto.quantity} x {dto.food_name} = ${dto.total}")


@click.command("list")
@click.option("--buyer", required=True, help="Buyer email.")
def order_list(buyer: str) -> None:
    """List a buyer's orders."""
    orders = ListBuyerOrdersHandler(cli_container().uow_factory).handle(buyer)

    if not orders:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':<34} {'Food':<24} {'Qty':>5} {'Total':>10}")
    click.echo("-" * 76)
    for o in orders:
        click.echo(f"{o.id:<34} {o.food_name:<24} {o.quantity:>5} {o.total:>10}")
