"""CLI commands for food listings."""

from __future__ import annotations

import click

from foodlane.application.add_food import AddFoodHandler
from foodlane.application.browse_foods import ListFoodsHandler, TopFoodsHandler
from foodlane.domain.exceptions import DomainException
from foodlane.infrastructure.cli.context import cli_container


@click.command("add")
@click.option("--seller", required=True, help="Seller email.")
@click.option("--name", required=True, help="Food name.")
@click.option("--price", required=True, help="Unit price (e.g. 12.50).")
@click.option("--quantity", required=True, type=int, help="Units in stock.")
@click.option("--category", default=None, help="Category label.")
def food_add(seller: str, name: str, price: str, quantity: int, category: str | None) -> None:
    """List a new food item."""
    handler = AddFoodHandler(cli_container().uow_factory)

    try:
        food = handler.handle(
            seller_email=seller,
            name=name,
            price=price,
            quantity=quantity,
            category=category,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Food {food.id} '{food.name}' listed at {food.price} ({food.quantity} in stock)")


def _print_foods(foods) -> None:
    click.echo(f"{'ID':<34} {'Name':<24} {'Price':>10} {'Stock':>6} {'Orders':>7}")
    click.echo("-" * 85)
    for f in foods:
        click.echo(
            f"{f.id:<34} {f.name:<24} {f.price:>10} {f.quantity:>6} {f.order_count:>7}"
        )


@click.command("list")
@click.option("--page", default=1, type=click.IntRange(min=1), help="Page number.")
@click.option("--size", default=10, type=click.IntRange(min=1), help="Page size.")
def food_list(page: int, size: int) -> None:
    """List food items page by page."""
    foods = ListFoodsHandler(cli_container().uow_factory).handle(page=page, size=size)

    if not foods:
        click.echo("No food found.")
        return
    _print_foods(foods)


@click.command("top")
@click.option("--limit", default=6, type=click.IntRange(min=1), help="How many to show.")
def food_top(limit: int) -> None:
    """Show the most ordered food items."""
    foods = TopFoodsHandler(cli_container().uow_factory).handle(limit=limit)

    if not foods:
        click.echo("No food found.")
        return
    _print_foods(foods)
