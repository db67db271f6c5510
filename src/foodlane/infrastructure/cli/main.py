import sys

import click

from foodlane.infrastructure.cli.food_commands import food_add, food_list, food_top
from foodlane.infrastructure.cli.order_commands import order_list, order_place
from foodlane.infrastructure.cli.server_commands import init_db_command, serve
from foodlane.infrastructure.cli.token_commands import token_issue
from foodlane.infrastructure.config import Settings
from foodlane.infrastructure.logging import configure_logging


@click.group()
def cli() -> None:
    """FoodLane: food marketplace backend"""
    settings = Settings.from_env()
    configure_logging(settings.environment, settings.log_level, stream=sys.stderr)


@cli.group()
def food() -> None:
    """Manage food listings."""


@cli.group()
def order() -> None:
    """Place and inspect orders."""


@cli.group()
def token() -> None:
    """Issue credentials."""


# Register subcommands
cli.add_command(serve)
cli.add_command(init_db_command)
food.add_command(food_add)
food.add_command(food_list)
food.add_command(food_top)
order.add_command(order_list)
order.add_command(order_place)
token.add_command(token_issue)
