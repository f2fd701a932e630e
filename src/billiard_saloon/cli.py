"""CLI for Billiard Saloon."""

import sys
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table as RichTable

from . import SALOON_DIR, __version__
from .config import create_default_config, get_saloon_dir, load_config, save_config
from .models import BASE_PRICES, Product, ProductType, TableType
from .results import Err, Ok
from .saloon import Saloon, create_saloon

console = Console()
error_console = Console(stderr=True)

MENU = """
1 - Reserve table
2 - Order food/drink
3 - Find free table(s)
4 - Find highest consumption table
5 - Leave table
0 - Exit
"""

TABLE_TYPE_CHOICE = click.Choice([t.name for t in TableType], case_sensitive=False)
PRODUCT_TYPE_CHOICE = click.Choice([t.name for t in ProductType], case_sensitive=False)


def get_project_root() -> Path:
    """Get the project root directory (current working directory)."""
    return Path.cwd()


def load_saloon(project_root: Path) -> Saloon:
    """Build the saloon from config, exiting on an invalid configuration."""
    try:
        config = load_config(project_root)
    except ValueError as e:
        error_console.print(f"[red]Error:[/red] Invalid configuration: {escape(str(e))}")
        sys.exit(1)
    return create_saloon(config)


@click.group()
@click.version_option(version=__version__, prog_name="saloon")
def main() -> None:
    """Billiard Saloon - Table reservations and billing."""
    pass


@main.command()
@click.option("--force", is_flag=True, help="Replace an existing fleet with the default one")
def init(force: bool) -> None:
    """Write the default fleet configuration in the current directory."""
    project_root = get_project_root()
    saloon_dir = get_saloon_dir(project_root)

    if saloon_dir.exists() and not force:
        error_console.print(
            f"[yellow]Warning:[/yellow] {SALOON_DIR}/ already exists. "
            "Pass --force to reset the fleet."
        )
        sys.exit(1)

    config = create_default_config()
    save_config(config, project_root)
    console.print(
        f"[green]Initialized Billiard Saloon[/green] with {len(config.tables)} tables "
        f"in [dim]{saloon_dir}[/dim]"
    )


@main.command()
def fleet() -> None:
    """Show the configured tables and their base prices."""
    saloon = load_saloon(get_project_root())

    table = RichTable(title="Billiard Saloon Fleet")
    table.add_column("Table", style="cyan", justify="right")
    table.add_column("Type")
    table.add_column("Base price", justify="right")

    for saloon_table in saloon.tables:
        table.add_row(
            str(saloon_table.id),
            saloon_table.type.value,
            str(BASE_PRICES[saloon_table.type]),
        )

    console.print(table)


@main.command()
@click.option("--verbose", "-v", is_flag=True, help="Trace every table state change")
def run(verbose: bool) -> None:
    """Start the interactive reservation menu."""
    saloon = load_saloon(get_project_root())
    actions = {
        "1": _reserve_table,
        "2": _order,
        "3": _find_free_tables,
        "4": _find_highest_consumption,
        "5": _leave,
    }

    while True:
        console.print(MENU)
        try:
            choice = click.prompt("Choose option", default="", show_default=False).strip()
            if choice == "0":
                return
            action = actions.get(choice)
            if action is None:
                error_console.print(f"[yellow]Unknown option:[/yellow] {escape(choice)}")
                continue
            action(saloon, verbose)
        except click.Abort:
            # End of input
            return


def _trace(verbose: bool, message: str) -> None:
    if verbose:
        console.print(f"[dim]{escape(message)}[/dim]")


def _print_error(error: Err) -> None:
    error_console.print(f"[red]{error.error.message}[/red]")


def _reserve_table(saloon: Saloon, verbose: bool) -> None:
    type_name = click.prompt("Enter game type", type=TABLE_TYPE_CHOICE)
    match saloon.reserve_table(TableType[type_name.upper()]):
        case Ok(value=reservation_number):
            console.print(f"Your reservation number is: [bold]{reservation_number}[/bold]")
            _trace(verbose, f"table {reservation_number} reserved")
        case Err() as err:
            _print_error(err)


def _order(saloon: Saloon, verbose: bool) -> None:
    reservation_number = click.prompt("Enter reservation number", type=int)
    name = click.prompt("Enter your order")
    price = click.prompt("Enter price", type=click.IntRange(min=0))
    type_name = click.prompt("Enter type", type=PRODUCT_TYPE_CHOICE)

    product = Product(name=name, price=price, type=ProductType[type_name.upper()])
    match saloon.order(reservation_number, product):
        case Ok():
            console.print(f"[green]Added[/green] {escape(name)} to table {reservation_number}")
            _trace(verbose, f"table {reservation_number} ordered {name} ({price})")
        case Err() as err:
            _print_error(err)


def _find_free_tables(saloon: Saloon, verbose: bool) -> None:
    type_name = click.prompt("Enter game type", type=TABLE_TYPE_CHOICE)
    free_tables = saloon.get_free_tables_by_type(TableType[type_name.upper()])
    if not free_tables:
        console.print("[dim]No free tables.[/dim]")
    for table in free_tables:
        console.print(str(table))
    _trace(verbose, f"{len(free_tables)} free {type_name.upper()} table(s)")


def _find_highest_consumption(saloon: Saloon, verbose: bool) -> None:
    table = saloon.get_reserved_table_with_highest_consumption()
    if table is None:
        console.print("[dim]No tables.[/dim]")
        return
    console.print(str(table))
    _trace(verbose, f"table {table.id} running cost {table.calculate_cost()}")


def _leave(saloon: Saloon, verbose: bool) -> None:
    reservation_number = click.prompt("Enter reservation number", type=int)

    match saloon.get_table(reservation_number):
        case Ok(value=table):
            orders = table.orders
        case Err() as err:
            _print_error(err)
            return

    match saloon.leave(reservation_number):
        case Ok(value=cost):
            if orders:
                bill = RichTable(title=f"Bill for table {reservation_number}")
                bill.add_column("Item")
                bill.add_column("Type")
                bill.add_column("Price", justify="right")
                for product in orders:
                    bill.add_row(escape(product.name), product.type.value, str(product.price))
                console.print(bill)
            console.print(f"Total to pay: [bold]{cost}[/bold]")
            _trace(verbose, f"table {reservation_number} freed")
        case Err() as err:
            _print_error(err)


if __name__ == "__main__":
    main()
