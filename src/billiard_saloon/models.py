"""Products, table types and the Table state machine."""

from dataclasses import dataclass
from enum import Enum


class ProductType(Enum):
    """Category of an orderable item."""

    DRINK = "DRINK"
    FOOD = "FOOD"


class TableType(Enum):
    """Game played on a table."""

    SNOOKER = "SNOOKER"
    REX = "REX"
    BILLIARD = "BILLIARD"


# Charge for occupying a table, independent of orders
BASE_PRICES: dict[TableType, int] = {
    TableType.BILLIARD: 1200,
    TableType.SNOOKER: 800,
    TableType.REX: 600,
}


@dataclass(frozen=True)
class Product:
    """A single food or drink item ordered on a table."""

    name: str
    price: int
    type: ProductType


class Table:
    """A physical table with its occupancy and the orders placed on it.

    Two states: free and occupied. ``reserve()`` moves a table to occupied,
    ``free_up()`` moves it back to free and drains its orders. Neither
    ``reserve()`` nor ``add_order()`` checks the current state. The id and
    type are fixed for the lifetime of the table.
    """

    def __init__(self, id: int, type: TableType):
        self._id = id
        self._type = type
        self._occupied = False
        self._orders: list[Product] = []

    def __repr__(self) -> str:
        return f"Table(id={self._id!r}, type={self._type!r})"

    @property
    def id(self) -> int:
        """Identifier, also used as the reservation number."""
        return self._id

    @property
    def type(self) -> TableType:
        return self._type

    @property
    def occupied(self) -> bool:
        """Whether the table is currently reserved."""
        return self._occupied

    @property
    def orders(self) -> tuple[Product, ...]:
        """Products ordered since the last checkout, in insertion order."""
        return tuple(self._orders)

    def add_order(self, product: Product) -> None:
        """Append a product to the table's orders."""
        self._orders.append(product)

    def calculate_cost(self) -> int:
        """Base price of the table type plus the price of every order."""
        if self.type not in BASE_PRICES:
            raise ValueError(f"No base price for table type: {self.type}")
        return BASE_PRICES[self.type] + sum(product.price for product in self._orders)

    def reserve(self) -> None:
        """Mark the table as occupied."""
        self._occupied = True

    def free_up(self) -> int:
        """Check out the table.

        Returns:
            The cost accrued before the orders are cleared.
        """
        self._occupied = False
        cost = self.calculate_cost()
        self._orders.clear()
        return cost

    def __str__(self) -> str:
        return f"{self.id} ({self.type.value})"
