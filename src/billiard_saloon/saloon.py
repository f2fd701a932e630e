"""Reservation, ordering and checkout over a fixed fleet of tables."""

from collections.abc import Iterable

from .config import SaloonConfig
from .models import Product, Table, TableType
from .results import Err, Ok, Result, SaloonError


class Saloon:
    """Owns the tables and resolves reservation numbers to them.

    A reservation number is the identifier of the reserved table. Tables are
    kept in the order they were given; that order decides which free table a
    reservation picks.
    """

    def __init__(self, tables: Iterable[Table]):
        self._tables: list[Table] = list(tables)
        seen: set[int] = set()
        for table in self._tables:
            if table.id in seen:
                raise ValueError(f"Duplicate table id: {table.id}")
            seen.add(table.id)

    @property
    def tables(self) -> tuple[Table, ...]:
        """All tables in storage order."""
        return tuple(self._tables)

    def reserve_table(self, table_type: TableType) -> Result[int]:
        """Reserve the first free table of the given type.

        Returns:
            Ok with the reservation number, or Err(NO_FREE_TABLE)
        """
        free_tables = self.get_free_tables_by_type(table_type)
        if not free_tables:
            return Err(SaloonError.NO_FREE_TABLE)
        table = free_tables[0]
        table.reserve()
        return Ok(table.id)

    def order(self, reservation_number: int, product: Product) -> Result[None]:
        """Add a product to the bill of the table with that reservation number."""
        match self.get_table(reservation_number):
            case Ok(value=table):
                table.add_order(product)
                return Ok(None)
            case err:
                return err

    def leave(self, reservation_number: int) -> Result[int]:
        """Check out the table and return its final cost."""
        match self.get_table(reservation_number):
            case Ok(value=table):
                return Ok(table.free_up())
            case err:
                return err

    def get_free_tables_by_type(self, table_type: TableType) -> list[Table]:
        """Free tables of the given type, in storage order."""
        return [
            table for table in self._tables if table.type == table_type and not table.occupied
        ]

    def get_reserved_table_with_highest_consumption(self) -> Table | None:
        """Table with the highest running cost.

        The first table is always taken as the starting candidate, occupied or
        not. A later table only overtakes it when occupied and strictly more
        expensive than the current candidate. Returns None for an empty saloon.

        The running highest follows the candidate's cost. The legacy saloon
        program kept it at 0, which let any later occupied table win, e.g.
        ``[1 (BILLIARD) free, 6 (REX) occupied]`` gave table 6; here it gives 1.
        """
        highest_consumption = 0
        candidate: Table | None = None
        for table in self._tables:
            cost = table.calculate_cost()
            if candidate is None or (table.occupied and cost > highest_consumption):
                candidate = table
                highest_consumption = cost
        return candidate

    def get_table(self, reservation_number: int) -> Result[Table]:
        """Resolve a reservation number to its table by exact id match."""
        for table in self._tables:
            if table.id == reservation_number:
                return Ok(table)
        return Err(SaloonError.NO_SUCH_RESERVATION_NUMBER)


def create_saloon(config: SaloonConfig) -> Saloon:
    """Build a saloon with the fleet described by the configuration."""
    return Saloon(Table(entry.id, entry.type) for entry in config.tables)
